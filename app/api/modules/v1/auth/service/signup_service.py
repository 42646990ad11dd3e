import logging
import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.domain_exceptions import DuplicateAccount, SignupFailed
from app.api.modules.v1.auth.schemas.signup import SignupRequest
from app.api.modules.v1.auth.service.identity_store import IdentityStore
from app.api.modules.v1.consultants.service.profile_service import ConsultantProfileService
from app.api.modules.v1.users.models.users_model import User, UserRole
from app.api.modules.v1.users.service.user import UserCRUD
from app.api.utils.password import hash_password
from app.api.utils.saga import Saga, SagaStepError

logger = logging.getLogger("app")


class SignupService:
    """
    Service class to handle account registration.

    Registration writes to the identity store, the users table and, for
    consultants, the profile table. Each write commits on its own, so a
    failure part-way undoes the earlier writes before reporting one error.

    Attributes:
        db: Async database session for data operations
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.identities = IdentityStore(db)
        self.profiles = ConsultantProfileService(db)

    async def signup(self, payload: SignupRequest) -> User:
        """
        Register a company, consultant or admin account.

        Args:
            payload: Validated signup request

        Returns:
            User: The created user record

        Raises:
            DuplicateAccount: Email already registered
            SignupFailed: A step failed; every completed step was compensated
        """
        logger.info("Starting signup for email=%s role=%s", payload.email, payload.role.value)

        if await UserCRUD.get_by_email(self.db, payload.email) or await self.identities.get_by_email(
            payload.email
        ):
            raise DuplicateAccount()

        account_id = uuid.uuid4()
        password_hash = hash_password(payload.password)

        saga = Saga("signup", on_failure=self.db.rollback)
        try:
            await saga.run(
                "auth_identity",
                lambda: self.identities.create_identity(account_id, payload.email, password_hash),
                compensate=lambda _: self.identities.delete_identity(account_id),
            )
            user = await saga.run(
                "user_record",
                lambda: UserCRUD.create_user(
                    self.db,
                    user_id=account_id,
                    email=payload.email,
                    name=payload.name,
                    role=payload.role,
                    password_hash=password_hash,
                ),
                compensate=lambda _: UserCRUD.delete_user(self.db, account_id),
            )
            if payload.role == UserRole.CONSULTANT:
                await saga.run(
                    "consultant_profile",
                    lambda: self.profiles.create_profile(
                        account_id, headline=payload.headline, bio=payload.bio
                    ),
                )
        except SagaStepError as e:
            if e.step == "auth_identity" and isinstance(e.cause, IntegrityError):
                raise DuplicateAccount() from e
            logger.error("Signup failed for email=%s at step=%s", payload.email, e.step)
            raise SignupFailed() from e

        logger.info("Signup completed: user_id=%s role=%s", account_id, payload.role.value)
        return user
