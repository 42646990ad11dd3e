import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.config import settings
from app.api.core.domain_exceptions import InvalidCredentials
from app.api.modules.v1.auth.schemas.login import LoginResponse
from app.api.modules.v1.auth.service.identity_store import IdentityStore
from app.api.modules.v1.users.schemas.user_schema import UserResponse
from app.api.modules.v1.users.service.user import UserCRUD
from app.api.utils.jwt import create_access_token
from app.api.utils.password import verify_password

logger = logging.getLogger("app")


class LoginService:
    """Password login against the identity store, issuing bearer tokens."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.identities = IdentityStore(db)

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate with email and password.

        Args:
            email: Account email
            password: Plain text password

        Returns:
            LoginResponse: Access token and user summary

        Raises:
            InvalidCredentials: Unknown email, wrong password, or no user record
        """
        identity = await self.identities.get_by_email(email)
        if identity is None or not verify_password(password, identity.hashed_password):
            logger.warning("Failed login attempt for email=%s", email)
            raise InvalidCredentials()

        user = await UserCRUD.get_by_id(self.db, identity.id)
        if user is None:
            logger.warning("Auth identity without user record: identity_id=%s", identity.id)
            raise InvalidCredentials()

        access_token = create_access_token(user_id=str(user.id), role=user.role.value)
        logger.info("User logged in: user_id=%s role=%s", user.id, user.role.value)

        return LoginResponse(
            access_token=access_token,
            expires_in=settings.JWT_EXPIRY_HOURS * 3600,
            user=UserResponse.model_validate(user),
        )
