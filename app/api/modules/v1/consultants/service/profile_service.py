import logging
from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.core.domain_exceptions import ConsultantNotFound, Forbidden, InvalidVerifiedFlag
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.consultants.models.profile_model import ConsultantProfile
from app.api.modules.v1.consultants.schemas.profile_schema import (
    ConsultantProfileResponse,
    ConsultantProfileUpdate,
    ConsultantResponse,
    DirectoryCriteria,
)
from app.api.modules.v1.consultants.service.directory_filter import (
    DirectoryEntry,
    filter_consultants,
)
from app.api.modules.v1.users.models.users_model import User, UserRole

logger = logging.getLogger("app")

SET_FIELDS = ("standards", "industries", "certifications", "regions", "languages")


def to_consultant_response(user: User, profile: ConsultantProfile) -> ConsultantResponse:
    return ConsultantResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        profile=ConsultantProfileResponse.model_validate(profile),
    )


class ConsultantProfileService:
    """
    Service class for consultant profile business logic.

    Owners may edit their own profile and admins may edit any profile;
    only admins may change the verification flag.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_profile(
        self,
        owner_id: UUID,
        headline: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> ConsultantProfile:
        """
        Create the empty, unverified profile of a newly registered consultant.

        Args:
            owner_id: Id of the consultant user
            headline: Optional headline supplied at signup
            bio: Optional bio supplied at signup

        Returns:
            ConsultantProfile: The committed profile
        """
        profile = ConsultantProfile(
            user_id=owner_id,
            headline=headline,
            bio=bio,
            standards=[],
            industries=[],
            certifications=[],
            regions=[],
            languages=[],
            verified=False,
        )
        self.db.add(profile)
        await self.db.commit()

        logger.info("Created consultant profile for user_id=%s", owner_id)
        return profile

    async def _get_consultant(self, target_id: UUID) -> Optional[User]:
        return await self.db.scalar(
            select(User)
            .where(User.id == target_id, User.role == UserRole.CONSULTANT)
            .execution_options(populate_existing=True)
        )

    async def _lock_profile(self, target_id: UUID) -> Optional[ConsultantProfile]:
        result = await self.db.execute(
            select(ConsultantProfile)
            .where(ConsultantProfile.user_id == target_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_profile(self, target_id: UUID, viewer: Optional[Identity]) -> ConsultantResponse:
        """
        Fetch a consultant with their profile.

        Unverified profiles are only visible to their owner and to admins; for
        everyone else they are reported exactly like a missing consultant.

        Args:
            target_id: Id of the consultant user
            viewer: Authenticated viewer, or None for anonymous access

        Returns:
            ConsultantResponse: Consultant and profile

        Raises:
            ConsultantNotFound: Absent, not a consultant, or hidden from this viewer
        """
        user = await self._get_consultant(target_id)
        profile = user.consultant_profile if user else None
        if profile is None:
            raise ConsultantNotFound()

        privileged = viewer is not None and (viewer.id == target_id or viewer.is_admin)
        if not profile.verified and not privileged:
            raise ConsultantNotFound()

        return to_consultant_response(user, profile)

    async def update_profile(
        self, caller: Identity, target_id: UUID, patch: ConsultantProfileUpdate
    ) -> ConsultantProfileResponse:
        """
        Apply a partial update to a consultant profile.

        Args:
            caller: Authenticated caller
            target_id: Id of the consultant whose profile is edited
            patch: Fields to change; fields absent from the request are left as is

        Returns:
            ConsultantProfileResponse: The updated profile

        Raises:
            Forbidden: Caller is neither the owner nor an admin
            ConsultantNotFound: No profile exists for target_id
        """
        if caller.id != target_id and not caller.is_admin:
            logger.warning("Profile update denied: caller=%s target=%s", caller.id, target_id)
            raise Forbidden()

        profile = await self._lock_profile(target_id)
        if profile is None:
            raise ConsultantNotFound()

        changes = patch.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if field in SET_FIELDS and value is None:
                value = []
            setattr(profile, field, value)

        profile.updated_at = datetime.now(timezone.utc)
        self.db.add(profile)
        await self.db.commit()
        await self.db.refresh(profile)

        logger.info(
            "Updated consultant profile user_id=%s fields=%s by caller=%s",
            target_id,
            sorted(changes),
            caller.id,
        )
        return ConsultantProfileResponse.model_validate(profile)

    async def set_verified(
        self, caller: Identity, target_id: UUID, verified: Any
    ) -> ConsultantProfileResponse:
        """
        Set the verification flag of a consultant profile.

        This is the only code path that writes `verified`.

        Args:
            caller: Authenticated caller, must be an admin
            target_id: Id of the consultant user
            verified: New flag value, must be a JSON boolean

        Returns:
            ConsultantProfileResponse: The updated profile

        Raises:
            Forbidden: Caller is not an admin; nothing is written
            InvalidVerifiedFlag: verified is not a boolean; nothing is written
            ConsultantNotFound: No profile exists for target_id
        """
        if not caller.is_admin:
            logger.warning("Verification change denied for caller=%s", caller.id)
            raise Forbidden()

        # 1 and "true" are not accepted as booleans
        if not isinstance(verified, bool):
            raise InvalidVerifiedFlag()

        result = await self.db.execute(
            update(ConsultantProfile)
            .where(ConsultantProfile.user_id == target_id)
            .values(verified=verified, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            await self.db.rollback()
            raise ConsultantNotFound()
        await self.db.commit()

        profile = await self.db.scalar(
            select(ConsultantProfile)
            .where(ConsultantProfile.user_id == target_id)
            .execution_options(populate_existing=True)
        )

        logger.info(
            "Consultant user_id=%s %s by admin=%s",
            target_id,
            "verified" if verified else "unverified",
            caller.id,
        )
        return ConsultantProfileResponse.model_validate(profile)

    async def _directory_entries(self, verified: Optional[bool]) -> List[DirectoryEntry]:
        statement = (
            select(User, ConsultantProfile)
            .join(ConsultantProfile, ConsultantProfile.user_id == User.id)
            .where(User.role == UserRole.CONSULTANT)
            .order_by(User.name)
        )
        if verified is not None:
            statement = statement.where(ConsultantProfile.verified == verified)

        result = await self.db.execute(statement)
        return [
            DirectoryEntry(user_id=user.id, name=user.name, email=user.email, profile=profile)
            for user, profile in result.all()
        ]

    async def list_verified(
        self, criteria: Optional[DirectoryCriteria] = None
    ) -> List[ConsultantResponse]:
        """Directory listing: verified consultants matching the criteria, ordered by name."""
        entries = filter_consultants(await self._directory_entries(verified=True), criteria)
        return [_entry_response(entry) for entry in entries]

    async def list_all(self, verified: Optional[bool] = None) -> List[ConsultantResponse]:
        """Every consultant regardless of verification, optionally filtered on the flag."""
        return [_entry_response(entry) for entry in await self._directory_entries(verified)]


def _entry_response(entry: DirectoryEntry) -> ConsultantResponse:
    return ConsultantResponse(
        id=entry.user_id,
        name=entry.name,
        email=entry.email,
        profile=ConsultantProfileResponse.model_validate(entry.profile),
    )
