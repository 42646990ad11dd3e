import logging
from typing import Any, List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.api.core.domain_exceptions import Forbidden
from app.api.modules.v1.auth.schemas.identity import Identity
from app.api.modules.v1.consultants.schemas.profile_schema import (
    ConsultantProfileResponse,
    ConsultantResponse,
)
from app.api.modules.v1.consultants.service.profile_service import ConsultantProfileService

logger = logging.getLogger("app")


class AdminVerificationService:
    """
    Admin-facing wrapper around consultant verification.

    The admin role is checked here and again by ConsultantProfileService.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.profiles = ConsultantProfileService(db)

    @staticmethod
    def _require_admin(caller: Identity) -> None:
        if not caller.is_admin:
            logger.warning("Admin operation denied for caller=%s role=%s", caller.id, caller.role)
            raise Forbidden("Admin access required")

    async def set_verified(
        self, caller: Identity, consultant_id: UUID, verified: Any
    ) -> ConsultantProfileResponse:
        self._require_admin(caller)
        return await self.profiles.set_verified(caller, consultant_id, verified)

    async def list_consultants(
        self, caller: Identity, verified: Optional[bool] = None
    ) -> List[ConsultantResponse]:
        self._require_admin(caller)
        return await self.profiles.list_all(verified=verified)
