import logging
import uuid
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.modules.v1.auth.models.identity_model import AuthIdentity

logger = logging.getLogger("app")


class IdentityStore:
    """Credential storage, kept apart from the users record store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_identity(
        self, identity_id: uuid.UUID, email: str, hashed_password: str
    ) -> AuthIdentity:
        identity = AuthIdentity(id=identity_id, email=email, hashed_password=hashed_password)
        self.db.add(identity)
        await self.db.commit()
        logger.info("Created auth identity: id=%s", identity_id)
        return identity

    async def get_by_email(self, email: str) -> Optional[AuthIdentity]:
        return await self.db.scalar(select(AuthIdentity).where(AuthIdentity.email == email.lower()))

    async def delete_identity(self, identity_id: uuid.UUID) -> None:
        await self.db.execute(delete(AuthIdentity).where(AuthIdentity.id == identity_id))
        await self.db.commit()
        logger.info("Deleted auth identity: id=%s", identity_id)
