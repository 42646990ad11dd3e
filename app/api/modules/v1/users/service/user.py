import logging
import uuid
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from app.api.modules.v1.users.models.users_model import User, UserRole

logger = logging.getLogger("app")


class UserCRUD:
    """CRUD operations for User model."""

    @staticmethod
    async def create_user(
        db: AsyncSession,
        user_id: uuid.UUID,
        email: str,
        name: str,
        role: UserRole,
        password_hash: Optional[str] = None,
    ) -> User:
        """
        Create and commit a user record.

        Args:
            db: Async database session
            user_id: Id issued by the identity store for this account
            email: User email address
            name: User's full or company name
            role: Account role, fixed for the lifetime of the account
            password_hash: bcrypt hash mirrored from the identity store

        Returns:
            User: Created user object
        """
        user = User(
            id=user_id,
            email=email,
            name=name,
            role=role,
            password_hash=password_hash,
        )

        db.add(user)
        await db.commit()

        logger.info("Created user: id=%s, role=%s", user_id, role.value)
        return user

    @staticmethod
    async def get_by_id(db: AsyncSession, user_id: uuid.UUID) -> Optional[User]:
        return await db.scalar(select(User).where(User.id == user_id))

    @staticmethod
    async def get_by_email(db: AsyncSession, email: str) -> Optional[User]:
        return await db.scalar(select(User).where(User.email == email.lower()))

    @staticmethod
    async def delete_user(db: AsyncSession, user_id: uuid.UUID) -> None:
        """Hard-delete a user record. Only used to compensate a failed signup."""
        await db.execute(delete(User).where(User.id == user_id))
        await db.commit()
        logger.info("Deleted user: id=%s", user_id)
