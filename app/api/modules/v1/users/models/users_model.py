import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.api.modules.v1.consultants.models.profile_model import ConsultantProfile


class UserRole(str, Enum):
    """Closed set of account roles. A user's role never changes after signup."""

    COMPANY = "company"
    CONSULTANT = "consultant"
    ADMIN = "admin"


class User(SQLModel, table=True):
    __tablename__ = "users"

    # Same value as the auth identity id issued at signup.
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)

    role: UserRole = Field(nullable=False, index=True)
    name: str = Field(index=True, max_length=255)
    email: str = Field(max_length=255, nullable=False, unique=True, index=True)
    password_hash: Optional[str] = Field(default=None, max_length=255, nullable=True)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )

    consultant_profile: Optional["ConsultantProfile"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"uselist": False, "lazy": "selectin"},
    )

    def __repr__(self):
        return f"<User(email={self.email}, role={self.role})>"


# Register the related mapper so the relationship resolves whichever module loads first.
import app.api.modules.v1.consultants.models.profile_model  # noqa: E402,F401
