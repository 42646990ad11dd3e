import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, Column, DateTime, Text
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.api.modules.v1.users.models.users_model import User


class ConsultantProfile(SQLModel, table=True):
    """
    Public-facing profile of a consultant, one per user with role=consultant.

    The list columns are treated as sets: order carries no meaning and
    duplicates are dropped on write.
    """

    __tablename__ = "consultant_profiles"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)
    user_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    headline: Optional[str] = Field(default=None, max_length=255)
    bio: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    standards: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    industries: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    certifications: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    regions: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    languages: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    availability: Optional[str] = Field(default=None, max_length=255)
    verified: bool = Field(default=False, nullable=False, index=True)
    profile_picture_url: Optional[str] = Field(default=None, max_length=500)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )

    user: "User" = Relationship(back_populates="consultant_profile")

    def __repr__(self):
        return f"<ConsultantProfile(user_id={self.user_id}, verified={self.verified})>"


import app.api.modules.v1.users.models.users_model  # noqa: E402,F401
