import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlalchemy import Column, DateTime, Text
from sqlmodel import Field, SQLModel


class InquiryStatus(str, Enum):
    """Lifecycle status of an inquiry. Only `sent` is a legal initial state."""

    SENT = "sent"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    CLOSED = "closed"


class InquiryMode(str, Enum):
    """Delivery modality requested for the consulting engagement."""

    REMOTE = "remote"
    HYBRID = "hybrid"
    ONSITE = "onsite"


class Inquiry(SQLModel, table=True):
    """
    Contact request sent by a company to a consultant.

    Either party may read it; only the status ever changes after creation.
    """

    __tablename__ = "inquiries"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)

    company_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, index=True)
    consultant_id: uuid.UUID = Field(foreign_key="users.id", nullable=False, index=True)

    message: str = Field(sa_column=Column(Text, nullable=False))
    timing: Optional[str] = Field(default=None, max_length=255)
    mode: InquiryMode = Field(nullable=False)
    status: InquiryStatus = Field(default=InquiryStatus.SENT, nullable=False, index=True)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False, index=True),
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self):
        return f"<Inquiry(id={self.id}, status={self.status})>"
