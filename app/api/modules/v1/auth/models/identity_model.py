import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel


class AuthIdentity(SQLModel, table=True):
    """
    Credential record owned by the identity store.

    Kept apart from the `users` record store: signup writes both and must
    compensate on partial failure since they do not share a transaction.
    """

    __tablename__ = "auth_identities"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False)
    email: str = Field(max_length=255, nullable=False, unique=True, index=True)
    hashed_password: str = Field(max_length=255, nullable=False)

    created_at: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False),
        default_factory=lambda: datetime.now(timezone.utc),
    )
