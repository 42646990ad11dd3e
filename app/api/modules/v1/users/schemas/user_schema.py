from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.api.modules.v1.users.models.users_model import UserRole


class UserResponse(BaseModel):
    id: UUID
    email: str
    name: str
    role: UserRole
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """Counter-party details embedded in inquiry listings."""

    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)
