from uuid import UUID

from pydantic import BaseModel, ConfigDict

from app.api.modules.v1.users.models.users_model import UserRole


class Identity(BaseModel):
    """Authenticated caller as resolved from a bearer token and the users table."""

    id: UUID
    role: UserRole
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
