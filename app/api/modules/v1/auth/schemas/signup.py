from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from app.api.modules.v1.users.models.users_model import UserRole
from app.api.modules.v1.users.schemas.user_schema import UserResponse


class SignupRequest(BaseModel):
    name: str = Field(..., max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8)
    role: UserRole
    headline: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return str(v).strip().lower() if v is not None else v

    @field_validator("headline", "bio")
    @classmethod
    def blank_to_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Quality Partners Ltd",
                "email": "hello@qualitypartners.com",
                "password": "S3cure-pass!",
                "role": "consultant",
                "headline": "Lead auditor for ISO 9001 and ISO 14001",
            }
        }
    }


class SignupResponse(BaseModel):
    message: str
    user: UserResponse
