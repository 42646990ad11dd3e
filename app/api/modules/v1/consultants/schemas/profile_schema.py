from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


def dedupe(values: List[str]) -> List[str]:
    """Strip, drop blanks and duplicates while keeping first-seen order."""
    seen = []
    for value in values:
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return seen


class ConsultantProfileResponse(BaseModel):
    id: UUID
    user_id: UUID
    headline: Optional[str] = None
    bio: Optional[str] = None
    standards: List[str] = []
    industries: List[str] = []
    certifications: List[str] = []
    regions: List[str] = []
    languages: List[str] = []
    availability: Optional[str] = None
    verified: bool
    profile_picture_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConsultantResponse(BaseModel):
    """A consultant user together with their profile, as shown in the directory."""

    id: UUID
    name: str
    email: str
    profile: ConsultantProfileResponse


class ConsultantProfileUpdate(BaseModel):
    """
    Partial profile update. Only fields present in the request body are applied;
    the verification flag is deliberately absent.
    """

    headline: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = None
    availability: Optional[str] = Field(None, max_length=255)
    profile_picture_url: Optional[str] = Field(None, max_length=500)
    standards: Optional[List[str]] = None
    industries: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    regions: Optional[List[str]] = None
    languages: Optional[List[str]] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("standards", "industries", "certifications", "regions", "languages")
    @classmethod
    def as_set(cls, v):
        if v is None:
            return v
        return dedupe(v)


class VerifyConsultantRequest(BaseModel):
    """`verified` is type-checked by the service, which reports non-booleans as 400."""

    verified: Any = None


class DirectoryCriteria(BaseModel):
    """Directory filter criteria. Blank values, and "all" on set filters, disable a criterion."""

    search: Optional[str] = None
    standard: Optional[str] = None
    industry: Optional[str] = None
    region: Optional[str] = None

    @field_validator("search")
    @classmethod
    def normalize_search(cls, v):
        if v is None:
            return None
        return v.strip() or None

    @field_validator("standard", "industry", "region")
    @classmethod
    def normalize_set_filter(cls, v):
        if v is None:
            return None
        v = v.strip()
        if not v or v.lower() == "all":
            return None
        return v
