from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.api.modules.v1.inquiries.models.inquiry_model import InquiryMode, InquiryStatus
from app.api.modules.v1.users.schemas.user_schema import UserSummary


class InquiryCreateRequest(BaseModel):
    """
    Payload for a new inquiry.

    `message` and `mode` arrive as plain strings so that blank messages and
    unknown modes are reported by the lifecycle rules with their own error codes,
    and missing fields are client errors (400) rather than schema failures.
    """

    consultant_id: Optional[UUID] = None
    message: Optional[str] = None
    timing: Optional[str] = Field(None, max_length=255)
    mode: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "consultant_id": "123e4567-e89b-12d3-a456-426614174000",
                "message": "Need ISO 9001 help",
                "timing": "Q3 2026",
                "mode": "remote",
            }
        }
    }


class InquiryStatusUpdateRequest(BaseModel):
    # Any JSON value; non-strings are rejected as INVALID_STATUS by the lifecycle rules
    status: Any = None


class InquiryResponse(BaseModel):
    id: UUID
    company_id: UUID
    consultant_id: UUID
    message: str
    timing: Optional[str] = None
    mode: InquiryMode
    status: InquiryStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConsultantSummary(UserSummary):
    headline: Optional[str] = None
    verified: bool = False


class InquiryListItem(InquiryResponse):
    """Inquiry with the counter-party details visible to the caller."""

    company: Optional[UserSummary] = None
    consultant: Optional[ConsultantSummary] = None


class InquiryListResponse(BaseModel):
    inquiries: List[InquiryListItem]
    total: int
