"""Helpers that convert ORM models into publishable events."""

from __future__ import annotations

from app.api.events.models import InquiryEvent, InquiryEventName
from app.api.modules.v1.inquiries.models.inquiry_model import Inquiry
from app.api.modules.v1.inquiries.schemas.inquiry_schema import InquiryResponse


def build_inquiry_accepted_event(inquiry: Inquiry) -> InquiryEvent:
    """Transform an accepted inquiry into the event administrators are notified from.

    Args:
        inquiry (Inquiry): Persisted inquiry that has just moved to accepted.

    Returns:
        InquiryEvent: Event ready for publishing.

    Examples:
        >>> event = build_inquiry_accepted_event(inquiry)
        >>> event.event
        'inquiry.accepted'
    """

    payload = InquiryResponse.model_validate(inquiry).model_dump(mode="json")
    return InquiryEvent(
        event=InquiryEventName.ACCEPTED.value,
        payload=payload,
        recipient_ids=[inquiry.company_id, inquiry.consultant_id],
    )
