"""Data models for domain events published to external collaborators."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class EventTopic(str, Enum):
    """Supported logical channels for outbound events."""

    INQUIRIES = "inquiries"


class InquiryEventName(str, Enum):
    ACCEPTED = "inquiry.accepted"


class BaseEvent(BaseModel):
    """Generic event payload shared across consumers.

    Args:
        topic (EventTopic): Logical stream the event belongs to.
        event (str): Specific event identifier (e.g. inquiry.accepted).
        payload_version (str): Semantic version of the payload contract.
        payload (Dict[str, Any]): Concrete event data.
        recipient_ids (List[uuid.UUID]): Users the event concerns.
        trace_id (str): Correlation identifier for observability.
        occurred_at (datetime): UTC timestamp for when the event happened.

    Examples:
        >>> event = BaseEvent(
        ...     topic=EventTopic.INQUIRIES,
        ...     event="inquiry.accepted",
        ...     payload={"inquiry_id": "abc"},
        ... )
        >>> event.topic
        <EventTopic.INQUIRIES: 'inquiries'>
    """

    model_config = ConfigDict(extra="allow")

    topic: EventTopic
    event: str
    payload_version: str = Field(default="1.0")
    payload: Dict[str, Any]
    recipient_ids: List[uuid.UUID] = Field(default_factory=list)
    trace_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def dump_json(self) -> str:
        """Serialize events into JSON strings ready for transports."""

        return self.model_dump_json()


class InquiryEvent(BaseEvent):
    """Event emitted for inquiry lifecycle changes."""

    topic: EventTopic = Field(default=EventTopic.INQUIRIES, frozen=True)
