"""Publisher interfaces for emitting domain events."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from app.api.events.models import BaseEvent

logger = logging.getLogger("app")


class EventPublisher(ABC):
    """Abstract publisher used by services to emit events.

    Subclasses hide the underlying transport (Redis, message bus, etc.).
    """

    @abstractmethod
    async def publish(self, event: BaseEvent) -> None:
        """Emit the supplied event through the configured transport.

        Args:
            event (BaseEvent): Event to be propagated.

        Raises:
            ValueError: When the implementation rejects the event payload.
        """

    async def close(self) -> None:
        """Release transport resources. No-op unless the transport holds any."""


class LoggingEventPublisher(EventPublisher):
    """Publisher used when no transport is configured: records events in the log only."""

    async def publish(self, event: BaseEvent) -> None:
        logger.info(
            "Event %s on topic=%s trace_id=%s (no transport configured)",
            event.event,
            event.topic.value,
            event.trace_id,
        )
