"""Construction and injection of the event publisher."""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import Request
from redis.asyncio import Redis

from app.api.core.config import Settings
from app.api.events.models import EventTopic
from app.api.events.providers.redis_pubsub import RedisEventPublisher
from app.api.events.publisher import EventPublisher, LoggingEventPublisher

logger = logging.getLogger("app")


def _channel_map(settings: Settings) -> Dict[EventTopic, str]:
    """Return EventTopic-aware Redis channel mappings.

    Examples:
        >>> _channel_map(settings)[EventTopic.INQUIRIES]
        'events:inquiries'
    """

    return {EventTopic(topic): channel for topic, channel in settings.EVENT_CHANNEL_MAP.items()}


async def build_event_publisher(settings: Settings) -> EventPublisher:
    """Create the publisher for this process from configuration.

    Falls back to LoggingEventPublisher when realtime events are disabled.

    Args:
        settings (Settings): Application settings.

    Returns:
        EventPublisher: Publisher to store on the application state.

    Raises:
        redis.exceptions.ConnectionError: If Redis is enabled but unreachable.
    """

    if not settings.ENABLE_REALTIME_EVENTS:
        logger.info("Realtime events disabled; inquiry events will only be logged")
        return LoggingEventPublisher()

    redis_client = Redis.from_url(
        settings.REDIS_URL,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_keepalive=True,
    )
    await redis_client.ping()
    logger.info("Redis event publisher connected")
    return RedisEventPublisher(redis_client=redis_client, channel_map=_channel_map(settings))


def get_event_publisher(request: Request) -> EventPublisher:
    """FastAPI dependency returning the publisher built during application startup."""

    publisher = getattr(request.app.state, "event_publisher", None)
    if publisher is None:
        publisher = LoggingEventPublisher()
        request.app.state.event_publisher = publisher
    return publisher
