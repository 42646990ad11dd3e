"""Redis-backed event publisher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from redis.asyncio import Redis

from app.api.events.models import BaseEvent, EventTopic
from app.api.events.publisher import EventPublisher


@dataclass(slots=True)
class RedisEventPublisher(EventPublisher):
    """Publish events to Redis channels derived from topics."""

    redis_client: Redis
    channel_map: Mapping[EventTopic, str]

    async def publish(self, event: BaseEvent) -> None:
        """Publish the event to the configured Redis channel.

        Args:
            event (BaseEvent): Event that should be serialized and broadcast.

        Raises:
            ValueError: When the topic lacks a configured channel.

        Examples:
            >>> await publisher.publish(some_event)
        """

        topic = EventTopic(event.topic)
        channel = self.channel_map.get(topic)
        if not channel:
            raise ValueError(f"No Redis channel configured for topic {topic}")
        await self.redis_client.publish(channel, event.dump_json())

    async def close(self) -> None:
        await self.redis_client.close()
        await self.redis_client.connection_pool.disconnect()
