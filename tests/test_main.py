"""Tests covering application wiring: liveness endpoints and lifespan."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import main
from app.api.events.publisher import LoggingEventPublisher


class _AsyncContextManager:
    """Minimal async context manager stub."""

    def __init__(self, enter_result):
        self._enter_result = enter_result

    async def __aenter__(self):
        return self._enter_result

    async def __aexit__(self, exc_type, exc, tb):
        return False


@pytest.fixture
def engine_mock(monkeypatch):
    conn = SimpleNamespace(run_sync=AsyncMock())
    engine = MagicMock()
    engine.begin.return_value = _AsyncContextManager(conn)
    engine.dispose = AsyncMock()
    monkeypatch.setattr(main, "engine", engine)
    return engine


def test_root_and_health():
    client = TestClient(main.app)

    root = client.get("/")
    health = client.get("/health")

    assert root.status_code == 200
    assert root.json()["data"]["version"] == main.settings.APP_VERSION
    assert health.json()["message"] == "API is healthy"


@pytest.mark.asyncio
async def test_lifespan_builds_and_closes_publisher(engine_mock, monkeypatch):
    publisher = MagicMock()
    publisher.close = AsyncMock()
    monkeypatch.setattr(main, "build_event_publisher", AsyncMock(return_value=publisher))
    app = FastAPI()

    async with main.lifespan(app):
        assert app.state.event_publisher is publisher

    publisher.close.assert_awaited_once()
    engine_mock.dispose.assert_awaited_once()


@pytest.mark.asyncio
async def test_lifespan_falls_back_when_redis_unreachable(engine_mock, monkeypatch):
    monkeypatch.setattr(
        main, "build_event_publisher", AsyncMock(side_effect=ConnectionError("redis down"))
    )
    app = FastAPI()

    async with main.lifespan(app):
        assert isinstance(app.state.event_publisher, LoggingEventPublisher)

    engine_mock.dispose.assert_awaited_once()
