"""Pytest configuration and fixtures for the site API.

HTTP tests get a freshly built app per test (own result cache and
repositories) through the client fixture. Rate limiting is switched off
so repeated requests from the test client are never throttled.
"""

import os
from typing import Any

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("TRACKING_SINK", "none")
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from drq_site.application.services.tracking_service import TrackingService
from drq_site.core.config import get_settings
from drq_site.infrastructure.catalog import StaticCatalog, build_default_catalog

get_settings.cache_clear()


class RecordingSink:
    """Tracking sink that keeps every emitted event for assertions."""

    def __init__(self) -> None:
        self.events: list[dict[str, Any]] = []

    def emit(self, event, category, action, label=None, value=None, attributes=None) -> None:
        self.events.append(
            {
                "event": event,
                "category": category,
                "action": action,
                "label": label,
                "value": value,
                "attributes": attributes,
            }
        )

    def names(self) -> list[str]:
        return [e["event"] for e in self.events]


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def catalog() -> StaticCatalog:
    return build_default_catalog()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def tracking(sink: RecordingSink) -> TrackingService:
    return TrackingService(sink)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def app() -> FastAPI:
    """A new application instance (fresh cache and in-memory repositories)."""
    from drq_site.main import create_app

    return create_app()


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
