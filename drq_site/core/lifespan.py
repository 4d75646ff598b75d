"""Application state and lifespan: startup and shutdown.

init_app_state() builds the per-application objects (catalog, result
cache, repositories, tracking, suggestion engine) and is called from
create_app(), so they exist even when the ASGI lifespan is not run.
The lifespan only owns async resources: the cache sweep task and telemetry.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from drq_site.application.services.suggestion_engine import SuggestionEngine
from drq_site.application.services.tracking_service import TrackingService
from drq_site.core.config import Settings, get_settings
from drq_site.infrastructure.cache.memory_cache import ResultCache, run_periodic_sweep
from drq_site.infrastructure.catalog import build_default_catalog
from drq_site.infrastructure.persistence.repositories import (
    InMemoryAnalyticsRepository,
    InMemoryContactRepository,
    InMemoryEmergencyRequestRepository,
    StaticServiceAreaRepository,
)
from drq_site.shared.telemetry.sinks import build_tracking_sink

logger = logging.getLogger(__name__)


def init_app_state(app: FastAPI, settings: Settings) -> None:
    """Attach catalog, cache, repositories and tracking to app.state."""
    catalog = build_default_catalog()
    app.state.catalog = catalog
    app.state.cache = ResultCache()
    app.state.service_area_repo = StaticServiceAreaRepository()
    app.state.emergency_repo = InMemoryEmergencyRequestRepository(
        response_time=settings.emergency_response_time
    )
    app.state.contact_repo = InMemoryContactRepository()
    app.state.analytics_repo = InMemoryAnalyticsRepository(settings.analytics_max_events)
    app.state.tracking = TrackingService(build_tracking_sink(settings))
    app.state.suggestion_engine = SuggestionEngine(catalog)
    app.state.cache_sweep_task = None
    logger.info("Catalog loaded: %s entries", len(catalog))


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: cache sweep task (if CACHE_SWEEP_INTERVAL_SECONDS > 0),
    telemetry (if enabled). Shutdown: cancel sweep, flush telemetry.
    """
    settings = get_settings()

    # ---- Startup ----
    if settings.cache_sweep_interval_seconds > 0:
        app.state.cache_sweep_task = asyncio.create_task(
            run_periodic_sweep(app.state.cache, settings.cache_sweep_interval_seconds)
        )

    if settings.telemetry_enabled:
        from drq_site.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

        telemetry = TelemetryConfig(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=True,
            environment=settings.telemetry_environment,
        )
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)
        logger.info("Telemetry initialized")

    yield

    # ---- Shutdown ----
    sweep_task = getattr(app.state, "cache_sweep_task", None)
    if sweep_task is not None:
        sweep_task.cancel()
        try:
            await sweep_task
        except asyncio.CancelledError:
            pass
        app.state.cache_sweep_task = None
        logger.info("Cache sweep task stopped")

    from drq_site.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
