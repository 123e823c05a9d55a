"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Wires infrastructure only:
logging, telemetry, the shared search HTTP client, the Redis cache, and
the SQL engine dispose.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from whitehall.core.config import get_settings
from whitehall.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, telemetry (if enabled), search HTTP client,
    Redis cache (if enabled). Shutdown runs in reverse and disposes the
    SQL engine last.
    """
    settings = get_settings()
    setup_logging()

    # ---- Startup ----
    if settings.telemetry_enabled:
        from whitehall.shared.telemetry.telemetry import TelemetryConfig, set_telemetry

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

    search_config = settings.search_config()
    app.state.search_config = search_config
    app.state.search_http_client = httpx.AsyncClient(timeout=search_config.timeout_seconds)
    logger.info("Search provider: %s", search_config.advanced_search_url)

    if settings.redis_enabled:
        from whitehall.infrastructure.cache.redis_cache import CacheService

        cache = CacheService(settings=settings)
        await cache.connect()
        app.state.cache = cache
    else:
        app.state.cache = None

    yield

    # ---- Shutdown ----
    if getattr(app.state, "cache", None) is not None:
        await app.state.cache.disconnect()
        app.state.cache = None

    await app.state.search_http_client.aclose()
    app.state.search_http_client = None
    logger.info("Search HTTP client closed")

    from whitehall.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)

    from whitehall.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
