"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skyfinder_core.cache import SuggestionCache

from .config import ApiSettings, settings
from .errors import register_error_handlers
from .logging_setup import configure_logging
from .providers import AmadeusClient
from .routers import airports, flights, route_map
from .schemas.common import HealthResponse

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage startup / shutdown resources."""
    logger.info(
        "Skyfinder API starting (amadeus hostname=%s, credentials=%s)",
        app.state.settings.amadeus_hostname,
        "set" if app.state.settings.has_amadeus_credentials else "missing",
    )
    yield
    await app.state.provider.close()
    logger.info("Skyfinder API stopped")


def create_app(api_settings: ApiSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    api_settings = api_settings or settings
    configure_logging(api_settings.log_level)

    app = FastAPI(
        title="Skyfinder API",
        version="0.1.0",
        lifespan=_lifespan,
    )
    app.state.settings = api_settings
    app.state.provider = AmadeusClient(api_settings)
    app.state.suggestion_cache = SuggestionCache(
        ttl_seconds=api_settings.suggestion_cache_ttl,
        max_entries=api_settings.suggestion_cache_max_entries,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Routers
    _prefix = "/api"
    app.include_router(airports.router, prefix=_prefix)
    app.include_router(flights.router, prefix=_prefix)
    app.include_router(route_map.router, prefix=_prefix)

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse()

    return app


app = create_app()
