"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from soundrex import __version__
from soundrex.api.errors import register_exception_handlers
from soundrex.api.routes import audio_router, health_router
from soundrex.config import SoundrexSettings, configure_logging, get_settings
from soundrex.resolution.orchestrator import AudioResolver

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the provider chain for the lifetime of the process."""
    settings: SoundrexSettings = app.state.settings
    configure_logging(settings.log_level)

    resolver = AudioResolver.from_settings(settings)
    app.state.audio_resolver = resolver
    names = ", ".join(p.provider_name.value for p in resolver.providers)
    logger.info(f"Audio resolver ready with providers: {names}")

    try:
        yield
    finally:
        await resolver.close()
        app.state.audio_resolver = None
        logger.info("Audio resolver closed")


def create_app(settings: SoundrexSettings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Soundrex API",
        description="Audio stream resolution for external video identifiers",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(audio_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
