"""FastAPI application factory."""

from __future__ import annotations

import logging

from cosmic_calendar.config import get_settings
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers import health, public

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=get_settings().log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    _configure_logging()
    settings = get_settings()
    app = FastAPI(title="Cosmic Calendar API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.site_url],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.include_router(health.router, tags=["health"])
    app.include_router(public.router, prefix="/v1", tags=["public"])
    logger.info("Cosmic Calendar API configured with calendar timezone %s", settings.timezone)
    return app


app = create_app()
