"""Usuarios API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the uniform ErrorResponse body
    - CORS configured from settings (not hardcoded)
    - DatabaseSessionManager constructed in create_app and held on app.state — no ambient lookup

Design Decisions:
    - App factory: tests and the ASGI entry point wire their own settings and db manager
    - Lifespan over @app.on_event: logging + schema creation on startup, engine disposal on shutdown
    - Four error handler layers (see api/error_handlers.py) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import models  # noqa: F401  (registers tables on Base.metadata)
from app.api.error_handlers import register_error_handlers
from app.api.routes import health, usuarios
from app.config import Settings, get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    db_manager: DatabaseSessionManager = app.state.db_manager
    setup_logging(settings.log_level, settings.log_format)
    if settings.database_create_schema:
        await db_manager.create_schema()
    logger.info("Usuarios API started")
    yield
    logger.info("Usuarios API shutting down")
    await db_manager.dispose()


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the application with explicitly constructed collaborators."""
    settings = settings or get_settings()
    application = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.db_manager = db_manager or DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        allow_credentials=True,
        max_age=3600,
    )

    # Routes — explicit registration
    application.include_router(health.router)
    application.include_router(usuarios.router)

    register_error_handlers(application)
    return application


app = create_app()
