"""FastAPI application factory and entrypoint."""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from royale_decks.api.routes import build_api_router, root_router
from royale_decks.core.config import Settings, get_settings
from royale_decks.core.db import Database
from royale_decks.core.errors import register_exception_handlers
from royale_decks.core.logging import configure_logging
from royale_decks.core.middleware import (
    AccessLogMiddleware,
    RequestIDMiddleware,
    RequestSizeLimitMiddleware,
    SecurityHeadersMiddleware,
)
from royale_decks.core.security import PasswordHasher, TokenService
from royale_decks.core.version import APP_VERSION

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Authorization", "Content-Type", "Accept", "X-Requested-With", "X-Request-ID"]

logger = logging.getLogger("royale_decks.main")


def create_app(
    settings: Settings | None = None,
    *,
    database: Database | None = None,
    password_hasher: PasswordHasher | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application.

    Collaborators default to ones derived from ``settings``; tests pass their
    own database and a cheaper password hasher.
    """

    settings = settings or get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title=settings.project_name,
        debug=settings.debug,
        version=APP_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    application.state.settings = settings
    application.state.database = database or Database(
        settings.database_url,
        echo=settings.sql_echo,
    )
    application.state.token_service = TokenService.from_settings(settings)
    application.state.password_hasher = password_hasher or PasswordHasher()
    application.state.started_at = time.monotonic()

    register_exception_handlers(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        max_age=86400,
    )
    application.add_middleware(
        SecurityHeadersMiddleware,
        enable_hsts=settings.environment in {"staging", "production"},
    )
    application.add_middleware(AccessLogMiddleware, skip_paths=("/health",))
    application.add_middleware(
        RequestSizeLimitMiddleware,
        max_request_bytes=settings.max_request_bytes,
    )
    application.add_middleware(RequestIDMiddleware)

    application.include_router(root_router)
    application.include_router(build_api_router(settings.api_prefix))

    @application.on_event("startup")
    async def _prepare_database() -> None:
        if settings.auto_create_schema:
            await application.state.database.create_schema()
            logger.info("Database schema ensured")

    @application.on_event("shutdown")
    async def _dispose_database() -> None:
        await application.state.database.dispose()

    return application


app = create_app()

__all__ = ["app", "create_app"]
