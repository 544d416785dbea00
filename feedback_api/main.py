"""
Feedback Relay API

Thin FastAPI backend that forwards feedback widget submissions to the
maintainers through EmailJS.

Run with ``uvicorn feedback_api.main:create_app --factory``.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from feedback_api.config import Settings, get_settings
from feedback_api.errors import (
    FeedbackAPIError,
    feedback_api_error_handler,
    unhandled_exception_handler,
)
from feedback_api.middleware import (
    RequestIDLogFilter,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
)
from feedback_api.routers import feedback
from feedback_api.services.http_client import close_shared_client

logger = logging.getLogger(__name__)

SERVICE_NAME = "feedback-relay-api"
VERSION = "0.1.0"
API_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once, tagging records with the request ID."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, RequestIDLogFilter) for f in handler.filters):
            handler.addFilter(RequestIDLogFilter())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "Starting %s %s (%s), relaying to %s",
        SERVICE_NAME,
        VERSION,
        settings.environment,
        settings.emailjs_url,
    )
    yield
    await close_shared_client()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Without explicit ``settings`` the environment is read; missing EmailJS
    credentials raise ``pydantic.ValidationError`` here, before serving.
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(
        title="Feedback Relay API",
        description="Relays product feedback to the maintainers by email",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Error shapes
    app.add_exception_handler(FeedbackAPIError, feedback_api_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Security headers (innermost), CORS, then request ID (outermost)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )
    app.add_middleware(RequestIDMiddleware)

    # Routers
    app.include_router(feedback.router, prefix=API_PREFIX)

    @app.get(f"{API_PREFIX}/health")
    async def health_check() -> dict[str, str]:
        """Liveness check. Configuration was validated at startup."""
        return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}

    return app
