"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Unmatched-route dispatch, driven by settings
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import Settings, settings
from app.interfaces.health import router as health_router
from app.interfaces.sample.router import router as sample_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.routing.dispatch import throw_exception_if_no_handler_found
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import (
    limiter,
    rate_limit_exceeded_handler,
    set_default_limit,
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings to build from. Defaults to the
            process-wide settings loaded from env and config files.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    set_default_limit(app_settings.rate_limit_default)
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(sample_router)

    # --- Dispatch ---
    throw_exception_if_no_handler_found(
        app_settings.throw_exception_if_no_handler_found
    )(app)
    logger.info(
        "Route misses %s",
        "raise RouteNotFoundError"
        if app_settings.throw_exception_if_no_handler_found
        else "answer an empty 404",
    )

    return app


app = create_app()
