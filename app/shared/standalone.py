"""
Standalone application builder.

Builds a FastAPI app from explicit routers, error handlers and
customizers only. Nothing here reads Settings, .env or
application.yaml, so behavior that depends on configuration must be
passed in as a customizer.
"""

from collections.abc import Callable, Iterable

from fastapi import APIRouter, FastAPI
from slowapi.errors import RateLimitExceeded

from app.shared.errors.handlers import register_error_handlers
from app.shared.routing.dispatch import AppCustomizer, configure_unmatched_routes
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler


def standalone_setup(
    *routers: APIRouter,
    customizers: Iterable[AppCustomizer] = (),
    error_handlers: Callable[[FastAPI], None] = register_error_handlers,
) -> FastAPI:
    """Build an isolated app for driving through ``TestClient``.

    Decorated routes keep their rate limits. Route misses answer an
    empty 404 unless a customizer such as
    ``throw_exception_if_no_handler_found()`` says otherwise.

    Args:
        routers: Routers holding the endpoint handlers under test.
        customizers: Setup hooks applied in order after wiring.
        error_handlers: Registers the error translator on the app.

    Returns:
        The configured FastAPI app.
    """
    app = FastAPI()
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    error_handlers(app)
    for router in routers:
        app.include_router(router)

    configure_unmatched_routes(app.router, raise_on_unmatched_route=False)
    for customize in customizers:
        customize(app)
    return app
