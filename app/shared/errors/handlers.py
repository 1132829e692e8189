"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.routing.entities import wrong_url
from app.domain.routing.errors import RouteNotFoundError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


def _error_response(status_code: int, error: str) -> JSONResponse:
    """Build a consistent JSON error response for unexpected failures."""
    return JSONResponse(status_code=status_code, content={"error": error})


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RouteNotFoundError)
    async def handle_route_not_found(
        _request: Request, exc: RouteNotFoundError
    ) -> JSONResponse:
        """Translate a route miss into the fixed wrong-url body."""
        logger.warning("No handler found: %s %s", exc.method, exc.path)
        return JSONResponse(status_code=HTTP_400, content=wrong_url().to_dict())

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
