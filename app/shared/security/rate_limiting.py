"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client limit on each decorated endpoint.
Limits are attached with ``@limiter.limit(default_limit)`` on the routes
themselves, so unmatched routes are never counted.

The limit value is process-wide: the composition root sets it from
settings through ``set_default_limit``.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

DEFAULT_RATE_LIMIT = "60/minute"
HTTP_429 = 429

limiter = Limiter(key_func=get_remote_address)

_current_limit = DEFAULT_RATE_LIMIT


def set_default_limit(limit: str) -> None:
    """Set the limit applied by ``default_limit`` to every decorated route.

    Args:
        limit: A slowapi limit string such as ``"60/minute"``.
    """
    global _current_limit
    _current_limit = limit


def default_limit() -> str:
    """Return the limit string currently in force."""
    return _current_limit


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
