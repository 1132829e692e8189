"""
Liveness probe.

Reports the version of the settings the running app was built with,
read from ``app.state.settings`` rather than the module-level default.
"""

from fastapi import APIRouter, Request

from app.interfaces.sample.schemas import HealthResponse
from app.shared.security.rate_limiting import default_limit, limiter

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
@limiter.limit(default_limit)
def health_check(request: Request) -> HealthResponse:
    """Return application status and version."""
    app_settings = request.app.state.settings
    return HealthResponse(status="ok", version=app_settings.version)
