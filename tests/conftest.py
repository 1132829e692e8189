"""
Shared pytest fixtures.

Builds isolated apps from the sample router and the error translator
only, the same way a standalone harness would.
"""

import pytest
from fastapi.testclient import TestClient

from app.interfaces.sample.router import router as sample_router
from app.shared.routing.dispatch import throw_exception_if_no_handler_found
from app.shared.security.rate_limiting import (
    DEFAULT_RATE_LIMIT,
    limiter,
    set_default_limit,
)
from app.shared.standalone import standalone_setup


@pytest.fixture(autouse=True)
def fresh_rate_limits():
    """Start every test with empty counters and the default limit."""
    set_default_limit(DEFAULT_RATE_LIMIT)
    limiter.reset()
    yield
    set_default_limit(DEFAULT_RATE_LIMIT)
    limiter.reset()


@pytest.fixture
def mock_client() -> TestClient:
    """Standalone client with the route-miss flag applied."""
    app = standalone_setup(
        sample_router,
        customizers=[throw_exception_if_no_handler_found()],
    )
    return TestClient(app)


@pytest.fixture
def plain_client() -> TestClient:
    """Standalone client without any customizer."""
    return TestClient(standalone_setup(sample_router))
