"""
Domain-specific errors for the routing bounded context.

These are mapped to HTTP responses at the shared error handler layer.
No framework imports allowed.
"""


class RoutingError(Exception):
    """Base error for all routing domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RouteNotFoundError(RoutingError):
    """Raised when no registered route matches an incoming request."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"No handler found for {method.upper()} {path}")
        self.method = method.upper()
        self.path = path
