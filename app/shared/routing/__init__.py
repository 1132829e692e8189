"""Dispatcher configuration for requests that match no route."""

from app.shared.routing.dispatch import (
    AppCustomizer,
    configure_unmatched_routes,
    throw_exception_if_no_handler_found,
)

__all__ = [
    "AppCustomizer",
    "configure_unmatched_routes",
    "throw_exception_if_no_handler_found",
]
