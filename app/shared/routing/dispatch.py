"""
Unmatched-route handling for the Starlette dispatcher.

When no registered route accepts a request, Starlette calls the
router's ``default`` ASGI app. This module replaces that fallback with
one of two behaviors:

- raise ``RouteNotFoundError`` so the centralized error handlers
  translate it into the fixed error body, or
- answer an empty 404 directly, bypassing every exception handler.

The choice lives on the router instance the app actually dispatches
through. An app built without a customizer never reads settings files,
so the flag has to be applied to that exact app.
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI
from starlette.responses import Response
from starlette.routing import Router
from starlette.types import Receive, Scope, Send
from starlette.websockets import WebSocketClose

from app.domain.routing.errors import RouteNotFoundError

logger = logging.getLogger(__name__)

HTTP_404 = 404

AppCustomizer = Callable[[FastAPI], None]


class UnmatchedRouteHandler:
    """ASGI fallback installed as ``Router.default``.

    Attributes:
        raise_on_unmatched_route: When True, unmatched HTTP requests raise
            RouteNotFoundError. When False, they get an empty 404.
    """

    def __init__(self, raise_on_unmatched_route: bool) -> None:
        self.raise_on_unmatched_route = raise_on_unmatched_route

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "websocket":
            await WebSocketClose()(scope, receive, send)
            return

        method = scope["method"]
        path = scope["path"]
        if self.raise_on_unmatched_route:
            logger.debug("No route matched %s %s, raising", method, path)
            raise RouteNotFoundError(method, path)

        logger.debug("No route matched %s %s, answering empty 404", method, path)
        await Response(status_code=HTTP_404)(scope, receive, send)


def configure_unmatched_routes(router: Router, *, raise_on_unmatched_route: bool) -> None:
    """Install the unmatched-route fallback on a router.

    Args:
        router: The router the app dispatches through (``app.router``).
        raise_on_unmatched_route: Whether a route miss raises a catchable
            RouteNotFoundError instead of an empty 404.
    """
    router.default = UnmatchedRouteHandler(raise_on_unmatched_route)


def throw_exception_if_no_handler_found(enabled: bool = True) -> AppCustomizer:
    """Build a customizer that applies the route-miss flag to one app.

    Args:
        enabled: Value of the flag to apply.

    Returns:
        A callable taking the FastAPI app to configure.
    """

    def customize(app: FastAPI) -> None:
        configure_unmatched_routes(app.router, raise_on_unmatched_route=enabled)

    return customize
