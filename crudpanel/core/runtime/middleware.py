# -*- coding: utf-8 -*-
"""
middleware

Admin app-level middleware.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Match
from starlette.types import ASGIApp, Scope

from ..exceptions import ControllerNotFoundError, HTTPError
from .invoker import ControllerInvoker
from .listener import AdminContextListener, ControllerEvent

logger = logging.getLogger(__name__)


class AdminContextMiddleware(BaseHTTPMiddleware):
    """Run the admin context listener before the routed endpoint.

    The matched endpoint is looked up from the application routes; when the
    listener replaces it with a CRUD action the middleware invokes that action
    itself instead of continuing down the routing stack.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        listener: AdminContextListener,
        invoker: ControllerInvoker | None = None,
    ) -> None:
        super().__init__(app)
        self._listener = listener
        self._invoker = invoker or ControllerInvoker()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        endpoint, path_params = self._match_endpoint(request.scope)
        event = ControllerEvent(request, endpoint)
        context = self._listener.on_controller(event)
        if not event.is_overridden or event.controller is None:
            return await call_next(request)

        if path_params:
            request.scope.setdefault("path_params", {}).update(path_params)
        try:
            return await self._invoker.invoke(event.controller, request, context)
        except ControllerNotFoundError:
            raise
        except HTTPError as error:
            logger.debug("Admin action failed with %s: %s", error.status_code, error.detail)
            return PlainTextResponse(error.detail or "", status_code=error.status_code)

    @staticmethod
    def _match_endpoint(scope: Scope) -> tuple[Callable[..., Any] | None, dict[str, Any]]:
        """Return the endpoint and path params the router would pick for ``scope``."""

        app = scope.get("app")
        router = getattr(app, "router", None)
        for route in getattr(router, "routes", ()):
            match, child_scope = route.matches(scope)
            if match is Match.FULL:
                return child_scope.get("endpoint"), dict(child_scope.get("path_params", {}))
        return None, {}


__all__ = ["AdminContextMiddleware"]


# The End
