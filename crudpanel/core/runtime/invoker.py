# -*- coding: utf-8 -*-
"""
invoker

Call controller actions with autowired arguments and normalise their results.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, Mapping

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, Response

from ..context.admin_context import AdminContext
from ..exceptions import BadRequestError


class ControllerInvoker:
    """Run a controller callable for a request.

    Parameters named ``request`` and ``context`` receive the request and the
    admin context; other parameters are looked up in the path parameters and
    then in the query string.
    """

    async def invoke(
        self,
        controller: Callable[..., Any],
        request: Request,
        context: AdminContext | None,
    ) -> Response:
        arguments = self.resolve_arguments(controller, request, context)
        if inspect.iscoroutinefunction(controller):
            result = await controller(**arguments)
        else:
            result = await run_in_threadpool(controller, **arguments)
            if inspect.isawaitable(result):
                result = await result
        return self.to_response(result)

    def resolve_arguments(
        self,
        controller: Callable[..., Any],
        request: Request,
        context: AdminContext | None,
    ) -> Dict[str, Any]:
        arguments: Dict[str, Any] = {}
        for name, parameter in inspect.signature(controller).parameters.items():
            if parameter.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            ):
                continue
            if name == "request":
                arguments[name] = request
            elif name == "context":
                arguments[name] = context
            elif name in request.path_params:
                arguments[name] = request.path_params[name]
            elif name in request.query_params:
                arguments[name] = request.query_params[name]
            elif parameter.default is inspect.Parameter.empty:
                raise BadRequestError(f"Missing required parameter '{name}'.")
        return arguments

    @staticmethod
    def to_response(result: Any) -> Response:
        if isinstance(result, Response):
            return result
        if isinstance(result, str):
            return HTMLResponse(result)
        if isinstance(result, Mapping) or isinstance(result, list):
            return JSONResponse(result)
        if result is None:
            return Response(status_code=204)
        raise TypeError(f"Unsupported controller result type {type(result).__name__}")


__all__ = ["ControllerInvoker"]


# The End
