# -*- coding: utf-8 -*-
"""
listener

Resolve the dashboard and CRUD controllers of a request, attach the admin
context and redirect dispatch to the CRUD action.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from starlette.requests import Request

from ..configuration.conf import PanelSettings, current_settings
from ..context.admin_context import AdminContext
from ..context.factory import AdminContextFactory
from ..context.state import get_admin_context, set_admin_context
from ..controllers import CrudController, DashboardController
from ..exceptions import ControllerNotFoundError
from ..references import controller_fqcn
from ..registry import CrudControllerRegistry, DashboardControllerRegistry
from ..resolver import ControllerResolver, duplicate_request
from ..urls import QueryParam

logger = logging.getLogger(__name__)


class ControllerEvent:
    """Dispatch decision for one request.

    ``controller`` starts as the endpoint the router matched (or ``None``)
    and may be replaced through :meth:`set_controller`.
    """

    def __init__(self, request: Request, controller: Callable[..., Any] | None) -> None:
        self.request = request
        self._original = controller
        self._controller = controller

    @property
    def controller(self) -> Callable[..., Any] | None:
        return self._controller

    def set_controller(self, controller: Callable[..., Any]) -> None:
        self._controller = controller

    @property
    def is_overridden(self) -> bool:
        return self._controller is not self._original


def controller_instance(controller: Callable[..., Any] | None) -> Any | None:
    """Return the object a bound-method controller belongs to."""

    return getattr(controller, "__self__", None)


def is_admin_request(context_id: str | None, controller_instance: Any | None) -> bool:
    """Tell whether a request belongs to the admin panel.

    Requests routed to a dashboard are always admin requests. Any other
    route joins the panel by carrying a context id in its query string, which
    lets application pages reuse the panel chrome and menus.
    """

    if context_id is not None:
        return True
    return isinstance(controller_instance, DashboardController)


class AdminContextListener:
    """Attach an :class:`AdminContext` to admin requests and reroute CRUD actions."""

    def __init__(
        self,
        context_factory: AdminContextFactory,
        dashboards: DashboardControllerRegistry,
        cruds: CrudControllerRegistry,
        resolver: ControllerResolver,
        *,
        settings: PanelSettings | None = None,
    ) -> None:
        self._context_factory = context_factory
        self._dashboards = dashboards
        self._cruds = cruds
        self._resolver = resolver
        self._settings = settings

    @property
    def context_attribute(self) -> str:
        return (self._settings or current_settings()).context_attribute

    def on_controller(self, event: ControllerEvent) -> AdminContext | None:
        """Process ``event`` and return the admin context, if the request has one."""

        request = event.request
        context_id = request.query_params.get(QueryParam.CONTEXT_ID)
        current_instance = controller_instance(event.controller)
        if not is_admin_request(context_id, current_instance):
            return None

        if isinstance(current_instance, DashboardController):
            dashboard = current_instance
        else:
            dashboard = self._get_dashboard_from_context_id(context_id, request)
        if dashboard is None:
            # Unknown context ids come from tampered URLs: do nothing and stay silent.
            logger.debug("Ignoring request with unknown context id %r", context_id)
            return None

        crud_id = request.query_params.get(QueryParam.CRUD_ID)
        crud_action = request.query_params.get(QueryParam.CRUD_ACTION)
        crud_handler = self._get_crud_handler(crud_id, crud_action, request)
        crud_controller = controller_instance(crud_handler)

        # Building the context is expensive; a request keeps the first one.
        context = get_admin_context(request, self.context_attribute)
        if context is None:
            context = self._context_factory.create(request, dashboard, crud_controller)
            set_admin_context(request, context, self.context_attribute)

        if crud_handler is not None:
            # Argument resolution reads the endpoint of record from the scope.
            request.scope["endpoint"] = crud_handler
            event.set_controller(crud_handler)
        return context

    def _get_dashboard_from_context_id(
        self, context_id: str, request: Request
    ) -> DashboardController | None:
        reference = self._dashboards.get_controller_by_context_id(context_id)
        if reference is None:
            return None
        handler = self._materialize(reference, "index", request)
        instance = controller_instance(handler)
        return instance if isinstance(instance, DashboardController) else None

    def _get_crud_handler(
        self,
        crud_id: str | None,
        crud_action: str | None,
        request: Request,
    ) -> Callable[..., Any] | None:
        if crud_id is None or crud_action is None:
            return None
        reference = self._cruds.find_crud_fqcn_by_crud_id(crud_id)
        if reference is None:
            logger.debug("Ignoring request with unknown CRUD id %r", crud_id)
            return None
        handler = self._materialize(reference, crud_action, request)
        if not isinstance(controller_instance(handler), CrudController):
            return None
        return handler

    def _materialize(self, reference: Any, action: str, request: Request) -> Callable[..., Any]:
        handler = self._resolver.get_controller(duplicate_request(request, reference, action))
        if handler is None:
            fqcn = controller_fqcn(reference)
            logger.error("Registered controller %s has no action '%s'", fqcn, action)
            raise ControllerNotFoundError(fqcn, action)
        return handler


__all__ = [
    "AdminContextListener",
    "ControllerEvent",
    "controller_instance",
    "is_admin_request",
]


# The End
