# -*- coding: utf-8 -*-
"""
panel

Boot object wiring registries, resolver, listener and routes of a panel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Type, TypeVar
from weakref import WeakSet

from starlette.applications import Starlette
from starlette.routing import Route

from .configuration.conf import PanelSettings, current_settings
from .context.factory import AdminContextFactory
from .exceptions import ConfigurationError
from .references import ControllerReference, controller_fqcn, import_controller
from .registry import (
    CrudControllerRegistry,
    CrudEntry,
    DashboardControllerRegistry,
    DashboardEntry,
)
from .resolver import ControllerResolver
from .runtime.listener import AdminContextListener
from .runtime.middleware import AdminContextMiddleware
from .templates.rendering import TemplateRenderer
from .templates.service import TemplateService
from .urls import AdminUrlGenerator

logger = logging.getLogger(__name__)

ControllerT = TypeVar("ControllerT", bound=Type[Any])


class AdminPanel:
    """Register dashboards and CRUD controllers and mount them on an app."""

    def __init__(
        self,
        *,
        settings: PanelSettings | None = None,
        controller_factory: Callable[[Type], Any] | None = None,
        template_service: TemplateService | None = None,
    ) -> None:
        self.settings = settings or current_settings()
        self.dashboards = DashboardControllerRegistry(self.settings)
        self.cruds = CrudControllerRegistry(self.settings)
        self.resolver = ControllerResolver(controller_factory)
        self.context_factory = AdminContextFactory(
            self.dashboards, self.cruds, settings=self.settings
        )
        self.listener = AdminContextListener(
            self.context_factory,
            self.dashboards,
            self.cruds,
            self.resolver,
            settings=self.settings,
        )
        if template_service is not None:
            TemplateRenderer.configure(template_service)
        self.template_service = TemplateRenderer.get_service()
        self._mounted_apps: WeakSet[Starlette] = WeakSet()

    def register_dashboard(
        self,
        controller: ControllerReference,
        *,
        path: str | None = None,
        name: str | None = None,
        context_id: str | None = None,
    ) -> DashboardEntry:
        entry = self.dashboards.register(
            controller, path=path, name=name, context_id=context_id
        )
        logger.debug("Registered dashboard %s as %s", entry.fqcn, entry.context_id)
        return entry

    def register_crud(
        self,
        controller: ControllerReference,
        *,
        crud_id: str | None = None,
        entity: ControllerReference | None = None,
    ) -> CrudEntry:
        entry = self.cruds.register(controller, crud_id=crud_id, entity=entity)
        logger.debug("Registered CRUD controller %s as %s", entry.fqcn, entry.crud_id)
        return entry

    def dashboard(
        self,
        *,
        path: str | None = None,
        name: str | None = None,
        context_id: str | None = None,
    ) -> Callable[[ControllerT], ControllerT]:
        """Class decorator form of :meth:`register_dashboard`."""

        def decorator(cls: ControllerT) -> ControllerT:
            self.register_dashboard(cls, path=path, name=name, context_id=context_id)
            return cls

        return decorator

    def crud(self, *, crud_id: str | None = None) -> Callable[[ControllerT], ControllerT]:
        """Class decorator form of :meth:`register_crud`."""

        def decorator(cls: ControllerT) -> ControllerT:
            self.register_crud(cls, crud_id=crud_id)
            return cls

        return decorator

    def url_generator(self, dashboard: ControllerReference | None = None) -> AdminUrlGenerator:
        """Return a URL generator bound to ``dashboard`` or the first dashboard."""

        if dashboard is not None:
            context_id = self.dashboards.get_context_id_by_controller(dashboard)
            entry = (
                self.dashboards.get_entry_by_context_id(context_id)
                if context_id is not None
                else None
            )
        else:
            entry = self.dashboards.get_first_entry()
        if entry is None:
            raise ConfigurationError("No dashboard is registered.")
        return AdminUrlGenerator(entry.path, entry.context_id, self.cruds)

    def mount(self, app: Starlette) -> None:
        """Add dashboard routes, static files and the context middleware to ``app``."""

        app.state.admin_panel = self
        if app in self._mounted_apps:
            return
        if self.dashboards.count() == 0:
            raise ConfigurationError("Register at least one dashboard before mounting.")
        for entry in self.dashboards:
            controller_cls = import_controller(entry.controller)
            if controller_cls is None:
                raise ConfigurationError(
                    f"Dashboard controller {controller_fqcn(entry.controller)} cannot be imported"
                )
            instance = self.resolver.get_instance(controller_cls)
            app.router.routes.append(
                Route(entry.path, endpoint=instance.index, methods=["GET"], name=entry.name)
            )
        self.template_service.mount_static_resources(app, self.settings)
        app.add_middleware(AdminContextMiddleware, listener=self.listener)
        self._mounted_apps.add(app)


__all__ = ["AdminPanel"]


# The End
