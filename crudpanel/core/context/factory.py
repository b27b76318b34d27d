# -*- coding: utf-8 -*-
"""
factory

Assemble the :class:`AdminContext` of a request.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, TYPE_CHECKING

from starlette.requests import Request

from ..config.crud import Crud
from ..config.dashboard import Dashboard, TextDirection
from ..configuration.conf import PanelSettings, current_settings
from ..menu import MainMenuBuilder
from ..registry import CrudControllerRegistry, DashboardControllerRegistry
from ..urls import AdminUrlGenerator, QueryParam
from .admin_context import AdminContext, CrudContext, I18nContext, SearchContext
from .filters import flatten_params, parse_nested_params

if TYPE_CHECKING:  # pragma: no cover
    from ..controllers import CrudController, DashboardController

logger = logging.getLogger(__name__)

RTL_LANGUAGES = frozenset({"ar", "fa", "he"})


class AdminContextFactory:
    """Build admin contexts from the request and the resolved controllers."""

    def __init__(
        self,
        dashboards: DashboardControllerRegistry,
        cruds: CrudControllerRegistry,
        *,
        settings: PanelSettings | None = None,
    ) -> None:
        self._dashboards = dashboards
        self._cruds = cruds
        self._settings = settings

    @property
    def settings(self) -> PanelSettings:
        return self._settings or current_settings()

    def create(
        self,
        request: Request,
        dashboard_controller: "DashboardController",
        crud_controller: "CrudController | None" = None,
    ) -> AdminContext:
        """Return a new context; callers are expected to cache it on the request."""

        settings = self.settings
        dashboard = dashboard_controller.configure_dashboard()
        context_id = self._dashboards.get_context_id_by_controller(type(dashboard_controller))
        entry = (
            self._dashboards.get_entry_by_context_id(context_id)
            if context_id is not None
            else None
        )
        urls = AdminUrlGenerator(
            entry.path if entry is not None else settings.admin_path,
            context_id,
            self._cruds,
        )
        menu_builder = MainMenuBuilder(urls)
        main_menu = menu_builder.build_main_menu(
            dashboard_controller.configure_menu_items(),
            selected_index=self._int_param(request, QueryParam.MENU_INDEX),
            selected_subindex=self._int_param(request, QueryParam.SUBMENU_INDEX),
        )

        assets = dashboard_controller.configure_assets()
        if crud_controller is not None:
            assets = crud_controller.configure_assets(assets)
        static_url = settings.static_url

        user = self._get_user(request)
        user_menu = None
        if user is not None:
            user_menu = menu_builder.build_user_menu(
                dashboard_controller.configure_user_menu(user)
            )

        crud_context = None
        search_context = None
        if crud_controller is not None:
            crud_context = self._build_crud_context(
                request, dashboard_controller, crud_controller
            )
            search_context = self._build_search_context(request, crud_context.config)

        favicon = dashboard.favicon_path or settings.favicon_path
        return AdminContext(
            request=request,
            context_id=context_id,
            dashboard_controller=dashboard_controller,
            dashboard=dashboard,
            i18n=self._build_i18n(dashboard, settings),
            assets=assets.resolve(static_url),
            main_menu=main_menu,
            urls=urls,
            site_title=settings.site_title,
            favicon_url=self._asset_url(favicon, static_url),
            static_url=static_url,
            crud_controller=crud_controller,
            crud=crud_context,
            search=search_context,
            user=user,
            user_menu=user_menu,
        )

    def _build_i18n(self, dashboard: Dashboard, settings: PanelSettings) -> I18nContext:
        locale = dashboard.locale or settings.default_locale
        language = locale.replace("-", "_").split("_")[0].lower()
        direction = dashboard.text_direction
        if direction is None:
            direction = TextDirection.RTL if language in RTL_LANGUAGES else TextDirection.LTR
        return I18nContext(
            locale=locale,
            language=language,
            text_direction=direction,
            translation_domain=dashboard.translation_domain or settings.translation_domain,
        )

    def _build_crud_context(
        self,
        request: Request,
        dashboard_controller: "DashboardController",
        crud_controller: "CrudController",
    ) -> CrudContext:
        action = request.query_params.get(QueryParam.CRUD_ACTION) or "index"
        crud_id = (
            request.query_params.get(QueryParam.CRUD_ID)
            or self._cruds.find_crud_id_by_crud_fqcn(type(crud_controller))
            or ""
        )
        defaults = dashboard_controller.configure_crud()
        config = crud_controller.configure_crud(defaults)
        return CrudContext(
            crud_id=crud_id,
            action=action,
            entity_name=crud_controller.entity_name(),
            config=config,
            fields=tuple(crud_controller.configure_fields(action)),
            entity_id=request.query_params.get(QueryParam.ENTITY_ID),
        )

    def _build_search_context(self, request: Request, config: Crud) -> SearchContext:
        filters = parse_nested_params(request.query_params.multi_items(), QueryParam.FILTERS)
        query = request.query_params.get(QueryParam.QUERY)
        return SearchContext(
            query=query.strip() if query else None,
            applied_filters=filters,
            search_fields=config.search_fields,
            hidden_filter_fields=tuple(flatten_params(filters, QueryParam.FILTERS)),
        )

    @staticmethod
    def _get_user(request: Request) -> Any | None:
        user = request.scope.get("user")
        if user is None:
            user = getattr(request.state, "user", None)
        if user is not None and getattr(user, "is_authenticated", True) is False:
            return None
        return user

    @staticmethod
    def _int_param(request: Request, name: str) -> int:
        raw = request.query_params.get(name)
        if raw is None:
            return -1
        try:
            return int(raw)
        except ValueError:
            logger.debug("Ignoring non-numeric %s value %r", name, raw)
            return -1

    @staticmethod
    def _asset_url(path: str, static_url: str) -> str:
        if path.startswith(("http://", "https://", "//", "/")):
            return path
        return f"{static_url.rstrip('/')}/{path}"


__all__ = ["AdminContextFactory", "RTL_LANGUAGES"]


# The End
