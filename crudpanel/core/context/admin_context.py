# -*- coding: utf-8 -*-
"""
admin_context

Read-only per-request context exposed to controllers and templates as ``ea``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, TYPE_CHECKING

from starlette.requests import Request

from ..config.assets import Assets
from ..config.crud import Crud, Field
from ..config.dashboard import ColorScheme, Dashboard, TextDirection
from ..menu import MainMenu, UserMenuView
from ..urls import AdminUrlGenerator

if TYPE_CHECKING:  # pragma: no cover
    from ..controllers import CrudController, DashboardController


@dataclass(frozen=True)
class I18nContext:
    """Locale and writing direction of the current page."""

    locale: str
    language: str
    text_direction: TextDirection
    translation_domain: str

    @property
    def is_rtl(self) -> bool:
        return self.text_direction is TextDirection.RTL


@dataclass(frozen=True)
class CrudContext:
    """State of the CRUD controller targeted by the request."""

    crud_id: str
    action: str
    entity_name: str
    config: Crud
    fields: Tuple[Field, ...] = ()
    entity_id: str | None = None

    @property
    def page_title(self) -> str:
        return self.config.title_for(self.action, self.entity_name)

    @property
    def help_message(self) -> str | None:
        return self.config.help_messages.get(self.action)


@dataclass(frozen=True)
class SearchContext:
    """Free-text query and applied filters of a CRUD listing."""

    query: str | None = None
    applied_filters: Dict[str, Any] = field(default_factory=dict)
    search_fields: Tuple[str, ...] | None = ()
    hidden_filter_fields: Tuple[Tuple[str, str], ...] = ()

    @property
    def is_enabled(self) -> bool:
        return self.search_fields is not None


@dataclass(frozen=True)
class AdminContext:
    """Everything known about the admin request, built once and never mutated."""

    request: Request
    context_id: str | None
    dashboard_controller: "DashboardController"
    dashboard: Dashboard
    i18n: I18nContext
    assets: Assets
    main_menu: MainMenu
    urls: AdminUrlGenerator
    site_title: str
    favicon_url: str
    static_url: str
    crud_controller: "CrudController | None" = None
    crud: CrudContext | None = None
    search: SearchContext | None = None
    user: Any | None = None
    user_menu: UserMenuView | None = None

    @property
    def title(self) -> str:
        return self.dashboard.title or self.site_title

    @property
    def sidebar_minimized(self) -> bool:
        return self.dashboard.sidebar_minimized

    @property
    def content_maximized(self) -> bool:
        return self.dashboard.content_maximized

    @property
    def dark_mode_enabled(self) -> bool:
        return self.dashboard.dark_mode_enabled

    @property
    def color_scheme(self) -> ColorScheme:
        return self.dashboard.default_color_scheme

    @property
    def is_rtl(self) -> bool:
        return self.i18n.is_rtl

    @property
    def search_enabled(self) -> bool:
        """Return ``True`` when a CRUD listing with search fields is displayed."""

        return (
            self.crud is not None
            and self.crud.action == "index"
            and self.search is not None
            and self.search.is_enabled
        )

    @property
    def has_user(self) -> bool:
        return self.user is not None


__all__ = ["AdminContext", "CrudContext", "I18nContext", "SearchContext"]


# The End
