# -*- coding: utf-8 -*-
"""
panel_fixtures

Controllers and helpers shared by the CrudPanel tests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Dict, List

from starlette.requests import Request

from crudpanel.core.config import (
    Assets,
    Crud,
    Dashboard,
    Field,
    MenuItems,
    UserMenu,
)
from crudpanel.core.configuration.conf import PanelSettings
from crudpanel.core.context.factory import AdminContextFactory
from crudpanel.core.controllers import CrudController, DashboardController
from crudpanel.core.registry import CrudControllerRegistry, DashboardControllerRegistry
from crudpanel.core.resolver import ControllerResolver
from crudpanel.core.runtime.listener import AdminContextListener

USERS: List[Dict[str, Any]] = [
    {"id": 1, "name": "alice", "email": "alice@example.com"},
    {"id": 2, "name": "bob", "email": "bob@example.com"},
    {"id": 3, "name": "carol", "email": "carol@example.org"},
]


class UsersCrudController(CrudController):
    """CRUD controller serving the in-memory ``USERS`` list."""

    def configure_crud(self, crud: Crud) -> Crud:
        return (
            crud.set_entity_labels("User", "Users")
            .set_search_fields(("name", "email"))
            .set_help("index", "Everybody allowed to sign in.")
        )

    def configure_assets(self, assets: Assets) -> Assets:
        return assets.add_js_file("js/users.js", defer=True)

    def configure_fields(self, action: str) -> List[Field]:
        return [Field("id", "ID"), Field("name"), Field("email")]

    def get_entities(self, context: Any) -> List[Dict[str, Any]]:
        return list(USERS)


class PagedUsersCrudController(UsersCrudController):
    """Users listing split into pages of two."""

    def configure_crud(self, crud: Crud) -> Crud:
        return super().configure_crud(crud).set_page_size(2)


class AuditCrudController(CrudController):
    """CRUD controller whose search form is disabled."""

    def configure_crud(self, crud: Crud) -> Crud:
        return crud.set_search_fields(None)


class MainDashboard(DashboardController):
    """Dashboard declaring every kind of menu link."""

    def configure_dashboard(self) -> Dashboard:
        return Dashboard(title="Main dashboard")

    def configure_menu_items(self):
        return [
            MenuItems.link_to_dashboard("Home", "bi-house"),
            MenuItems.link_to_crud("Users", "bi-people", UsersCrudController),
            MenuItems.submenu(
                "More",
                None,
                [
                    MenuItems.link_to_url("Docs", None, "https://example.com/docs"),
                    MenuItems.link_to_crud("Audit", None, AuditCrudController),
                ],
            ),
        ]

    def configure_user_menu(self, user: Any) -> UserMenu:
        return UserMenu(name=user.username).add_items(
            MenuItems.link_to_url("Profile", "bi-person", "/profile"),
            MenuItems.section("Session"),
            MenuItems.link_to_logout("Sign out", "bi-box-arrow-right", "/logout"),
        )

    def configure_assets(self) -> Assets:
        return (
            Assets()
            .add_css_file("css/admin.css")
            .add_css_file("https://cdn.example.com/theme.css")
        )


class ArabicDashboard(DashboardController):
    """Dashboard whose locale implies a right-to-left layout."""

    def configure_dashboard(self) -> Dashboard:
        return Dashboard(title="Arabic", locale="ar")


class PlainDashboard(DashboardController):
    """Dashboard without the colour scheme switcher."""

    def configure_dashboard(self) -> Dashboard:
        return Dashboard(title="Plain", dark_mode_enabled=False)


class CountingContextFactory(AdminContextFactory):
    """Context factory remembering how many contexts it built."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.calls = 0

    def create(self, *args: Any, **kwargs: Any):
        self.calls += 1
        return super().create(*args, **kwargs)


class PanelHarness:
    """Registries, resolver, factory and listener wired like a mounted panel."""

    def __init__(self, settings: PanelSettings | None = None) -> None:
        self.settings = settings or PanelSettings(secret_key="test-secret")
        self.dashboards = DashboardControllerRegistry(self.settings)
        self.cruds = CrudControllerRegistry(self.settings)
        self.resolver = ControllerResolver()
        self.factory = CountingContextFactory(
            self.dashboards, self.cruds, settings=self.settings
        )
        self.listener = AdminContextListener(
            self.factory,
            self.dashboards,
            self.cruds,
            self.resolver,
            settings=self.settings,
        )
        self.dashboards.register(MainDashboard, context_id="dash1")
        self.dashboards.register(ArabicDashboard, path="/arabic", context_id="ar")
        self.dashboards.register(PlainDashboard, path="/plain", context_id="plain")
        self.cruds.register(UsersCrudController, crud_id="users")
        self.cruds.register(AuditCrudController, crud_id="audit")
        self.cruds.register(PagedUsersCrudController, crud_id="paged")

    def instance(self, controller_cls: type) -> Any:
        return self.resolver.get_instance(controller_cls)

    def endpoint(self, controller_cls: type, action: str = "index") -> Callable[..., Any]:
        return getattr(self.instance(controller_cls), action)

    def context(self, query: str = "", crud_cls: type | None = None, **kwargs: Any):
        """Build a context for ``MainDashboard`` and optionally ``crud_cls``."""

        dashboard = kwargs.pop("dashboard", MainDashboard)
        request = make_request(query, **kwargs)
        crud = self.instance(crud_cls) if crud_cls is not None else None
        return self.factory.create(request, self.instance(dashboard), crud)


def make_request(query: str = "", path: str = "/admin", user: Any = None) -> Request:
    """Return a bare GET request carrying ``query``."""

    scope: Dict[str, Any] = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "root_path": "",
        "query_string": query.encode("latin-1"),
        "headers": [],
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
    }
    if user is not None:
        scope["user"] = user
    return Request(scope)


def make_user(username: str = "alice", **attributes: Any) -> SimpleNamespace:
    return SimpleNamespace(username=username, **attributes)


# The End
