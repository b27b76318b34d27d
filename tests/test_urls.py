# -*- coding: utf-8 -*-
"""
test_urls

Tests for admin URL generation and menu assembly.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from crudpanel.core.config.menu import MenuItems, UserMenu
from crudpanel.core.configuration.conf import PanelSettings
from crudpanel.core.menu import MainMenuBuilder
from crudpanel.core.registry import CrudControllerRegistry
from crudpanel.core.urls import AdminUrlGenerator
from tests.panel_fixtures import AuditCrudController, UsersCrudController


def make_generator(context_id="dash1"):
    registry = CrudControllerRegistry(PanelSettings(secret_key="k"))
    registry.register(UsersCrudController, crud_id="users")
    return AdminUrlGenerator("/admin", context_id, registry)


class TestAdminUrlGenerator:
    """Dashboard-relative URLs."""

    def test_context_id_comes_first(self) -> None:
        """The context id leads every generated query string."""

        urls = make_generator()
        assert urls.for_dashboard(page=2) == "/admin?eaContext=dash1&page=2"

    def test_crud_url(self) -> None:
        """CRUD URLs carry the CRUD id, action and extra parameters."""

        urls = make_generator()
        assert (
            urls.for_crud(UsersCrudController, "detail", entityId=3)
            == "/admin?eaContext=dash1&crudId=users&crudAction=detail&entityId=3"
        )

    def test_unregistered_crud(self) -> None:
        """Unregistered controllers have no URL."""

        assert make_generator().for_crud(AuditCrudController) is None

    def test_none_values_dropped(self) -> None:
        """``None`` parameters are left out."""

        urls = make_generator(context_id=None)
        assert urls.for_dashboard(query=None) == "/admin"
        assert urls.build({"query": "a b"}) == "/admin?query=a+b"


class TestMainMenuBuilder:
    """Menu entry construction."""

    def test_sections_and_links(self) -> None:
        """Sections have no URL and URL links keep theirs."""

        builder = MainMenuBuilder(make_generator())
        menu = builder.build_main_menu(
            [
                MenuItems.section("Content"),
                MenuItems.link_to_url("Site", "bi-globe", "https://example.com", target="_blank"),
                MenuItems.link_to_crud("Published", None, UsersCrudController, query={"status": "on"}),
            ]
        )
        section, site, published = menu.entries
        assert section.is_section_header and section.url is None
        assert site.url == "https://example.com" and site.target == "_blank"
        assert "status=on" in published.url
        assert len(menu) == 3
        assert menu.selected is None

    def test_query_keys_do_not_clash_with_arguments(self) -> None:
        """Extra query keys may reuse argument names; the menu position wins."""

        builder = MainMenuBuilder(make_generator())
        menu = builder.build_main_menu(
            [
                MenuItems.link_to_crud(
                    "Users",
                    None,
                    UsersCrudController,
                    query={"action": "x", "controller": "c", "menuIndex": "9"},
                )
            ]
        )
        assert menu.entries[0].url == (
            "/admin?eaContext=dash1&crudId=users&crudAction=index"
            "&action=x&controller=c&menuIndex=0&submenuIndex=-1"
        )

    def test_unregistered_crud_link(self) -> None:
        """Links to unknown CRUD controllers render without URL."""

        builder = MainMenuBuilder(make_generator())
        menu = builder.build_main_menu([MenuItems.link_to_crud("Audit", None, AuditCrudController)])
        assert menu.entries[0].url is None

    def test_user_menu_without_leading_items(self) -> None:
        """A user menu starting with a header has no anonymous group."""

        builder = MainMenuBuilder(make_generator())
        view = builder.build_user_menu(
            UserMenu(name="bob").add_items(
                MenuItems.section("Account"),
                MenuItems.link_to_url("Settings", None, "/settings"),
            )
        )
        assert len(view.sections) == 1
        assert view.sections[0][0].label == "Account"
        assert view.has_items

    def test_empty_user_menu(self) -> None:
        """A user menu without items has nothing to drop down."""

        view = MainMenuBuilder(make_generator()).build_user_menu(UserMenu(name="bob"))
        assert not view.has_items


# The End
