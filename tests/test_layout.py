# -*- coding: utf-8 -*-
"""
test_layout

Tests for page rendering through the layout regions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from crudpanel.core.templates.layout import (
    ActionButton,
    LayoutRegions,
    LayoutRenderer,
    PageContent,
)
from tests.panel_fixtures import (
    ArabicDashboard,
    AuditCrudController,
    PanelHarness,
    PlainDashboard,
    UsersCrudController,
    make_user,
)

FILTERED_QUERY = (
    "eaContext=dash1&crudId=users&crudAction=index&menuIndex=1&submenuIndex=-1"
    "&query=bob&filters[status][eq][0]=active&filters[status][eq][1]=pending"
)


def render(context, page=None, regions=None):
    return LayoutRenderer().render(context, page or PageContent(title="Page"), regions)


class TestSearchRegion:
    """The CRUD search form."""

    def test_filters_survive_as_hidden_inputs(self) -> None:
        """Applied filters are resubmitted with the search form."""

        html = render(PanelHarness().context(FILTERED_QUERY, UsersCrudController))
        assert 'class="form-action-search"' in html
        assert '<input type="hidden" name="eaContext" value="dash1">' in html
        assert '<input type="hidden" name="crudId" value="users">' in html
        assert '<input type="hidden" name="menuIndex" value="1">' in html
        assert 'name="filters[status][eq][0]" value="active"' in html
        assert 'name="filters[status][eq][1]" value="pending"' in html
        assert 'name="query" value="bob"' in html

    def test_no_search_outside_crud_listing(self) -> None:
        """Dashboard pages have no search form."""

        html = render(PanelHarness().context("eaContext=dash1"))
        assert "form-action-search" not in html

    def test_no_search_when_disabled(self) -> None:
        """Controllers without search fields have no search form."""

        context = PanelHarness().context(
            "eaContext=dash1&crudId=audit&crudAction=index", AuditCrudController
        )
        assert "form-action-search" not in render(context)


class TestUserMenuRegion:
    """The user dropdown."""

    def test_sections_are_separated(self) -> None:
        """Every section but the first is preceded by a divider."""

        html = render(PanelHarness().context(user=make_user()))
        assert html.count('<hr class="dropdown-divider">') == 1
        assert '<li class="dropdown-header">Session</li>' in html
        assert "user-action-logout" in html
        assert '<span class="user-name">alice</span>' in html

    def test_anonymous_page_has_no_user_menu(self) -> None:
        """No user, no dropdown."""

        assert "user-menu" not in render(PanelHarness().context())


class TestChrome:
    """Head, direction and appearance."""

    def test_ltr_stylesheet(self) -> None:
        """Left-to-right pages load the regular stylesheet."""

        html = render(PanelHarness().context())
        assert 'dir="ltr"' in html
        assert "/admin/static/app.css" in html
        assert "app.rtl.css" not in html

    def test_rtl_stylesheet(self) -> None:
        """Right-to-left pages load the mirrored stylesheet."""

        html = render(PanelHarness().context(dashboard=ArabicDashboard))
        assert 'dir="rtl"' in html
        assert 'lang="ar"' in html
        assert "/admin/static/app.rtl.css" in html

    def test_assets_rendered(self) -> None:
        """Dashboard and CRUD assets end up in the head."""

        html = render(PanelHarness().context(FILTERED_QUERY, UsersCrudController))
        assert '<link rel="stylesheet" href="/admin/static/css/admin.css">' in html
        assert '<script src="/admin/static/js/users.js" defer></script>' in html

    def test_colour_scheme_switcher(self) -> None:
        """The switcher is shown only when dark mode is enabled."""

        assert "color-scheme-switcher" in render(PanelHarness().context())
        plain = PanelHarness().context(dashboard=PlainDashboard)
        assert "color-scheme-switcher" not in render(plain)

    def test_selected_menu_entry_is_active(self) -> None:
        """The selected entry carries the active class."""

        html = render(PanelHarness().context("menuIndex=1"))
        assert 'class="menu-item active"' in html


class TestContentRegions:
    """Title, help, actions and overrides."""

    def test_help_and_actions(self) -> None:
        """Help becomes a popover and actions become buttons."""

        page = PageContent(
            title="Users",
            help="Everybody",
            actions=[ActionButton("Export", "/export", html_attributes={"download": "users.csv"})],
        )
        html = render(PanelHarness().context(), page)
        assert 'data-bs-content="Everybody"' in html
        assert '<a class="btn btn-primary" href="/export" download="users.csv">' in html
        assert "<title>Users | Main dashboard</title>" in html

    def test_title_is_escaped(self) -> None:
        """Page titles are plain text."""

        html = render(PanelHarness().context(), PageContent(title="<b>x</b>"))
        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert "<b>x</b>" not in html

    def test_region_override(self) -> None:
        """A region callback replaces the default template."""

        regions = LayoutRegions(footer=lambda context, page: f"<footer>{context.title}</footer>")
        html = render(PanelHarness().context(), PageContent(footer="default"), regions)
        assert "<footer>Main dashboard</footer>" in html
        assert "content-footer" not in html

    def test_fragment_receives_context(self) -> None:
        """Body fragments see the context as ``ea``."""

        fragment = LayoutRenderer().render_fragment(
            "crudpanel/welcome.html", PanelHarness().context()
        )
        assert "Welcome to Main dashboard." in fragment


# The End
