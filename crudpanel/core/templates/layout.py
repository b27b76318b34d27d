# -*- coding: utf-8 -*-
"""
layout

Page chrome composed from independently replaceable regions.

Every region is rendered with the admin context passed explicitly as ``ea``;
a region may be replaced by any callable ``(context, page) -> str``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, List, TYPE_CHECKING

from markupsafe import Markup
from starlette.responses import HTMLResponse

from .rendering import TemplateRenderer

if TYPE_CHECKING:  # pragma: no cover
    from ..context.admin_context import AdminContext


@dataclass(frozen=True)
class ActionButton:
    """Page-level action rendered next to the title."""

    label: str
    url: str
    icon: str | None = None
    css_class: str = "btn btn-primary"
    html_attributes: Dict[str, str] = field(default_factory=dict, hash=False)


@dataclass
class PageContent:
    """Content of one page placed inside the layout."""

    title: str | None = None
    body: str = ""
    help: str | None = None
    actions: List[ActionButton] = field(default_factory=list)
    footer: str | None = None
    body_class: str = ""


RegionRenderer = Callable[["AdminContext", PageContent], str]


@dataclass
class LayoutRegions:
    """Optional replacements for the layout regions; ``None`` keeps the default."""

    head: RegionRenderer | None = None
    sidebar: RegionRenderer | None = None
    responsive_header: RegionRenderer | None = None
    search: RegionRenderer | None = None
    user_menu: RegionRenderer | None = None
    appearance: RegionRenderer | None = None
    content_header: RegionRenderer | None = None
    content: RegionRenderer | None = None
    footer: RegionRenderer | None = None


class LayoutRenderer:
    """Render full admin pages."""

    LAYOUT_TEMPLATE = "crudpanel/layout.html"
    REGION_TEMPLATES: Dict[str, str] = {
        "head": "crudpanel/layout/head.html",
        "sidebar": "crudpanel/layout/sidebar.html",
        "responsive_header": "crudpanel/layout/responsive_header.html",
        "search": "crudpanel/layout/search.html",
        "user_menu": "crudpanel/layout/user_menu.html",
        "appearance": "crudpanel/layout/appearance.html",
        "content_header": "crudpanel/layout/content_header.html",
        "content": "crudpanel/layout/content.html",
        "footer": "crudpanel/layout/footer.html",
    }

    def __init__(self, renderer: type[TemplateRenderer] = TemplateRenderer) -> None:
        self._renderer = renderer

    def render(
        self,
        context: "AdminContext",
        page: PageContent,
        regions: LayoutRegions | None = None,
    ) -> str:
        """Return the HTML of ``page`` wrapped in the layout."""

        overrides = regions or LayoutRegions()
        rendered = {
            region.name: self.render_region(
                region.name, context, page, getattr(overrides, region.name)
            )
            for region in fields(LayoutRegions)
        }
        return str(
            self._renderer.render(
                self.LAYOUT_TEMPLATE,
                {"ea": context, "page": page, "regions": rendered},
            )
        )

    def render_response(
        self,
        context: "AdminContext",
        page: PageContent,
        regions: LayoutRegions | None = None,
        *,
        status_code: int = 200,
    ) -> HTMLResponse:
        return HTMLResponse(self.render(context, page, regions), status_code=status_code)

    def render_region(
        self,
        name: str,
        context: "AdminContext",
        page: PageContent,
        override: RegionRenderer | None = None,
    ) -> Markup:
        """Render one region, using ``override`` when given."""

        if override is not None:
            return Markup(override(context, page))
        return self._renderer.render(
            self.REGION_TEMPLATES[name], {"ea": context, "page": page}
        )

    def render_fragment(
        self,
        template_name: str,
        context: "AdminContext",
        **values: Any,
    ) -> Markup:
        """Render a body fragment such as a CRUD listing."""

        return self._renderer.render(template_name, {"ea": context, **values})


__all__ = [
    "ActionButton",
    "LayoutRegions",
    "LayoutRenderer",
    "PageContent",
    "RegionRenderer",
]


# The End
