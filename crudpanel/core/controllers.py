# -*- coding: utf-8 -*-
"""
controllers

Base classes for dashboard and CRUD controllers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Iterable, List, Sequence, Tuple

from starlette.requests import Request
from starlette.responses import HTMLResponse, Response

from .config.assets import Assets
from .config.crud import Action, Crud, Field
from .config.dashboard import Dashboard
from .config.menu import MenuItem, MenuItems, UserMenu
from .context.admin_context import AdminContext
from .context.state import get_admin_context
from .exceptions import NotFoundError
from .templates.layout import ActionButton, LayoutRegions, LayoutRenderer, PageContent
from .urls import QueryParam


@dataclass(frozen=True)
class Pagination:
    """Position of a listing page among all pages."""

    page: int
    page_count: int
    total: int
    previous_url: str | None = None
    next_url: str | None = None


class AbstractController:
    """Shared rendering helpers for panel controllers."""

    layout_regions: ClassVar[LayoutRegions | None] = None

    def get_layout_renderer(self) -> LayoutRenderer:
        """Return the renderer used for full pages."""

        return LayoutRenderer()

    def render_page(self, context: AdminContext, page: PageContent) -> HTMLResponse:
        """Render ``page`` inside the admin layout."""

        return self.get_layout_renderer().render_response(
            context, page, regions=self.layout_regions
        )


class DashboardController(AbstractController):
    """Entry point of one admin panel: branding, menus and assets.

    Subclass it and override the ``configure_*`` hooks. The ``index`` action
    is mounted on the dashboard path by :class:`crudpanel.AdminPanel`.
    """

    actions: ClassVar[Tuple[str, ...]] = ("index",)

    def configure_dashboard(self) -> Dashboard:
        return Dashboard()

    def configure_menu_items(self) -> Iterable[MenuItem]:
        return [MenuItems.link_to_dashboard("Dashboard", "bi-house")]

    def configure_user_menu(self, user: Any) -> UserMenu:
        """Return the user menu shown for ``user``."""

        name = getattr(user, "display_name", None) or getattr(user, "username", None)
        return UserMenu(name=name or str(user))

    def configure_assets(self) -> Assets:
        return Assets()

    def configure_crud(self) -> Crud:
        """Return defaults shared by every CRUD controller of this dashboard."""

        return Crud()

    async def index(self, request: Request) -> Response:
        context = get_admin_context(request)
        if context is None:
            raise NotFoundError("Dashboard context is not available.")
        body = self.get_layout_renderer().render_fragment("crudpanel/welcome.html", context)
        page = PageContent(title=context.title, body=body)
        return self.render_page(context, page)


class CrudController(AbstractController):
    """List and detail pages for one entity type.

    Subclasses declare ``entity`` and provide data through
    :meth:`get_entities` and :meth:`get_entity`.
    """

    entity: ClassVar[Any] = None
    actions: ClassVar[Tuple[str, ...]] = (Action.INDEX, Action.DETAIL)

    @classmethod
    def entity_name(cls) -> str:
        if cls.entity is not None:
            return getattr(cls.entity, "__name__", str(cls.entity))
        name = cls.__name__
        if name.endswith("CrudController") and name != "CrudController":
            return name[: -len("CrudController")]
        return name

    def configure_crud(self, crud: Crud) -> Crud:
        return crud

    def configure_assets(self, assets: Assets) -> Assets:
        return assets

    def configure_fields(self, action: str) -> Sequence[Field]:
        return [Field("id")]

    def get_entities(self, context: AdminContext) -> Iterable[Any]:
        return []

    def get_entity(self, context: AdminContext, entity_id: str) -> Any | None:
        for entity in self.get_entities(context):
            if str(Field("id").value_of(entity)) == entity_id:
                return entity
        return None

    def search_entities(self, context: AdminContext, entities: Iterable[Any]) -> List[Any]:
        """Keep entities whose search fields contain the free-text query."""

        search = context.search
        if search is None or not search.query or not search.search_fields:
            return list(entities)
        needle = search.query.casefold()
        return [
            entity
            for entity in entities
            if any(
                needle in str(Field(name).value_of(entity) or "").casefold()
                for name in search.search_fields
            )
        ]

    def page_actions(self, context: AdminContext) -> List[ActionButton]:
        return []

    def paginate(
        self, context: AdminContext, entities: List[Any], page: str | None
    ) -> Tuple[List[Any], Pagination]:
        """Return the entities of the requested page and its navigation state."""

        size = context.crud.config.page_size if context.crud is not None else 0
        total = len(entities)
        if size < 1:
            return entities, Pagination(page=1, page_count=1, total=total)
        page_count = max(1, math.ceil(total / size))
        try:
            number = int(page) if page is not None else 1
        except ValueError:
            number = 1
        number = min(max(number, 1), page_count)
        visible = entities[(number - 1) * size : number * size]
        return visible, Pagination(
            page=number,
            page_count=page_count,
            total=total,
            previous_url=self.listing_url(context, number - 1) if number > 1 else None,
            next_url=self.listing_url(context, number + 1) if number < page_count else None,
        )

    def listing_url(self, context: AdminContext, page: int) -> str:
        """Return the listing URL of ``page`` keeping search, filters and menu state."""

        crud_id = context.crud.crud_id if context.crud is not None else ""
        params: Dict[str, Any] = {
            QueryParam.CRUD_ID: crud_id,
            QueryParam.CRUD_ACTION: Action.INDEX,
        }
        query_params = context.request.query_params
        for name in (QueryParam.MENU_INDEX, QueryParam.SUBMENU_INDEX, QueryParam.QUERY):
            if query_params.get(name):
                params[name] = query_params[name]
        if context.search is not None:
            params.update(context.search.hidden_filter_fields)
        params[QueryParam.PAGE] = page
        return context.urls.build(params)

    async def index(self, context: AdminContext, page: str | None = None) -> Response:
        crud = context.crud
        fields = list(self.configure_fields(Action.INDEX))
        entities = self.search_entities(context, self.get_entities(context))
        entities, pagination = self.paginate(context, entities, page)
        crud_id = crud.crud_id if crud is not None else ""
        rows = [
            {
                "values": [field.value_of(entity) for field in fields],
                "url": context.urls.for_crud_id(
                    crud_id,
                    Action.DETAIL,
                    entityId=Field("id").value_of(entity),
                ),
            }
            for entity in entities
        ]
        renderer = self.get_layout_renderer()
        body = renderer.render_fragment(
            "crudpanel/crud/index.html",
            context,
            fields=fields,
            rows=rows,
            pagination=pagination,
        )
        content = PageContent(
            title=crud.page_title if crud is not None else context.title,
            help=crud.help_message if crud is not None else None,
            body=body,
            actions=self.page_actions(context),
        )
        return self.render_page(context, content)

    async def detail(self, context: AdminContext, entityId: str) -> Response:
        entity = self.get_entity(context, entityId)
        if entity is None:
            raise NotFoundError(f"{self.entity_name()} '{entityId}' does not exist.")
        crud = context.crud
        fields = list(self.configure_fields(Action.DETAIL))
        renderer = self.get_layout_renderer()
        body = renderer.render_fragment(
            "crudpanel/crud/detail.html",
            context,
            fields=fields,
            values=[field.value_of(entity) for field in fields],
        )
        page = PageContent(
            title=crud.page_title if crud is not None else context.title,
            help=crud.help_message if crud is not None else None,
            body=body,
            actions=self.page_actions(context),
        )
        return self.render_page(context, page)


__all__ = ["AbstractController", "CrudController", "DashboardController", "Pagination"]


# The End
