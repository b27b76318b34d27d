# -*- coding: utf-8 -*-
"""
urls

Query-string parameter names and the admin URL generator.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict, Mapping
from urllib.parse import urlencode

from .references import ControllerReference
from .registry import CrudControllerRegistry


class QueryParam:
    """Names of the query-string parameters understood by the panel."""

    CONTEXT_ID = "eaContext"
    CRUD_ID = "crudId"
    CRUD_ACTION = "crudAction"
    ENTITY_ID = "entityId"
    MENU_INDEX = "menuIndex"
    SUBMENU_INDEX = "submenuIndex"
    QUERY = "query"
    FILTERS = "filters"
    PAGE = "page"


class AdminUrlGenerator:
    """Build dashboard-relative URLs carrying the context identifier."""

    def __init__(
        self,
        dashboard_path: str,
        context_id: str | None,
        crud_registry: CrudControllerRegistry | None = None,
    ) -> None:
        self._path = dashboard_path or "/"
        self._context_id = context_id
        self._cruds = crud_registry

    @property
    def dashboard_path(self) -> str:
        return self._path

    def for_dashboard(self, **params: Any) -> str:
        """Return the dashboard URL with ``params`` appended."""

        return self.build(params)

    def for_crud(
        self,
        controller: ControllerReference,
        action: str = "index",
        /,
        **params: Any,
    ) -> str | None:
        """Return the URL running ``controller.action``; ``None`` if not registered."""

        crud_id = self._cruds.find_crud_id_by_crud_fqcn(controller) if self._cruds else None
        if crud_id is None:
            return None
        return self.for_crud_id(crud_id, action, **params)

    def for_crud_id(self, crud_id: str, action: str = "index", /, **params: Any) -> str:
        payload: Dict[str, Any] = {
            QueryParam.CRUD_ID: crud_id,
            QueryParam.CRUD_ACTION: action,
        }
        payload.update(params)
        return self.build(payload)

    def build(self, params: Mapping[str, Any]) -> str:
        """Return the dashboard path followed by the encoded query string."""

        payload: Dict[str, Any] = {}
        if self._context_id is not None:
            payload[QueryParam.CONTEXT_ID] = self._context_id
        payload.update({key: value for key, value in params.items() if value is not None})
        if not payload:
            return self._path
        return f"{self._path}?{urlencode(payload)}"


__all__ = ["AdminUrlGenerator", "QueryParam"]


# The End
