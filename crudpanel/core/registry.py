# -*- coding: utf-8 -*-
"""
registry

Registries mapping opaque query-string identifiers to controllers.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Dict, Iterator, List

from .configuration.conf import PanelSettings, current_settings
from .exceptions import ConfigurationError
from .references import ControllerReference, controller_fqcn


def make_identifier(secret: str, reference: ControllerReference) -> str:
    """Return the short stable identifier of ``reference`` salted with ``secret``."""

    digest = hashlib.sha1(f"{secret}{controller_fqcn(reference)}".encode("utf-8"))
    return digest.hexdigest()[:7]


@dataclass(frozen=True)
class DashboardEntry:
    """Registry entry describing one dashboard."""

    context_id: str
    controller: ControllerReference
    path: str
    name: str

    @property
    def fqcn(self) -> str:
        return controller_fqcn(self.controller)


@dataclass(frozen=True)
class CrudEntry:
    """Registry entry describing one CRUD controller."""

    crud_id: str
    controller: ControllerReference
    entity: str | None

    @property
    def fqcn(self) -> str:
        return controller_fqcn(self.controller)


class DashboardControllerRegistry:
    """Store dashboards keyed by their context identifier."""

    def __init__(self, settings: PanelSettings | None = None) -> None:
        self._settings = settings or current_settings()
        self._entries: Dict[str, DashboardEntry] = {}

    def register(
        self,
        controller: ControllerReference,
        *,
        path: str | None = None,
        name: str | None = None,
        context_id: str | None = None,
    ) -> DashboardEntry:
        """Register ``controller`` and return its entry.

        Registering the same controller twice returns the existing entry;
        reusing an identifier for another controller raises
        :class:`ConfigurationError`.
        """

        fqcn = controller_fqcn(controller)
        for entry in self._entries.values():
            if entry.fqcn == fqcn:
                return entry
        context_id = context_id or make_identifier(self._settings.secret_key, controller)
        if context_id in self._entries:
            raise ConfigurationError(
                f"Context id '{context_id}' is already used by {self._entries[context_id].fqcn}"
            )
        route_path = path or self._settings.admin_path
        for entry in self._entries.values():
            if entry.path == route_path:
                raise ConfigurationError(f"Path conflict: {route_path}")
        entry = DashboardEntry(
            context_id=context_id,
            controller=controller,
            path=route_path,
            name=name or f"crudpanel-dashboard-{context_id}",
        )
        self._entries[context_id] = entry
        return entry

    def get_controller_by_context_id(self, context_id: str) -> ControllerReference | None:
        entry = self._entries.get(context_id)
        return entry.controller if entry is not None else None

    def get_entry_by_context_id(self, context_id: str) -> DashboardEntry | None:
        return self._entries.get(context_id)

    def get_context_id_by_controller(self, controller: ControllerReference) -> str | None:
        fqcn = controller_fqcn(controller)
        for entry in self._entries.values():
            if entry.fqcn == fqcn:
                return entry.context_id
        return None

    def get_first_entry(self) -> DashboardEntry | None:
        return next(iter(self._entries.values()), None)

    def count(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DashboardEntry]:
        return iter(list(self._entries.values()))


class CrudControllerRegistry:
    """Store CRUD controllers keyed by their CRUD identifier."""

    def __init__(self, settings: PanelSettings | None = None) -> None:
        self._settings = settings or current_settings()
        self._entries: Dict[str, CrudEntry] = {}

    def register(
        self,
        controller: ControllerReference,
        *,
        crud_id: str | None = None,
        entity: ControllerReference | None = None,
    ) -> CrudEntry:
        """Register ``controller`` and return its entry."""

        fqcn = controller_fqcn(controller)
        for entry in self._entries.values():
            if entry.fqcn == fqcn:
                return entry
        crud_id = crud_id or make_identifier(self._settings.secret_key, controller)
        if crud_id in self._entries:
            raise ConfigurationError(
                f"CRUD id '{crud_id}' is already used by {self._entries[crud_id].fqcn}"
            )
        if entity is None and not isinstance(controller, str):
            entity = getattr(controller, "entity", None)
        entry = CrudEntry(
            crud_id=crud_id,
            controller=controller,
            entity=controller_fqcn(entity) if entity is not None else None,
        )
        self._entries[crud_id] = entry
        return entry

    def find_crud_fqcn_by_crud_id(self, crud_id: str) -> ControllerReference | None:
        entry = self._entries.get(crud_id)
        return entry.controller if entry is not None else None

    def find_crud_id_by_crud_fqcn(self, controller: ControllerReference) -> str | None:
        fqcn = controller_fqcn(controller)
        for entry in self._entries.values():
            if entry.fqcn == fqcn:
                return entry.crud_id
        return None

    def find_crud_fqcn_by_entity(self, entity: ControllerReference) -> ControllerReference | None:
        """Return the first controller managing ``entity``."""

        fqcn = controller_fqcn(entity)
        for entry in self._entries.values():
            if entry.entity == fqcn:
                return entry.controller
        return None

    def find_entity_by_crud_id(self, crud_id: str) -> str | None:
        entry = self._entries.get(crud_id)
        return entry.entity if entry is not None else None

    def entries(self) -> List[CrudEntry]:
        return list(self._entries.values())

    def __iter__(self) -> Iterator[CrudEntry]:
        return iter(self.entries())


__all__ = [
    "CrudControllerRegistry",
    "CrudEntry",
    "DashboardControllerRegistry",
    "DashboardEntry",
    "make_identifier",
]


# The End
