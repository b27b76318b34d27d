# -*- coding: utf-8 -*-
"""
crud

Declarative configuration of CRUD pages and their fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


class Action:
    """Names of the built-in CRUD actions."""

    INDEX = "index"
    DETAIL = "detail"


@dataclass(frozen=True)
class Field:
    """Column or property of an entity displayed on CRUD pages."""

    name: str
    label: str | None = None
    css_class: str = ""

    @property
    def display_label(self) -> str:
        """Return the label, deriving it from the field name when unset."""

        if self.label:
            return self.label
        return self.name.replace("_", " ").capitalize()

    def value_of(self, entity: Any) -> Any:
        """Extract the field value from a mapping or an attribute holder."""

        if isinstance(entity, dict):
            return entity.get(self.name)
        return getattr(entity, self.name, None)


@dataclass
class Crud:
    """Options shared by every page of one CRUD controller.

    Setting ``search_fields`` to ``None`` disables the search form.
    """

    entity_label_singular: str | None = None
    entity_label_plural: str | None = None
    search_fields: Tuple[str, ...] | None = ()
    page_titles: Dict[str, str] = field(default_factory=dict)
    help_messages: Dict[str, str] = field(default_factory=dict)
    page_size: int = 20

    def set_entity_labels(self, singular: str, plural: str) -> "Crud":
        """Set the human readable entity names."""

        self.entity_label_singular = singular
        self.entity_label_plural = plural
        return self

    def set_page_title(self, action: str, title: str) -> "Crud":
        """Override the title shown for ``action``."""

        self.page_titles[action] = title
        return self

    def set_help(self, action: str, message: str) -> "Crud":
        """Attach an inline help message to ``action``."""

        self.help_messages[action] = message
        return self

    def set_page_size(self, size: int) -> "Crud":
        """Show ``size`` entities per listing page; ``0`` shows all of them."""

        self.page_size = max(0, size)
        return self

    def set_search_fields(self, fields: Tuple[str, ...] | None) -> "Crud":
        """Restrict the free-text search to ``fields``; ``None`` disables it."""

        self.search_fields = tuple(fields) if fields is not None else None
        return self

    def title_for(self, action: str, entity_name: str) -> str:
        """Return the page title for ``action``."""

        if action in self.page_titles:
            return self.page_titles[action]
        if action == Action.INDEX:
            return self.entity_label_plural or entity_name
        return self.entity_label_singular or entity_name


__all__ = ["Action", "Crud", "Field"]


# The End
