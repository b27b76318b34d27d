# -*- coding: utf-8 -*-
"""
menu

Menu item declarations for the main menu and the user menu.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple

from ..references import ControllerReference


class MenuItemType(str, Enum):
    """Kinds of menu entries."""

    DASHBOARD = "dashboard"
    CRUD = "crud"
    URL = "url"
    SECTION = "section"
    SUBMENU = "submenu"
    LOGOUT = "logout"


@dataclass(frozen=True)
class MenuItem:
    """Declared menu entry; URLs of dashboard and CRUD links are generated later."""

    label: str
    type: MenuItemType
    icon: str | None = None
    url: str | None = None
    crud_controller: ControllerReference | None = None
    crud_action: str = "index"
    query: Tuple[Tuple[str, str], ...] = ()
    css_class: str = ""
    target: str | None = None
    badge: str | None = None
    children: Tuple["MenuItem", ...] = ()

    @property
    def is_section_header(self) -> bool:
        return self.type is MenuItemType.SECTION

    @property
    def is_submenu(self) -> bool:
        return self.type is MenuItemType.SUBMENU


class MenuItems:
    """Factory helpers mirroring the kinds of links a dashboard can declare."""

    @staticmethod
    def link_to_dashboard(label: str, icon: str | None = None) -> MenuItem:
        return MenuItem(label=label, type=MenuItemType.DASHBOARD, icon=icon)

    @staticmethod
    def link_to_crud(
        label: str,
        icon: str | None,
        controller: ControllerReference,
        *,
        action: str = "index",
        query: Dict[str, str] | None = None,
        badge: str | None = None,
    ) -> MenuItem:
        return MenuItem(
            label=label,
            type=MenuItemType.CRUD,
            icon=icon,
            crud_controller=controller,
            crud_action=action,
            query=tuple((query or {}).items()),
            badge=badge,
        )

    @staticmethod
    def link_to_url(
        label: str,
        icon: str | None,
        url: str,
        *,
        target: str | None = None,
    ) -> MenuItem:
        return MenuItem(label=label, type=MenuItemType.URL, icon=icon, url=url, target=target)

    @staticmethod
    def link_to_logout(label: str, icon: str | None, url: str) -> MenuItem:
        return MenuItem(label=label, type=MenuItemType.LOGOUT, icon=icon, url=url)

    @staticmethod
    def section(label: str = "", icon: str | None = None) -> MenuItem:
        return MenuItem(label=label, type=MenuItemType.SECTION, icon=icon)

    @staticmethod
    def submenu(label: str, icon: str | None, children: Iterable[MenuItem]) -> MenuItem:
        return MenuItem(
            label=label,
            type=MenuItemType.SUBMENU,
            icon=icon,
            children=tuple(children),
        )


@dataclass
class UserMenu:
    """Avatar, name and dropdown entries shown for the signed-in user."""

    name: str | None = None
    avatar_url: str | None = None
    display_name: bool = True
    display_avatar: bool = True
    items: List[MenuItem] = field(default_factory=list)

    def add_items(self, *items: MenuItem) -> "UserMenu":
        self.items.extend(items)
        return self

    def sections(self) -> List[Tuple[MenuItem | None, List[MenuItem]]]:
        """Split ``items`` at section headers.

        Each tuple holds the header (``None`` for items placed before the
        first header) and the links under it. Empty leading groups are
        dropped.
        """

        groups: List[Tuple[MenuItem | None, List[MenuItem]]] = [(None, [])]
        for item in self.items:
            if item.is_section_header:
                groups.append((item, []))
            else:
                groups[-1][1].append(item)
        if groups[0][1] == []:
            groups.pop(0)
        return groups


__all__ = ["MenuItem", "MenuItemType", "MenuItems", "UserMenu"]


# The End
