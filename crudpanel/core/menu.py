# -*- coding: utf-8 -*-
"""
menu

Turn declared menu items into rendered entries with URLs and selection state.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from .config.menu import MenuItem, MenuItemType, UserMenu
from .urls import AdminUrlGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MenuEntry:
    """Menu item ready for rendering."""

    label: str
    type: MenuItemType
    url: str | None
    icon: str | None = None
    index: int = -1
    subindex: int = -1
    selected: bool = False
    expanded: bool = False
    css_class: str = ""
    target: str | None = None
    badge: str | None = None
    children: Tuple["MenuEntry", ...] = ()

    @property
    def is_section_header(self) -> bool:
        return self.type is MenuItemType.SECTION

    @property
    def is_submenu(self) -> bool:
        return self.type is MenuItemType.SUBMENU


@dataclass(frozen=True)
class MainMenu:
    """Rendered main menu and the position of the selected entry."""

    entries: Tuple[MenuEntry, ...] = ()
    selected_index: int = -1
    selected_subindex: int = -1

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def selected(self) -> MenuEntry | None:
        """Return the most specific selected entry."""

        for entry in self.entries:
            for child in entry.children:
                if child.selected:
                    return child
            if entry.selected:
                return entry
        return None


@dataclass(frozen=True)
class UserMenuView:
    """Rendered user menu split into labelled sections."""

    name: str | None
    avatar_url: str | None
    display_name: bool
    display_avatar: bool
    sections: Tuple[Tuple[MenuEntry | None, Tuple[MenuEntry, ...]], ...]

    @property
    def has_items(self) -> bool:
        return any(entries for _header, entries in self.sections)


class MainMenuBuilder:
    """Assemble :class:`MainMenu` and :class:`UserMenuView` structures."""

    def __init__(self, urls: AdminUrlGenerator) -> None:
        self._urls = urls

    def build_main_menu(
        self,
        items: Iterable[MenuItem],
        *,
        selected_index: int = -1,
        selected_subindex: int = -1,
    ) -> MainMenu:
        """Return the main menu with URLs and the selected entry marked."""

        entries: List[MenuEntry] = []
        for index, item in enumerate(items):
            children: List[MenuEntry] = []
            for subindex, child in enumerate(item.children):
                children.append(
                    self._entry(
                        child,
                        index=index,
                        subindex=subindex,
                        selected=index == selected_index and subindex == selected_subindex,
                    )
                )
            is_current = index == selected_index
            entries.append(
                self._entry(
                    item,
                    index=index,
                    subindex=-1,
                    selected=is_current and (selected_subindex == -1 or bool(children)),
                    expanded=is_current and bool(children),
                    children=tuple(children),
                )
            )
        return MainMenu(
            entries=tuple(entries),
            selected_index=selected_index,
            selected_subindex=selected_subindex,
        )

    def build_user_menu(self, user_menu: UserMenu) -> UserMenuView:
        """Return the user menu with resolved URLs grouped by section."""

        sections = []
        for header, items in user_menu.sections():
            header_entry = self._entry(header) if header is not None else None
            sections.append((header_entry, tuple(self._entry(item) for item in items)))
        return UserMenuView(
            name=user_menu.name,
            avatar_url=user_menu.avatar_url,
            display_name=user_menu.display_name,
            display_avatar=user_menu.display_avatar,
            sections=tuple(sections),
        )

    def _entry(
        self,
        item: MenuItem,
        *,
        index: int = -1,
        subindex: int = -1,
        selected: bool = False,
        expanded: bool = False,
        children: Tuple[MenuEntry, ...] = (),
    ) -> MenuEntry:
        return MenuEntry(
            label=item.label,
            type=item.type,
            url=self._url_for(item, index, subindex),
            icon=item.icon,
            index=index,
            subindex=subindex,
            selected=selected,
            expanded=expanded,
            css_class=item.css_class,
            target=item.target,
            badge=item.badge,
            children=children,
        )

    def _url_for(self, item: MenuItem, index: int, subindex: int) -> str | None:
        position = {}
        if index >= 0:
            position = {"menuIndex": index, "submenuIndex": subindex}
        if item.type is MenuItemType.DASHBOARD:
            return self._urls.for_dashboard(**position)
        if item.type is MenuItemType.CRUD:
            url = self._urls.for_crud(
                item.crud_controller,
                item.crud_action,
                **{**dict(item.query), **position},
            )
            if url is None:
                logger.warning(
                    "Menu item '%s' links to an unregistered CRUD controller", item.label
                )
            return url
        if item.type in (MenuItemType.URL, MenuItemType.LOGOUT):
            return item.url
        return None


__all__ = ["MainMenu", "MainMenuBuilder", "MenuEntry", "UserMenuView"]


# The End
