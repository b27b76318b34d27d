# -*- coding: utf-8 -*-
"""
assets

Stylesheets, scripts and raw head contents injected into admin pages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List


class AssetKind(str, Enum):
    """Kinds of asset rendered in the page head."""

    CSS = "css"
    JS = "js"
    HTML = "html"


@dataclass(frozen=True)
class Asset:
    """Single asset reference or raw HTML snippet."""

    value: str
    kind: AssetKind
    attributes: Dict[str, str] = field(default_factory=dict, hash=False)
    defer: bool = False
    is_async: bool = False

    @property
    def is_external(self) -> bool:
        """Return ``True`` for absolute or protocol-relative URLs."""

        return self.value.startswith(("http://", "https://", "//", "/"))


class Assets:
    """Ordered, de-duplicated asset lists of a dashboard or CRUD controller."""

    def __init__(self) -> None:
        self._items: List[Asset] = []

    def add_css_file(self, path: str, **attributes: str) -> "Assets":
        """Append a stylesheet."""

        return self._add(Asset(path, AssetKind.CSS, dict(attributes)))

    def add_js_file(
        self,
        path: str,
        *,
        defer: bool = False,
        is_async: bool = False,
        **attributes: str,
    ) -> "Assets":
        """Append a script."""

        return self._add(
            Asset(path, AssetKind.JS, dict(attributes), defer=defer, is_async=is_async)
        )

    def add_html_content_to_head(self, html: str) -> "Assets":
        """Append a raw HTML snippet rendered inside ``<head>``."""

        return self._add(Asset(html, AssetKind.HTML))

    def merge(self, other: "Assets") -> "Assets":
        """Return a new collection with ``other`` appended to this one."""

        merged = Assets()
        for asset in [*self._items, *other._items]:
            merged._add(asset)
        return merged

    def resolve(self, static_url: str) -> "Assets":
        """Return a copy where relative file paths are prefixed by ``static_url``."""

        resolved = Assets()
        base = static_url.rstrip("/")
        for asset in self._items:
            if asset.kind is not AssetKind.HTML and not asset.is_external:
                asset = replace(asset, value=f"{base}/{asset.value.removeprefix('./').lstrip('/')}")
            resolved._add(asset)
        return resolved

    @property
    def css_files(self) -> List[Asset]:
        return self._of_kind(AssetKind.CSS)

    @property
    def js_files(self) -> List[Asset]:
        return self._of_kind(AssetKind.JS)

    @property
    def head_contents(self) -> List[Asset]:
        return self._of_kind(AssetKind.HTML)

    def __len__(self) -> int:
        return len(self._items)

    def _of_kind(self, kind: AssetKind) -> List[Asset]:
        return [asset for asset in self._items if asset.kind is kind]

    def _add(self, asset: Asset) -> "Assets":
        for existing in self._items:
            if existing.kind is asset.kind and existing.value == asset.value:
                return self
        self._items.append(asset)
        return self


__all__ = ["Asset", "AssetKind", "Assets"]


# The End
