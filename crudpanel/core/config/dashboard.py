# -*- coding: utf-8 -*-
"""
dashboard

Declarative configuration returned by dashboard controllers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ColorScheme(str, Enum):
    """Appearance modes offered by the theme switcher."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class TextDirection(str, Enum):
    """Writing direction of the interface."""

    LTR = "ltr"
    RTL = "rtl"


@dataclass
class Dashboard:
    """Global options of one dashboard: branding, locale and page chrome.

    ``None`` values fall back to :class:`PanelSettings` or, for the text
    direction, to the direction implied by the locale.
    """

    title: str | None = None
    favicon_path: str | None = None
    translation_domain: str | None = None
    text_direction: TextDirection | None = None
    locale: str | None = None
    sidebar_minimized: bool = False
    content_maximized: bool = False
    dark_mode_enabled: bool = True
    default_color_scheme: ColorScheme = ColorScheme.AUTO


__all__ = ["ColorScheme", "Dashboard", "TextDirection"]


# The End
