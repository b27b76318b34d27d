# -*- coding: utf-8 -*-
"""
config

Declarative configuration objects used by dashboards and CRUD controllers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .assets import Asset, AssetKind, Assets
from .crud import Action, Crud, Field
from .dashboard import ColorScheme, Dashboard, TextDirection
from .menu import MenuItem, MenuItems, MenuItemType, UserMenu

__all__ = [
    "Action",
    "Asset",
    "AssetKind",
    "Assets",
    "ColorScheme",
    "Crud",
    "Dashboard",
    "Field",
    "MenuItem",
    "MenuItemType",
    "MenuItems",
    "TextDirection",
    "UserMenu",
]


# The End
