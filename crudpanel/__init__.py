# -*- coding: utf-8 -*-
"""
crudpanel

Administration panels for Starlette and FastAPI applications.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .core.config import (
    Assets,
    ColorScheme,
    Crud,
    Dashboard,
    Field,
    MenuItems,
    TextDirection,
    UserMenu,
)
from .core.configuration import PanelSettings, configure, current_settings
from .core.context import AdminContext, get_admin_context
from .core.controllers import CrudController, DashboardController
from .core.exceptions import ConfigurationError, ControllerNotFoundError
from .core.panel import AdminPanel
from .core.templates import ActionButton, LayoutRegions, PageContent

__version__ = "0.1.0"

__all__ = [
    "ActionButton",
    "AdminContext",
    "AdminPanel",
    "Assets",
    "ColorScheme",
    "ConfigurationError",
    "ControllerNotFoundError",
    "Crud",
    "CrudController",
    "Dashboard",
    "DashboardController",
    "Field",
    "LayoutRegions",
    "MenuItems",
    "PageContent",
    "PanelSettings",
    "TextDirection",
    "UserMenu",
    "configure",
    "current_settings",
    "get_admin_context",
]


# The End
