# -*- coding: utf-8 -*-
"""
configuration

Configuration helpers for CrudPanel core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import (
    PanelSettings,
    SettingsManager,
    configure,
    current_settings,
    register_settings_observer,
    reset_settings,
    unregister_settings_observer,
)

__all__ = [
    "PanelSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "register_settings_observer",
    "reset_settings",
    "unregister_settings_observer",
]


# The End
