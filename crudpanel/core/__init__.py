# -*- coding: utf-8 -*-
"""
core

Core package of CrudPanel.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .context import AdminContext, AdminContextFactory, get_admin_context
from .controllers import CrudController, DashboardController
from .panel import AdminPanel

__all__ = [
    "AdminContext",
    "AdminContextFactory",
    "AdminPanel",
    "CrudController",
    "DashboardController",
    "get_admin_context",
]


# The End
