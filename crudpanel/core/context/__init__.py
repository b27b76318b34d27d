# -*- coding: utf-8 -*-
"""
context

Per-request admin context, its factory and request-state accessors.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .admin_context import AdminContext, CrudContext, I18nContext, SearchContext
from .factory import AdminContextFactory
from .filters import flatten_params, parse_nested_params
from .state import get_admin_context, set_admin_context

__all__ = [
    "AdminContext",
    "AdminContextFactory",
    "CrudContext",
    "I18nContext",
    "SearchContext",
    "flatten_params",
    "get_admin_context",
    "parse_nested_params",
    "set_admin_context",
]


# The End
