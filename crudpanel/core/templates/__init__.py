# -*- coding: utf-8 -*-
"""
templates

Template service, renderer and page layout.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .layout import ActionButton, LayoutRegions, LayoutRenderer, PageContent
from .provider import TemplateProvider
from .rendering import TemplateRenderer
from .service import DEFAULT_TEMPLATE_SERVICE, TemplateService

__all__ = [
    "ActionButton",
    "DEFAULT_TEMPLATE_SERVICE",
    "LayoutRegions",
    "LayoutRenderer",
    "PageContent",
    "TemplateProvider",
    "TemplateRenderer",
    "TemplateService",
]


# The End
