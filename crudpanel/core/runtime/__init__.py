# -*- coding: utf-8 -*-
"""
runtime

Request-time components: the context listener, invoker and middleware.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .invoker import ControllerInvoker
from .listener import AdminContextListener, ControllerEvent, is_admin_request
from .middleware import AdminContextMiddleware

__all__ = [
    "AdminContextListener",
    "AdminContextMiddleware",
    "ControllerEvent",
    "ControllerInvoker",
    "is_admin_request",
]


# The End
