# -*- coding: utf-8 -*-
"""
state

Accessors for the admin context stored on ``request.state``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.requests import Request

from ..configuration.conf import current_settings

if TYPE_CHECKING:  # pragma: no cover
    from .admin_context import AdminContext

ATTRIBUTE_SCOPE_KEY = "crudpanel.context_attribute"


def get_admin_context(request: Request, attribute: str | None = None) -> "AdminContext | None":
    """Return the context attached to ``request`` if any."""

    name = (
        attribute
        or request.scope.get(ATTRIBUTE_SCOPE_KEY)
        or current_settings().context_attribute
    )
    return getattr(request.state, name, None)


def set_admin_context(
    request: Request,
    context: "AdminContext",
    attribute: str | None = None,
) -> None:
    """Attach ``context`` to ``request`` and remember where it was stored."""

    name = attribute or current_settings().context_attribute
    request.scope[ATTRIBUTE_SCOPE_KEY] = name
    setattr(request.state, name, context)


__all__ = ["ATTRIBUTE_SCOPE_KEY", "get_admin_context", "set_admin_context"]


# The End
