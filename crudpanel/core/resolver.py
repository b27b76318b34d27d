# -*- coding: utf-8 -*-
"""
resolver

Materialise controller references into callable controller actions.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Any, Callable, Dict, Tuple, Type

from starlette.requests import Request

from .references import ControllerReference, controller_fqcn, import_controller

logger = logging.getLogger(__name__)

CONTROLLER_SCOPE_KEY = "controller"


def duplicate_request(
    request: Request,
    controller: ControllerReference,
    action: str,
) -> Request:
    """Return a request sharing ``request``'s scope but targeting ``controller.action``."""

    scope = dict(request.scope)
    scope[CONTROLLER_SCOPE_KEY] = (controller, action)
    return Request(scope, receive=request.receive)


class ControllerResolver:
    """Turn ``(reference, action)`` pairs into bound controller methods.

    Controller instances are created once per class by ``factory`` and
    reused for every request, so registries only ever hold references.
    """

    def __init__(self, factory: Callable[[Type], Any] | None = None) -> None:
        self._factory: Callable[[Type], Any] = factory or (lambda cls: cls())
        self._instances: Dict[str, Any] = {}
        self._lock = RLock()

    def get_controller(self, request: Request) -> Callable[..., Any] | None:
        """Return the callable targeted by ``request`` or ``None`` when unresolvable."""

        target: Tuple[ControllerReference, str] | None = request.scope.get(
            CONTROLLER_SCOPE_KEY
        )
        if target is None:
            return None
        reference, action = target
        controller_cls = import_controller(reference)
        if controller_cls is None:
            logger.debug("Controller '%s' cannot be imported", controller_fqcn(reference))
            return None
        if action.startswith("_"):
            return None
        instance = self.get_instance(controller_cls)
        allowed = getattr(instance, "actions", None)
        if allowed is not None and action not in allowed:
            return None
        handler = getattr(instance, action, None)
        if not callable(handler):
            return None
        return handler

    def get_instance(self, controller_cls: Type) -> Any:
        """Return the shared instance of ``controller_cls``."""

        key = controller_fqcn(controller_cls)
        with self._lock:
            instance = self._instances.get(key)
            if instance is None:
                instance = self._factory(controller_cls)
                self._instances[key] = instance
            return instance

    def reset(self) -> None:
        """Forget every cached controller instance."""

        with self._lock:
            self._instances.clear()


__all__ = ["CONTROLLER_SCOPE_KEY", "ControllerResolver", "duplicate_request"]


# The End
