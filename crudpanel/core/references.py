# -*- coding: utf-8 -*-
"""
references

Helpers for controller references given as classes or dotted paths.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Type, Union

logger = logging.getLogger(__name__)

ControllerReference = Union[Type, str]


def controller_fqcn(reference: ControllerReference) -> str:
    """Return the fully qualified name of ``reference``.

    Dotted strings accept both ``package.module.Class`` and
    ``package.module:Class`` and are normalised to the dotted form.
    """

    if isinstance(reference, str):
        return reference.strip().replace(":", ".")
    return f"{reference.__module__}.{reference.__qualname__}"


def import_controller(reference: ControllerReference) -> Type | None:
    """Return the class designated by ``reference`` or ``None`` when unknown."""

    if not isinstance(reference, str):
        return reference
    path = reference.strip()
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        return None
    try:
        target: object = import_module(module_name)
    except ImportError:
        logger.debug("Controller module '%s' cannot be imported", module_name)
        return None
    for part in attr_path.split("."):
        target = getattr(target, part, None)
        if target is None:
            return None
    return target if isinstance(target, type) else None


__all__ = ["ControllerReference", "controller_fqcn", "import_controller"]


# The End
