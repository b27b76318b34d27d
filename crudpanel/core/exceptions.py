# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the panel core.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class PanelError(Exception):
    """Base class for panel-specific exceptions."""


class ConfigurationError(PanelError):
    """Raised when dashboards or CRUD controllers are registered inconsistently."""


# --- HTTP-like domain errors -------------------------------------------------

class HTTPError(PanelError):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class BadRequestError(HTTPError):
    """Raised when a request fails validation or is malformed."""

    status_code = 400


class NotFoundError(HTTPError):
    """Raised when a requested resource is not found."""

    status_code = 404


class ControllerNotFoundError(NotFoundError):
    """Raised when a registered controller reference cannot be materialised."""

    def __init__(self, controller: str, action: str) -> None:
        super().__init__(f'Unable to find the controller "{controller}::{action}".')
        self.controller = controller
        self.action = action


__all__ = [
    "BadRequestError",
    "ConfigurationError",
    "ControllerNotFoundError",
    "HTTPError",
    "NotFoundError",
    "PanelError",
]


# The End
