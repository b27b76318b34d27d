# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the CrudPanel package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Mapping


@dataclass
class PanelSettings:
    """Container for panel configuration derived from environment variables."""

    secret_key: str = field(default_factory=lambda: "change-me")
    admin_path: str = "/admin"
    site_title: str = "CrudPanel"
    default_locale: str = "en"
    translation_domain: str = "messages"
    context_attribute: str = "admin_context"
    static_url_segment: str = "/static"
    static_route_name: str = "crudpanel-static"
    favicon_path: str = "favicon.svg"

    def __post_init__(self) -> None:
        """Normalise path-like values after initialisation."""
        self.admin_path = self._normalize_prefix(self.admin_path)
        self.static_url_segment = self._normalize_prefix(self.static_url_segment)
        if not self.context_attribute.strip():
            self.context_attribute = "admin_context"

    @property
    def static_url(self) -> str:
        """Return the public URL prefix of the bundled static files."""

        return f"{self.admin_path.rstrip('/')}{self.static_url_segment}"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "CRUDPANEL_",
    ) -> "PanelSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        secret_key = data.get("SECRET_KEY") or source.get("SECRET_KEY") or "change-me"
        return cls(
            secret_key=secret_key,
            admin_path=data.get("ADMIN_PATH") or "/admin",
            site_title=data.get("SITE_TITLE") or "CrudPanel",
            default_locale=data.get("DEFAULT_LOCALE") or "en",
            translation_domain=data.get("TRANSLATION_DOMAIN") or "messages",
            context_attribute=data.get("CONTEXT_ATTRIBUTE") or "admin_context",
            static_url_segment=data.get("STATIC_URL_SEGMENT") or "/static",
            static_route_name=data.get("STATIC_ROUTE_NAME") or "crudpanel-static",
            favicon_path=data.get("FAVICON_PATH") or "favicon.svg",
        )

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths always contain a single leading slash."""
        stripped = value.strip().strip("/")
        if not stripped:
            return "/"
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``PanelSettings`` instance."""

    def __init__(self, initial: PanelSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._reloaded = False
        self._callbacks: list[Callable[[PanelSettings], None]] = []

    def configure(self, settings: PanelSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            self._reloaded = False
            self._notify(settings)

    def current(self) -> PanelSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = PanelSettings.from_env()
                if self._reloaded:
                    self._reloaded = False
                    self._notify(self._settings)
            return self._settings

    def register(self, callback: Callable[[PanelSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[PanelSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    def reset(self) -> None:
        """Forget the active settings.

        The next access reloads them from the environment and notifies
        observers.
        """
        with self._lock:
            if self._settings is not None:
                self._reloaded = True
            self._settings = None

    def _notify(self, settings: PanelSettings) -> None:
        for callback in list(self._callbacks):
            callback(settings)


_settings_manager = SettingsManager()


def configure(settings: PanelSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> PanelSettings:
    """Return the active settings instance used by CrudPanel components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings instance."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[PanelSettings], None]) -> None:
    """Subscribe to configuration changes for global singletons."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[PanelSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


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
