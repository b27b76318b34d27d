# -*- coding: utf-8 -*-
"""
core.templates.service

Process-wide template service: search path, cached environment, static mounts.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, TYPE_CHECKING, Union
from weakref import WeakSet

from fastapi.templating import Jinja2Templates
from starlette.applications import Starlette

from ..configuration.conf import (
    PanelSettings,
    current_settings,
    register_settings_observer,
)

if TYPE_CHECKING:  # pragma: no cover
    from .provider import TemplateProvider

PACKAGE_DIR = Path(__file__).resolve().parent.parent.parent
ASSETS_DIR = PACKAGE_DIR / "static"
TEMPLATES_DIR = PACKAGE_DIR / "templates"

PathLike = Union[str, Path]


def template_search_path(directories: PathLike | Iterable[PathLike] | None) -> List[str]:
    """Return ``directories`` as strings followed by the bundled templates."""

    if directories is None:
        entries: List[str] = []
    elif isinstance(directories, (str, Path)):
        entries = [str(directories)]
    else:
        entries = [str(directory) for directory in directories]
    if str(TEMPLATES_DIR) not in entries:
        entries.append(str(TEMPLATES_DIR))
    return entries


class TemplateService:
    """Own the provider of the panel templates and remember mounted apps.

    Services created without explicit settings follow the global settings and
    rebuild their provider whenever :func:`configure` installs new ones.
    """

    def __init__(
        self,
        *,
        templates_dir: PathLike | Iterable[PathLike] | None = None,
        static_dir: PathLike | None = None,
        settings: PanelSettings | None = None,
        provider_cls: type["TemplateProvider"] | None = None,
    ) -> None:
        if provider_cls is None:
            from .provider import TemplateProvider

            provider_cls = TemplateProvider
        self._search_path = template_search_path(templates_dir)
        self._static_dir = Path(static_dir) if static_dir is not None else ASSETS_DIR
        self._settings = settings
        self._provider_cls = provider_cls
        self._provider: TemplateProvider | None = None
        self._templates: Jinja2Templates | None = None
        self._mounted_apps: WeakSet[Starlette] = WeakSet()
        if settings is None:
            register_settings_observer(self._on_settings_changed)

    @property
    def settings(self) -> PanelSettings:
        return self._settings or current_settings()

    def get_provider(self) -> "TemplateProvider":
        if self._provider is None:
            self._provider = self._provider_cls(
                templates_dir=tuple(self._search_path),
                static_dir=self._static_dir,
                settings=self.settings,
            )
        return self._provider

    def get_templates(self) -> Jinja2Templates:
        """Return the environment, building it on first use."""

        if self._templates is None:
            self._templates = self.get_provider().get_templates()
        return self._templates

    def add_template_directory(self, directory: PathLike) -> None:
        """Search ``directory`` before every known template location."""

        path = str(directory)
        if path not in self._search_path:
            self._search_path.insert(0, path)
            self._invalidate()

    def mount_static_resources(
        self, app: Starlette, settings: PanelSettings | None = None
    ) -> None:
        """Serve the bundled assets from ``app``; repeated calls are no-ops."""

        if app not in self._mounted_apps:
            self.get_provider().mount_static(app, settings)
            self._mounted_apps.add(app)

    def _on_settings_changed(self, settings: PanelSettings) -> None:
        self._invalidate()

    def _invalidate(self) -> None:
        self._provider = None
        self._templates = None


DEFAULT_TEMPLATE_SERVICE = TemplateService()


__all__ = [
    "ASSETS_DIR",
    "DEFAULT_TEMPLATE_SERVICE",
    "TEMPLATES_DIR",
    "TemplateService",
    "template_search_path",
]


# The End
