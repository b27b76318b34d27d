# -*- coding: utf-8 -*-
"""
provider

Jinja2 environment and static file mount of one panel installation.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from fastapi.templating import Jinja2Templates
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

from ..configuration.conf import PanelSettings, current_settings

logger = logging.getLogger(__name__)


class TemplateProvider:
    """Build the template environment and the static mount from fixed locations.

    ``templates_dir`` is searched in order, so project directories placed in
    front of the bundled one override panel templates of the same name.
    """

    def __init__(
        self,
        *,
        templates_dir: Sequence[str],
        static_dir: str | Path,
        settings: PanelSettings | None = None,
    ) -> None:
        self._search_path = tuple(str(directory) for directory in templates_dir)
        self.static_dir = Path(static_dir)
        self._settings = settings

    @property
    def template_directories(self) -> tuple[str, ...]:
        return self._search_path

    def get_templates(self) -> Jinja2Templates:
        """Return a new ``Jinja2Templates`` over the search path."""

        return Jinja2Templates(directory=list(self._search_path))

    def build_static_mount(self, settings: PanelSettings) -> Mount | None:
        """Return the mount serving bundled assets or ``None`` without assets."""

        if not self.static_dir.is_dir():
            logger.warning(
                "Static directory '%s' is missing; skipping mount.", self.static_dir
            )
            return None
        return Mount(
            settings.static_url,
            app=StaticFiles(directory=str(self.static_dir)),
            name=settings.static_route_name,
        )

    def mount_static(self, app: Starlette, settings: PanelSettings | None = None) -> None:
        """Append the static mount to ``app`` when the asset directory exists."""

        mount = self.build_static_mount(settings or self._settings or current_settings())
        if mount is not None:
            app.router.routes.append(mount)


__all__ = ["TemplateProvider"]


# The End
