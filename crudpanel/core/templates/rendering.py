# -*- coding: utf-8 -*-
"""
core.templates.rendering

Access to the shared template environment used by panel pages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

from jinja2 import Environment
from markupsafe import Markup

from .service import DEFAULT_TEMPLATE_SERVICE, TemplateService


class TemplateRenderer:
    """Provide cached access to panel templates."""

    _service: TemplateService = DEFAULT_TEMPLATE_SERVICE

    @classmethod
    def configure(cls, service: TemplateService) -> None:
        """Replace the template service used by the renderer."""

        cls._service = service

    @classmethod
    def get_service(cls) -> TemplateService:
        """Return the template service backing the renderer."""

        return cls._service

    @classmethod
    def get_environment(cls) -> Environment:
        """Return the Jinja2 environment of the active service."""

        return cls.get_service().get_templates().env

    @classmethod
    def render(cls, template_name: str, context: Mapping[str, Any]) -> Markup:
        """Render ``template_name`` with ``context`` into trusted markup."""

        template = cls.get_environment().get_template(template_name)
        return Markup(template.render(**dict(context)))


# The End
