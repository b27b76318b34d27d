# -*- coding: utf-8 -*-
"""
main

Example application bootstrap for CrudPanel.

Run with ``uvicorn example.main:app`` and open ``/admin``.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fastapi import FastAPI

from .admin import panel


class ExampleApplication:
    """Assemble a runnable CrudPanel demonstration project."""

    def __init__(self) -> None:
        """Create the FastAPI application and mount the panel."""

        self._app = FastAPI(title="CrudPanel example")
        panel.mount(self._app)

    @property
    def app(self) -> FastAPI:
        """Return the configured application."""

        return self._app


app = ExampleApplication().app


__all__ = ["ExampleApplication", "app"]

# The End
