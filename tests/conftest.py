# -*- coding: utf-8 -*-
"""conftest

Shared pytest configuration for the CrudPanel test-suite.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Coroutine

import pytest

from crudpanel.core.configuration.conf import reset_settings
from crudpanel.core.templates.rendering import TemplateRenderer


class PanelState:
    """Undo global changes made by a test."""

    def __init__(self) -> None:
        self._template_service = TemplateRenderer.get_service()

    def reset(self) -> None:
        """Drop configured settings and reinstall the original template service."""

        reset_settings()
        TemplateRenderer.configure(self._template_service)


class AsyncioTestPlugin:
    """Run ``async def`` tests on a private event loop so no extra plugin is needed."""

    marker = "asyncio: run the coroutine test on a fresh event loop"

    @staticmethod
    def run(coroutine: Coroutine[Any, Any, Any]) -> None:
        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(coroutine)
            leftovers = [task for task in asyncio.all_tasks(loop) if not task.done()]
            for task in leftovers:
                task.cancel()
            if leftovers:
                loop.run_until_complete(asyncio.gather(*leftovers, return_exceptions=True))
            loop.run_until_complete(loop.shutdown_asyncgens())
        finally:
            loop.close()

    def pytest_pyfunc_call(self, pyfuncitem: pytest.Function) -> bool | None:
        test = pyfuncitem.obj
        if not inspect.iscoroutinefunction(test):
            return None
        wanted = inspect.signature(test).parameters
        self.run(test(**{name: value for name, value in pyfuncitem.funcargs.items() if name in wanted}))
        return True


panel_state = PanelState()


def pytest_configure(config: pytest.Config) -> None:
    """Register the asyncio marker and its runner."""

    plugin = AsyncioTestPlugin()
    config.addinivalue_line("markers", plugin.marker)
    config.pluginmanager.register(plugin, "crudpanel-asyncio-plugin")


@pytest.fixture(autouse=True)
def _isolated_panel_state():
    """Restore global settings after each test."""

    yield
    panel_state.reset()


__all__ = ["panel_state"]


# The End
