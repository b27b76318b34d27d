# -*- coding: utf-8 -*-
"""
commands

Click command factories for the crudpanel CLI.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import sys
from importlib import import_module
from pathlib import Path

import click

from ...core.panel import AdminPanel


class PanelLoader:
    """Import an :class:`AdminPanel` from a ``module:attribute`` path."""

    def __init__(self, search_path: Path | None = None) -> None:
        """Remember the directory prepended to ``sys.path`` while importing."""
        self._search_path = search_path or Path.cwd()

    def load(self, target: str) -> AdminPanel:
        """Return the panel designated by ``target``."""
        module_name, _, attribute = target.partition(":")
        if not module_name or not attribute:
            raise click.BadParameter("Use the MODULE:ATTRIBUTE form.", param_hint="TARGET")
        search_path = str(self._search_path)
        if search_path not in sys.path:
            sys.path.insert(0, search_path)
        try:
            module = import_module(module_name)
        except ImportError as error:
            raise click.BadParameter(f"Cannot import '{module_name}': {error}") from error
        panel = getattr(module, attribute, None)
        if not isinstance(panel, AdminPanel):
            raise click.BadParameter(
                f"'{target}' is not an AdminPanel instance.", param_hint="TARGET"
            )
        return panel


class RoutesCommand:
    """Produce the `routes` command listing dashboards and CRUD controllers."""

    def __init__(self, loader: PanelLoader) -> None:
        """Store the loader used to locate the panel."""
        self._loader = loader

    def execute(self, target: str) -> None:
        """Print every registered dashboard and CRUD controller."""
        panel = self._loader.load(target)
        if panel.dashboards.count() == 0:
            click.secho("No dashboards registered.", fg="yellow")
            return
        click.secho("Dashboards:", bold=True)
        for entry in panel.dashboards:
            click.echo(f"  {entry.context_id}  {entry.path}  {entry.fqcn}")
        click.secho("CRUD controllers:", bold=True)
        cruds = panel.cruds.entries()
        if not cruds:
            click.secho("  (none)", fg="yellow")
            return
        urls = panel.url_generator()
        for crud in cruds:
            entity = crud.entity or "-"
            click.echo(f"  {crud.crud_id}  {crud.fqcn}  {entity}")
            click.echo(f"      {urls.for_crud_id(crud.crud_id)}")

    def to_click_command(self) -> click.Command:
        """Return a Click command configured for route listing."""
        return click.Command(
            name="routes",
            callback=self.execute,
            params=[click.Argument(["target"], required=True)],
            help="List dashboards and CRUD controllers of MODULE:PANEL.",
        )


# The End
