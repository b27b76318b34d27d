# -*- coding: utf-8 -*-
"""
cli

Click entry point for the crudpanel toolkit.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import click

from .commands import PanelLoader, RoutesCommand


class CrudPanelCLI:
    """Aggregate all CLI commands exposed by the package."""

    def __init__(self) -> None:
        """Create command instances required to build the CLI group."""
        self._routes_command = RoutesCommand(PanelLoader())

    def create_cli(self) -> click.Group:
        """Build the Click group with all registered commands."""
        group = click.Group(
            name="crudpanel",
            help="Command line tools for CrudPanel projects.",
        )
        group.add_command(self._routes_command.to_click_command())
        return group


cli = CrudPanelCLI().create_cli()


# The End
