# -*- coding: utf-8 -*-
"""
admin

Dashboard and CRUD controllers of the example project.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from crudpanel import (
    AdminContext,
    AdminPanel,
    Crud,
    CrudController,
    Dashboard,
    DashboardController,
    Field,
    MenuItems,
    UserMenu,
)

from .models import DemoNote, notes

panel = AdminPanel()


@panel.crud(crud_id="notes")
class DemoNoteCrudController(CrudController):
    """Expose DemoNote instances through the administration interface."""

    entity = DemoNote

    def configure_crud(self, crud: Crud) -> Crud:
        return (
            crud.set_entity_labels("Note", "Notes")
            .set_search_fields(("title", "body"))
            .set_help("index", "Notes are kept in memory and reset on restart.")
        )

    def configure_fields(self, action: str) -> Sequence[Field]:
        fields = [Field("id", "ID"), Field("title"), Field("status")]
        if action == "detail":
            fields.append(Field("body"))
        return fields

    def get_entities(self, context: AdminContext) -> Iterable[Any]:
        return notes.all()


@panel.dashboard(path="/admin", context_id="demo")
class DemoDashboardController(DashboardController):
    """Entry point of the example panel."""

    def configure_dashboard(self) -> Dashboard:
        return Dashboard(title="Demo panel")

    def configure_menu_items(self) -> Iterable:
        yield MenuItems.link_to_dashboard("Dashboard", "bi-house")
        yield MenuItems.section("Content")
        yield MenuItems.link_to_crud("Notes", "bi-journal-text", DemoNoteCrudController)
        yield MenuItems.section("Links")
        yield MenuItems.link_to_url("Project home", "bi-box-arrow-up-right", "/", target="_blank")

    def configure_user_menu(self, user: Any) -> UserMenu:
        menu = super().configure_user_menu(user)
        return menu.add_items(
            MenuItems.section("Account"),
            MenuItems.link_to_logout("Sign out", "bi-box-arrow-right", "/logout"),
        )


__all__ = ["DemoDashboardController", "DemoNoteCrudController", "panel"]

# The End
