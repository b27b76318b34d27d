# -*- coding: utf-8 -*-
"""
test_config

Tests for declarative dashboard, CRUD and asset configuration.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from types import SimpleNamespace

from crudpanel.core.config import Assets, Crud, Field
from crudpanel.core.controllers import CrudController
from tests.panel_fixtures import UsersCrudController


class Invoice:
    """Entity with a class name."""


class InvoiceCrudController(CrudController):
    """Controller declaring an entity."""

    entity = Invoice


class TestAssets:
    """Asset collections."""

    def test_duplicates_are_ignored(self) -> None:
        """The same file is added once."""

        assets = Assets().add_css_file("a.css").add_css_file("a.css").add_js_file("a.js")
        assert len(assets) == 2

    def test_resolve_prefixes_relative_paths(self) -> None:
        """Relative paths are served from the static URL; absolute ones are kept."""

        assets = (
            Assets()
            .add_css_file("./css/a.css")
            .add_js_file("/js/b.js")
            .add_js_file("https://cdn.example.com/c.js")
            .add_html_content_to_head("<meta name='x'>")
        )
        resolved = assets.resolve("/admin/static/")
        assert [asset.value for asset in resolved.css_files] == ["/admin/static/css/a.css"]
        assert [asset.value for asset in resolved.js_files] == [
            "/js/b.js",
            "https://cdn.example.com/c.js",
        ]
        assert resolved.head_contents[0].value == "<meta name='x'>"

    def test_merge_keeps_order(self) -> None:
        """Merged collections list the receiver first."""

        merged = Assets().add_css_file("a.css").merge(Assets().add_css_file("b.css"))
        assert [asset.value for asset in merged.css_files] == ["a.css", "b.css"]


class TestCrudConfig:
    """CRUD options."""

    def test_titles(self) -> None:
        """Titles fall back from explicit values to labels to the entity name."""

        crud = Crud().set_entity_labels("Invoice", "Invoices").set_page_title("detail", "Bill")
        assert crud.title_for("index", "Invoice") == "Invoices"
        assert crud.title_for("detail", "Invoice") == "Bill"
        assert Crud().title_for("index", "Invoice") == "Invoice"

    def test_field_values(self) -> None:
        """Fields read mappings and attributes alike."""

        field = Field("total_amount")
        assert field.display_label == "Total amount"
        assert field.value_of({"total_amount": 5}) == 5
        assert field.value_of(SimpleNamespace(total_amount=7)) == 7
        assert field.value_of(object()) is None


class TestCrudControllerDefaults:
    """Behaviour inherited by CRUD controllers."""

    def test_entity_name(self) -> None:
        """The entity name comes from the entity or the controller name."""

        assert InvoiceCrudController.entity_name() == "Invoice"
        assert UsersCrudController.entity_name() == "Users"

    def test_search_without_query(self) -> None:
        """Without a query every entity is kept."""

        context = SimpleNamespace(search=None)
        assert UsersCrudController().search_entities(context, [1, 2]) == [1, 2]


# The End
