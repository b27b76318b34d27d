# -*- coding: utf-8 -*-
"""
test_invoker

Tests for calling controller actions with autowired arguments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

import json

import pytest
from starlette.responses import PlainTextResponse

from crudpanel.core.exceptions import BadRequestError
from crudpanel.core.runtime.invoker import ControllerInvoker
from tests.panel_fixtures import make_request


class ReportController:
    """Controller exercising every kind of argument."""

    def summary(self, request, context, entityId, page="1"):
        return {"path": request.url.path, "context": context, "entity": entityId, "page": page}

    async def text(self, context):
        return "<p>done</p>"

    def empty(self):
        return None

    def response(self):
        return PlainTextResponse("raw", status_code=202)

    def unsupported(self):
        return 42


class TestResolveArguments:
    """Argument autowiring."""

    def test_arguments_from_request(self) -> None:
        """Special names, path params and query params are injected."""

        request = make_request("entityId=7&page=3")
        request.scope["path_params"] = {"entityId": "9"}
        arguments = ControllerInvoker().resolve_arguments(
            ReportController().summary, request, "ctx"
        )
        assert arguments == {
            "request": request,
            "context": "ctx",
            "entityId": "9",
            "page": "3",
        }

    def test_optional_argument_keeps_default(self) -> None:
        """Missing optional parameters are not passed."""

        arguments = ControllerInvoker().resolve_arguments(
            ReportController().summary, make_request("entityId=7"), None
        )
        assert "page" not in arguments

    def test_missing_required_argument(self) -> None:
        """Missing required parameters are a client error."""

        with pytest.raises(BadRequestError) as excinfo:
            ControllerInvoker().resolve_arguments(
                ReportController().summary, make_request(), None
            )
        assert excinfo.value.status_code == 400
        assert "entityId" in excinfo.value.detail


class TestInvoke:
    """Result normalisation."""

    @pytest.mark.asyncio
    async def test_sync_mapping_becomes_json(self) -> None:
        """Mappings returned by sync actions are serialised to JSON."""

        response = await ControllerInvoker().invoke(
            ReportController().summary, make_request("entityId=1", path="/r"), None
        )
        assert response.media_type == "application/json"
        assert json.loads(response.body) == {
            "path": "/r",
            "context": None,
            "entity": "1",
            "page": "1",
        }

    @pytest.mark.asyncio
    async def test_async_text_becomes_html(self) -> None:
        """Strings become HTML responses."""

        response = await ControllerInvoker().invoke(ReportController().text, make_request(), None)
        assert response.media_type == "text/html"
        assert response.body == b"<p>done</p>"

    @pytest.mark.asyncio
    async def test_none_becomes_no_content(self) -> None:
        """Actions returning nothing produce an empty response."""

        response = await ControllerInvoker().invoke(ReportController().empty, make_request(), None)
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_response_passes_through(self) -> None:
        """Ready responses are returned unchanged."""

        response = await ControllerInvoker().invoke(
            ReportController().response, make_request(), None
        )
        assert response.status_code == 202

    def test_unsupported_result(self) -> None:
        """Other result types are programming errors."""

        with pytest.raises(TypeError):
            ControllerInvoker.to_response(42)


# The End
