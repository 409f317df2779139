"""Tests for the authenticated request executor."""

import asyncio

import httpx
import pytest

from timechimp_mcp.config import Settings
from timechimp_mcp.errors import ConfigurationError, ProtocolError, TransportError, UpstreamError
from timechimp_mcp.timechimp import TimechimpClient

from conftest import FakeTimechimp


def _client(settings: Settings, api) -> TimechimpClient:
    return TimechimpClient(settings, transport=httpx.MockTransport(api))


class TestRequest:
    def test_missing_key_fails_before_network(self) -> None:
        api = FakeTimechimp()
        client = _client(Settings(api_key=None), api)
        with pytest.raises(ConfigurationError, match="TIMECHIMP_API_KEY"):
            asyncio.run(client.request("GET", "/projects"))
        assert api.requests == []

    def test_fixed_headers(self, settings: Settings, api: FakeTimechimp) -> None:
        asyncio.run(_client(settings, api).request("GET", "/projects"))
        headers = api.last.headers
        assert headers["api-key"] == "test-key-123"
        assert headers["api-version"] == "2.0"
        assert headers["content-type"] == "application/json"
        assert headers["accept"] == "application/json"

    def test_caller_headers_add_but_never_replace(self, settings: Settings, api: FakeTimechimp) -> None:
        asyncio.run(_client(settings, api).request(
            "GET", "/projects", headers={"api-key": "other", "api-version": "1.0", "X-Trace": "abc"},
        ))
        headers = api.last.headers
        assert headers["api-key"] == "test-key-123"
        assert headers["api-version"] == "2.0"
        assert headers["x-trace"] == "abc"

    def test_url_and_params(self, settings: Settings, api: FakeTimechimp) -> None:
        asyncio.run(_client(settings, api).request(
            "GET", "/times", params=[("$top", "5"), ("$filter", "user/id eq 7")],
        ))
        assert api.last.url.host == "timechimp.test"
        assert api.last.url.path == "/times"
        assert api.last_params() == [("$top", "5"), ("$filter", "user/id eq 7")]

    def test_success_returns_parsed_body(self, settings: Settings) -> None:
        api = FakeTimechimp(payload={"result": [{"id": 1}], "count": 1})
        data = asyncio.run(_client(settings, api).request("GET", "/projects"))
        assert data == {"result": [{"id": 1}], "count": 1}

    def test_empty_success_body(self, settings: Settings) -> None:
        api = FakeTimechimp(status=204, text="")
        assert asyncio.run(_client(settings, api).request("DELETE", "/projects/1")) is None

    def test_json_body_is_sent(self, settings: Settings, api: FakeTimechimp) -> None:
        asyncio.run(_client(settings, api).request("POST", "/projects", json={"name": "Acme"}))
        assert api.last.method == "POST"
        assert api.last_body() == {"name": "Acme"}

    def test_non_success_status(self, settings: Settings) -> None:
        api = FakeTimechimp(status=404, text="Project not found")
        with pytest.raises(UpstreamError) as excinfo:
            asyncio.run(_client(settings, api).request("GET", "/projects/99"))
        err = excinfo.value
        assert err.status_code == 404
        assert err.reason == "Not Found"
        assert err.body == "Project not found"
        assert str(err) == "TimeChimp API error: 404 Not Found - Project not found"

    def test_transport_failure(self, settings: Settings) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as excinfo:
            asyncio.run(_client(settings, refuse).request("GET", "/projects"))
        assert excinfo.value.endpoint == "/projects"
        assert "connection refused" in str(excinfo.value)

    def test_invalid_json_body(self, settings: Settings) -> None:
        api = FakeTimechimp(status=200, text="<html>oops</html>")
        with pytest.raises(TransportError, match="invalid JSON"):
            asyncio.run(_client(settings, api).request("GET", "/projects"))

    def test_unbuildable_url_is_protocol_error(self, settings: Settings, api: FakeTimechimp) -> None:
        with pytest.raises(ProtocolError):
            asyncio.run(_client(settings, api).request("GET", "/projects/1\n2"))
        assert api.requests == []
