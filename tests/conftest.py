"""Shared fixtures: settings and a recording fake of the TimeChimp API."""

import asyncio
import json

import httpx
import pytest

from timechimp_mcp.config import Settings
from timechimp_mcp.dispatcher import Dispatcher
from timechimp_mcp.timechimp import TimechimpClient


class FakeTimechimp:
    """httpx transport handler that records every request it receives."""

    def __init__(self, status: int = 200, payload=None, text: str | None = None):
        self.requests: list[httpx.Request] = []
        self.status = status
        self.payload = {"result": []} if payload is None else payload
        self.text = text

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_params(self) -> list[tuple[str, str]]:
        return list(self.last.url.params.multi_items())

    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key-123", base_url="https://timechimp.test")


@pytest.fixture
def api() -> FakeTimechimp:
    return FakeTimechimp()


@pytest.fixture
def dispatcher(settings: Settings, api: FakeTimechimp) -> Dispatcher:
    return Dispatcher(TimechimpClient(settings, transport=httpx.MockTransport(api)))


@pytest.fixture
def dispatch(dispatcher: Dispatcher):
    """Synchronous wrapper around ``Dispatcher.dispatch``."""

    def _dispatch(name: str, args: dict | None = None):
        return asyncio.run(dispatcher.dispatch(name, args))

    return _dispatch
