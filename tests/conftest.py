"""
Shared test fixtures for binance_client tests.

Provides:
- A recording httpx.MockTransport
- Client factories wired to that transport (no network access)
"""

from typing import Callable, List

import httpx
import pytest

from binance_client import BinanceClient

TEST_BASE_URL = "https://api.test"
TEST_API_KEY = "test-api-key"
TEST_SECRET_KEY = "test-secret-key"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def json_handler(payload=None, status: int = 200):
    """Handler answering every request with the same JSON payload."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, json=payload if payload is not None else {})

    return _handler


@pytest.fixture
def make_transport():
    def _make(handler=None) -> RecordingTransport:
        return RecordingTransport(handler or json_handler())

    return _make


@pytest.fixture
def make_client(make_transport):
    """Factory: make_client(handler, **client_kwargs) -> (client, transport)"""
    clients = []

    def _make(handler=None, **kwargs):
        transport = make_transport(handler)
        options = {
            "api_key": TEST_API_KEY,
            "secret_key": TEST_SECRET_KEY,
            "base_url": TEST_BASE_URL,
        }
        options.update(kwargs)
        client = BinanceClient(transport=transport, **options)
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        client.close()
