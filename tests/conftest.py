"""Shared fixtures for request gateway tests."""

from typing import Callable, List

import httpx
import pytest

from request_gateway.core.connectivity import ConnectivityChecker
from request_gateway.core.http import HTTPClient
from request_gateway.services.request_gateway import RequestGateway

BASE_URL = "https://api.example.com"


class FakeConnectivityChecker(ConnectivityChecker):
    """Connectivity checker with a fixed answer that counts its calls."""

    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.calls = 0

    async def is_connected(self) -> bool:
        self.calls += 1
        return self.connected


class RecordingHandler:
    """MockTransport handler that records requests and delegates to a callable."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


@pytest.fixture
def make_gateway():
    """Build a gateway around a MockTransport handler and a fake checker."""

    def _make(respond, connected: bool = True, **client_kwargs):
        handler = respond if isinstance(respond, RecordingHandler) else RecordingHandler(respond)
        checker = FakeConnectivityChecker(connected)
        client = HTTPClient(BASE_URL, transport=httpx.MockTransport(handler), **client_kwargs)
        return RequestGateway(http_client=client, connectivity_checker=checker), handler, checker

    return _make
