"""Unit tests for the HTTP transport.

These tests use httpx's mock transport to avoid real network calls.
"""

import asyncio
import json

import httpx
import pytest
from pydantic import ValidationError

from request_gateway.core.http import (
    HTTPCancelledError,
    HTTPClient,
    HTTPClientError,
    HTTPConnectionError,
    HTTPStatusError,
    HTTPTimeoutError,
    TransportFailureKind,
)


def make_client(handler, **kwargs) -> HTTPClient:
    return HTTPClient("https://api.example.com", transport=httpx.MockTransport(handler), **kwargs)


class TestConfiguration:
    """Tests for client construction."""

    def test_default_timeouts(self) -> None:
        client = make_client(lambda request: httpx.Response(200))

        assert client.config.connect_timeout == 10.0
        assert client.config.receive_timeout == 15.0
        assert client.timeout.connect == 10.0
        assert client.timeout.read == 15.0
        assert client.timeout.write is None
        assert client.timeout.pool is None

    def test_custom_timeouts(self) -> None:
        client = make_client(lambda request: httpx.Response(200), connect_timeout=2.5, receive_timeout=4.0)

        assert client.timeout.connect == 2.5
        assert client.timeout.read == 4.0

    def test_rejects_relative_base_url(self) -> None:
        with pytest.raises(ValueError):
            HTTPClient("api.example.com")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            HTTPClient("https://api.example.com", connect_timeout=0)

    def test_config_is_immutable(self) -> None:
        client = make_client(lambda request: httpx.Response(200))

        with pytest.raises(ValidationError):
            client.config.base_url = "https://other.example.com"


class TestRequests:
    """Tests for request construction."""

    def test_build_url_trims_duplicate_slashes(self) -> None:
        client = HTTPClient("https://api.example.com/")

        assert client.build_url("/users") == "https://api.example.com/users"
        assert client.build_url("users") == "https://api.example.com/users"

    def test_build_url_keeps_absolute_endpoint(self) -> None:
        client = HTTPClient("https://api.example.com")

        assert client.build_url("https://cdn.example.com/a") == "https://cdn.example.com/a"

    @pytest.mark.asyncio
    async def test_get_joins_base_url_and_sends_accept_header(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with make_client(handler) as client:
            response = await client.get("/users", params={"page": 2})

        assert response.status_code == 200
        assert str(seen[0].url) == "https://api.example.com/users?page=2"
        assert seen[0].method == "GET"
        assert seen[0].headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201)

        async with make_client(handler) as client:
            await client.post("/users", json={"name": "Ada"})

        assert seen[0].method == "POST"
        assert json.loads(seen[0].content) == {"name": "Ada"}

    @pytest.mark.asyncio
    async def test_put_sends_raw_content(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200)

        async with make_client(handler) as client:
            await client.put("/users/1", content=b"raw")

        assert seen[0].method == "PUT"
        assert seen[0].content == b"raw"

    @pytest.mark.asyncio
    async def test_delete_can_carry_body(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(204)

        async with make_client(handler) as client:
            response = await client.delete("/users/1", json={"reason": "spam"})

        assert response.status_code == 204
        assert seen[0].method == "DELETE"
        assert json.loads(seen[0].content) == {"reason": "spam"}

    @pytest.mark.asyncio
    async def test_context_manager_closes_pool(self) -> None:
        client = make_client(lambda request: httpx.Response(200))

        async with client:
            assert not client.is_closed

        assert client.is_closed


class TestErrorMapping:
    """Tests for mapping httpx failures to typed transport errors."""

    @pytest.mark.asyncio
    async def test_connect_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(HTTPTimeoutError) as exc_info:
                await client.get("/users")

        assert exc_info.value.kind == TransportFailureKind.CONNECT_TIMEOUT
        assert exc_info.value.url == "https://api.example.com/users"

    @pytest.mark.asyncio
    async def test_read_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_client(handler) as client:
            with pytest.raises(HTTPTimeoutError) as exc_info:
                await client.get("/users")

        assert exc_info.value.kind == TransportFailureKind.RECEIVE_TIMEOUT

    @pytest.mark.asyncio
    async def test_error_status(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "missing"})

        async with make_client(handler) as client:
            with pytest.raises(HTTPStatusError) as exc_info:
                await client.get("/users/9")

        error = exc_info.value
        assert error.kind == TransportFailureKind.BAD_RESPONSE
        assert error.status_code == 404
        assert error.response.json() == {"detail": "missing"}

    @pytest.mark.asyncio
    async def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(HTTPConnectionError) as exc_info:
                await client.post("/users", json={})

        assert exc_info.value.kind == TransportFailureKind.CONNECTION_ERROR

    @pytest.mark.asyncio
    async def test_read_error_is_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadError("reset by peer", request=request)

        async with make_client(handler) as client:
            with pytest.raises(HTTPConnectionError):
                await client.get("/users")

    @pytest.mark.asyncio
    async def test_cancellation(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            raise asyncio.CancelledError()

        async with make_client(handler) as client:
            with pytest.raises(HTTPCancelledError) as exc_info:
                await client.get("/users")

        assert exc_info.value.kind == TransportFailureKind.CANCELLED

    @pytest.mark.asyncio
    async def test_protocol_error_is_other(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.RemoteProtocolError("garbage", request=request)

        async with make_client(handler) as client:
            with pytest.raises(HTTPClientError) as exc_info:
                await client.get("/users")

        assert type(exc_info.value) is HTTPClientError
        assert exc_info.value.kind == TransportFailureKind.OTHER
        assert isinstance(exc_info.value.original_error, httpx.RemoteProtocolError)

    def test_error_str_includes_url_and_status(self) -> None:
        error = HTTPStatusError("HTTP 500 error", status_code=500, url="https://api.example.com/x")

        assert str(error) == "HTTP 500 error | URL: https://api.example.com/x | Status: 500"
