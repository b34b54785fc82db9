"""
HTTP transport for the request gateway.

This module wraps a single, explicitly owned ``httpx.AsyncClient`` configured
with the gateway's base URL, connect/receive timeouts and JSON ``Accept``
header. Every httpx failure is re-raised as a typed ``HTTPClientError``.
"""

import asyncio
from typing import Optional, Dict, Any
import httpx

from request_gateway.core.http.exceptions import (
    HTTPCancelledError,
    HTTPClientError,
    HTTPConnectionError,
    HTTPTimeoutError,
    HTTPStatusError,
    TransportFailureKind
)
from request_gateway.pydantic_models.gateway.gateway_config_model import GatewayConfigModel

DEFAULT_HEADERS = {"Accept": "application/json"}


class HTTPClient:
    """
    Async HTTP transport bound to one base URL.

    This client provides:
    - One connection pool for the lifetime of the instance
    - Connect and receive timeouts enforced by httpx
    - ``Accept: application/json`` on every request
    - Typed exceptions for every failure, including non-2xx responses

    Example:
        ```python
        async with HTTPClient("https://api.example.com") as client:
            response = await client.get("/users")
            data = response.json()
        ```
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float = 10.0,
        receive_timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize HTTP client.

        Args:
            base_url: URL prefixed to every endpoint path
            connect_timeout: Seconds allowed to establish a connection (default: 10.0)
            receive_timeout: Seconds allowed between received bytes (default: 15.0)
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests
        """
        self.config = GatewayConfigModel(
            base_url=base_url,
            connect_timeout=connect_timeout,
            receive_timeout=receive_timeout
        )
        self.timeout = httpx.Timeout(
            None,
            connect=self.config.connect_timeout,
            read=self.config.receive_timeout
        )
        self._client = httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.timeout,
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
            transport=transport
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "HTTPClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    def build_url(self, endpoint: str) -> str:
        """Absolute URL a request to ``endpoint`` is sent to."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.config.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    async def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        """
        Make an async GET request.

        Args:
            endpoint: Path relative to the base URL
            params: URL query parameters (optional)

        Returns:
            httpx.Response object

        Raises:
            HTTPConnectionError: If the network path fails
            HTTPTimeoutError: If connecting or receiving times out
            HTTPStatusError: If server returns a non-2xx status code
            HTTPCancelledError: If the request is cancelled
            HTTPClientError: For any other failure
        """
        return await self._request("GET", endpoint, params=params)

    async def post(
        self,
        endpoint: str,
        json: Optional[Any] = None,
        content: Optional[Any] = None
    ) -> httpx.Response:
        """
        Make an async POST request.

        Args:
            endpoint: Path relative to the base URL
            json: JSON data to send in request body (optional)
            content: Raw str or bytes body (optional)

        Returns:
            httpx.Response object

        Raises:
            See ``get``.
        """
        return await self._request("POST", endpoint, json=json, content=content)

    async def put(
        self,
        endpoint: str,
        json: Optional[Any] = None,
        content: Optional[Any] = None
    ) -> httpx.Response:
        """
        Make an async PUT request.

        Args:
            endpoint: Path relative to the base URL
            json: JSON data to send in request body (optional)
            content: Raw str or bytes body (optional)

        Returns:
            httpx.Response object

        Raises:
            See ``get``.
        """
        return await self._request("PUT", endpoint, json=json, content=content)

    async def delete(
        self,
        endpoint: str,
        json: Optional[Any] = None,
        content: Optional[Any] = None
    ) -> httpx.Response:
        """
        Make an async DELETE request.

        httpx's ``AsyncClient.delete`` takes no body, so this goes through
        ``request`` to allow one.

        Args:
            endpoint: Path relative to the base URL
            json: JSON data to send in request body (optional)
            content: Raw str or bytes body (optional)

        Returns:
            httpx.Response object

        Raises:
            See ``get``.
        """
        return await self._request("DELETE", endpoint, json=json, content=content)

    async def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs
    ) -> httpx.Response:
        """
        Internal method to make HTTP requests with unified error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: Path relative to the base URL
            **kwargs: Additional arguments to pass to httpx

        Returns:
            httpx.Response object

        Raises:
            HTTPClientError subclass matching the failure
        """
        kwargs = {key: value for key, value in kwargs.items() if value is not None}
        url = self.build_url(endpoint)

        try:
            response = await self._client.request(method, endpoint, **kwargs)

        except asyncio.CancelledError as e:
            # Cancellation requested of the calling task must propagate
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            raise HTTPCancelledError(
                message=f"{method} {url} was cancelled",
                url=url,
                original_error=e
            )

        except httpx.ConnectTimeout as e:
            raise HTTPTimeoutError(
                message=f"Connecting to {url} timed out after {self.config.connect_timeout}s",
                kind=TransportFailureKind.CONNECT_TIMEOUT,
                url=url,
                original_error=e
            )

        except httpx.ReadTimeout as e:
            raise HTTPTimeoutError(
                message=f"No response from {url} within {self.config.receive_timeout}s",
                kind=TransportFailureKind.RECEIVE_TIMEOUT,
                url=url,
                original_error=e
            )

        except (httpx.ConnectError, httpx.NetworkError) as e:
            raise HTTPConnectionError(
                message=f"Connection failed for {method} {url}: {str(e)}",
                url=url,
                original_error=e
            )

        except Exception as e:
            raise HTTPClientError(
                message=f"Unexpected error during {method} {url}: {str(e)}",
                url=url,
                original_error=e
            )

        if not response.is_success:
            raise HTTPStatusError(
                message=f"HTTP {response.status_code} error for {method} {url}",
                status_code=response.status_code,
                url=url,
                response=response
            )

        return response
