"""
HTTP transport layer.

This module provides the async HTTP client and exception types the request
gateway delegates to.
"""

from request_gateway.core.http.client import HTTPClient
from request_gateway.core.http.exceptions import (
    HTTPCancelledError,
    HTTPClientError,
    HTTPConnectionError,
    HTTPTimeoutError,
    HTTPStatusError,
    TransportFailureKind
)

__all__ = [
    "HTTPClient",
    "HTTPCancelledError",
    "HTTPClientError",
    "HTTPConnectionError",
    "HTTPTimeoutError",
    "HTTPStatusError",
    "TransportFailureKind",
]
