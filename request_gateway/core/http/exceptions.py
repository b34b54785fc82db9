"""
Custom exceptions for HTTP transport operations.

Every exception raised by the transport carries a ``TransportFailureKind`` so
that callers can classify failures without inspecting httpx internals.
"""

from enum import Enum
from typing import Optional

import httpx


class TransportFailureKind(str, Enum):
    """Kinds of failure the transport can report."""

    CONNECT_TIMEOUT = "connect_timeout"
    RECEIVE_TIMEOUT = "receive_timeout"
    BAD_RESPONSE = "bad_response"
    CANCELLED = "cancelled"
    CONNECTION_ERROR = "connection_error"
    OTHER = "other"


class HTTPClientError(Exception):
    """
    Base exception for all HTTP transport errors.

    Catch this to handle any transport failure generically.
    """

    kind: TransportFailureKind = TransportFailureKind.OTHER

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        original_error: Optional[BaseException] = None
    ):
        """
        Initialize HTTP client error.

        Args:
            message: Human-readable error description
            url: The URL that was being accessed (optional)
            status_code: HTTP status code if applicable (optional)
            original_error: The underlying exception that caused this error (optional)
        """
        self.message = message
        self.url = url
        self.status_code = status_code
        self.original_error = original_error

        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = [self.message]
        if self.url:
            parts.append(f"URL: {self.url}")
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        return " | ".join(parts)


class HTTPConnectionError(HTTPClientError):
    """
    Exception raised when the network path to the server fails.

    This includes DNS resolution failures, refused connections and sockets
    dropped mid-exchange.
    """

    kind = TransportFailureKind.CONNECTION_ERROR


class HTTPTimeoutError(HTTPClientError):
    """
    Exception raised when connecting or waiting for the response times out.
    """

    def __init__(
        self,
        message: str,
        kind: TransportFailureKind = TransportFailureKind.RECEIVE_TIMEOUT,
        url: Optional[str] = None,
        original_error: Optional[BaseException] = None
    ):
        if kind not in (TransportFailureKind.CONNECT_TIMEOUT, TransportFailureKind.RECEIVE_TIMEOUT):
            raise ValueError(f"Not a timeout kind: {kind}")
        self.kind = kind
        super().__init__(message, url=url, original_error=original_error)


class HTTPStatusError(HTTPClientError):
    """
    Exception raised when the server answers with a non-2xx status code.

    The response is kept so callers can still read the error body.
    """

    kind = TransportFailureKind.BAD_RESPONSE

    def __init__(
        self,
        message: str,
        status_code: int,
        url: Optional[str] = None,
        response: Optional[httpx.Response] = None,
        original_error: Optional[BaseException] = None
    ):
        self.response = response
        super().__init__(message, url=url, status_code=status_code, original_error=original_error)


class HTTPCancelledError(HTTPClientError):
    """Exception raised when the request is cancelled before it completes."""

    kind = TransportFailureKind.CANCELLED
