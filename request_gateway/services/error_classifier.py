"""
Maps transport failures onto the gateway's fixed error categories.
"""

from typing import Optional

from request_gateway.core.http.exceptions import HTTPClientError, TransportFailureKind
from request_gateway.pydantic_models.gateway.outcome_model import ErrorCategory, GatewayError

ERROR_MESSAGES = {
    ErrorCategory.TIMEOUT: "Connection Timeout! Please try again later.",
    ErrorCategory.BAD_REQUEST: "Bad Request! Check the parameters.",
    ErrorCategory.UNAUTHORIZED: "Unauthorized! Please log in again.",
    ErrorCategory.SERVER_ERROR: "Internal Server Error! Please try again later.",
    ErrorCategory.OTHER_BAD_RESPONSE: "Something went wrong! Please try again.",
    ErrorCategory.CANCELLED: "Request was cancelled!",
    ErrorCategory.NO_CONNECTIVITY: "No Internet connection! Check your network.",
    ErrorCategory.UNKNOWN: "Unexpected error occurred! Please try again.",
}

STATUS_CATEGORIES = {
    400: ErrorCategory.BAD_REQUEST,
    401: ErrorCategory.UNAUTHORIZED,
    500: ErrorCategory.SERVER_ERROR,
}

KIND_CATEGORIES = {
    TransportFailureKind.CONNECT_TIMEOUT: ErrorCategory.TIMEOUT,
    TransportFailureKind.RECEIVE_TIMEOUT: ErrorCategory.TIMEOUT,
    TransportFailureKind.CANCELLED: ErrorCategory.CANCELLED,
    TransportFailureKind.CONNECTION_ERROR: ErrorCategory.NO_CONNECTIVITY,
    TransportFailureKind.OTHER: ErrorCategory.UNKNOWN,
}


def classify_failure(kind: TransportFailureKind, status_code: Optional[int] = None) -> GatewayError:
    """
    Classify a transport failure.

    Pure function of its inputs: the same kind and status code always give
    the same category and message.

    Args:
        kind: Failure kind reported by the transport
        status_code: HTTP status code, if the server answered

    Returns:
        GatewayError carrying the category, its message and the status code
    """
    if kind == TransportFailureKind.BAD_RESPONSE:
        category = STATUS_CATEGORIES.get(status_code, ErrorCategory.OTHER_BAD_RESPONSE)
    else:
        category = KIND_CATEGORIES.get(kind, ErrorCategory.UNKNOWN)

    return GatewayError(
        category=category,
        message=ERROR_MESSAGES[category],
        status_code=status_code
    )


def classify_exception(error: BaseException) -> GatewayError:
    """Classify any exception escaping the transport; non-transport errors are UNKNOWN."""
    if isinstance(error, HTTPClientError):
        return classify_failure(error.kind, error.status_code)
    return classify_failure(TransportFailureKind.OTHER)


def no_connectivity_error() -> GatewayError:
    """Error returned when the pre-flight reachability check fails."""
    return classify_failure(TransportFailureKind.CONNECTION_ERROR)
