from typing import Any, Dict, Optional

from request_gateway.core.connectivity import ConnectivityChecker
from request_gateway.core.http import HTTPClient, HTTPClientError
from request_gateway.core.logging import get_logger
from request_gateway.pydantic_models.gateway.gateway_config_model import GatewayConfigModel
from request_gateway.pydantic_models.gateway.outcome_model import (
    FailureOutcome,
    GatewayError,
    Outcome,
    SuccessOutcome
)
from request_gateway.services.error_classifier import (
    classify_exception,
    no_connectivity_error
)

logger = get_logger(__name__)


class RequestGateway:
    """
    Single entry point for calls to the upstream API.

    Every call runs the same sequence: connectivity pre-check, transport call,
    failure classification. Calls never raise for transport problems; they
    return an Outcome that is either a SuccessOutcome with the untouched
    response or a FailureOutcome with exactly one GatewayError.

    The pre-check is a gate, not a guarantee: reachability can change between
    the check and the request, in which case the transport failure is
    classified instead.
    """

    def __init__(self, http_client: HTTPClient, connectivity_checker: ConnectivityChecker):
        """
        Initialize the gateway.

        Args:
            http_client: Transport owned by this gateway (closed by ``aclose``)
            connectivity_checker: Reachability probe queried before each call
        """
        self.http_client = http_client
        self.connectivity_checker = connectivity_checker

    @property
    def config(self) -> GatewayConfigModel:
        return self.http_client.config

    async def aclose(self) -> None:
        await self.http_client.aclose()

    async def __aenter__(self) -> "RequestGateway":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Outcome:
        """Issue a GET with optional query parameters."""
        return await self._call("GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Optional[Any] = None) -> Outcome:
        """Issue a POST; ``data`` is sent as JSON, or raw if it is str/bytes."""
        return await self._call("POST", endpoint, **self._body_kwargs(data))

    async def put(self, endpoint: str, data: Optional[Any] = None) -> Outcome:
        """Issue a PUT; ``data`` is sent as JSON, or raw if it is str/bytes."""
        return await self._call("PUT", endpoint, **self._body_kwargs(data))

    async def delete(self, endpoint: str, data: Optional[Any] = None) -> Outcome:
        """Issue a DELETE; ``data`` is sent as JSON, or raw if it is str/bytes."""
        return await self._call("DELETE", endpoint, **self._body_kwargs(data))

    @staticmethod
    def _body_kwargs(data: Optional[Any]) -> Dict[str, Any]:
        if data is None:
            return {}
        if isinstance(data, (str, bytes)):
            return {"content": data}
        return {"json": data}

    async def _call(self, method: str, endpoint: str, **kwargs) -> Outcome:
        try:
            connected = await self.connectivity_checker.is_connected()
        except Exception as e:
            logger.error(f"Connectivity check failed for {method} {endpoint}: {e}", exc_info=True)
            return self._failure(method, endpoint, classify_exception(e))

        if not connected:
            return self._failure(method, endpoint, no_connectivity_error())

        logger.info(f"--> {method} {self.http_client.build_url(endpoint)}")

        send = {
            "GET": self.http_client.get,
            "POST": self.http_client.post,
            "PUT": self.http_client.put,
            "DELETE": self.http_client.delete,
        }[method]

        try:
            response = await send(endpoint, **kwargs)
        except HTTPClientError as e:
            logger.warning(f"Transport failure: {e}")
            return self._failure(method, endpoint, classify_exception(e))
        except Exception as e:
            logger.error(f"Unexpected error for {method} {endpoint}: {e}", exc_info=True)
            return self._failure(method, endpoint, classify_exception(e))

        logger.info(f"<-- {response.status_code} {method} {response.request.url}")
        return SuccessOutcome(response=response)

    @staticmethod
    def _failure(method: str, endpoint: str, error: GatewayError) -> FailureOutcome:
        logger.info(f"<-- {method} {endpoint} failed: {error.category.value} ({error.message})")
        return FailureOutcome(error=error)
