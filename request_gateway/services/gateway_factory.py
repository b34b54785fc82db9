from typing import Optional

import httpx

from request_gateway.core import config
from request_gateway.core.connectivity import ConnectivityChecker, SocketConnectivityChecker
from request_gateway.core.http import HTTPClient
from request_gateway.core.logging import get_logger
from request_gateway.services.request_gateway import RequestGateway

logger = get_logger(__name__)


class RequestGatewayFactory:
    """
    Factory for fully wired RequestGateway instances.

    Anything not passed explicitly is taken from environment configuration.
    """

    @staticmethod
    def create_gateway(
        base_url: Optional[str] = None,
        connect_timeout: Optional[float] = None,
        receive_timeout: Optional[float] = None,
        connectivity_checker: Optional[ConnectivityChecker] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> RequestGateway:
        """
        Create a gateway with its own transport and connectivity checker.

        Args:
            base_url: Upstream API base URL (defaults to API_BASE_URL)
            connect_timeout: Connect timeout in seconds (defaults to API_CONNECT_TIMEOUT)
            receive_timeout: Receive timeout in seconds (defaults to API_RECEIVE_TIMEOUT)
            connectivity_checker: Reachability probe (defaults to a socket probe
                built from CONNECTIVITY_CHECK_* settings)
            transport: Optional httpx transport for the HTTP client

        Returns:
            Configured RequestGateway

        Raises:
            ValueError: If no base URL is given or configured
        """
        base_url = base_url or config.API_BASE_URL
        if not base_url:
            raise ValueError(
                "No base URL configured. "
                "Pass base_url or set API_BASE_URL in your environment variables or .env file."
            )

        http_client = HTTPClient(
            base_url=base_url,
            connect_timeout=connect_timeout if connect_timeout is not None else config.API_CONNECT_TIMEOUT,
            receive_timeout=receive_timeout if receive_timeout is not None else config.API_RECEIVE_TIMEOUT,
            transport=transport
        )

        if connectivity_checker is None:
            connectivity_checker = SocketConnectivityChecker(
                host=config.CONNECTIVITY_CHECK_HOST,
                port=config.CONNECTIVITY_CHECK_PORT,
                timeout=config.CONNECTIVITY_CHECK_TIMEOUT
            )

        logger.info(
            f"Request gateway created for {http_client.base_url} "
            f"(connect {http_client.config.connect_timeout}s, receive {http_client.config.receive_timeout}s)"
        )
        return RequestGateway(http_client=http_client, connectivity_checker=connectivity_checker)
