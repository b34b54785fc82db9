import asyncio
from abc import ABC, abstractmethod

from request_gateway.core.logging import get_logger

logger = get_logger(__name__)


class ConnectivityChecker(ABC):
    """
    Abstract reachability probe queried before every gateway call.

    Implementations answer "is the network reachable right now?" and must not
    raise for an ordinary offline state; they return False instead.
    """

    @abstractmethod
    async def is_connected(self) -> bool:
        """
        Report current network reachability.

        Returns:
            True if the network looks reachable, False otherwise
        """
        pass


class SocketConnectivityChecker(ConnectivityChecker):
    """
    Reachability probe that opens a TCP connection to a well-known host.

    The default target is a public DNS resolver, which answers on port 53
    from virtually any network that has outbound access.
    """

    def __init__(self, host: str = "1.1.1.1", port: int = 53, timeout: float = 3.0):
        self.host = host
        self.port = port
        self.timeout = timeout

    async def is_connected(self) -> bool:
        try:
            _, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port),
                timeout=self.timeout
            )
        except (OSError, asyncio.TimeoutError) as e:
            logger.debug(f"Connectivity probe to {self.host}:{self.port} failed: {e}")
            return False

        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            pass  # connection already proved reachability
        return True
