"""Abstract base class for request handlers."""

from abc import ABC, abstractmethod

from src.services.transport.server_request import ServerRequest


class RequestHandler(ABC):
    """Abstract base class for request handlers.

    A request handler owns the session with the game server: it performs the
    round trip (including auth) and hands each ServerRequest its raw
    response bytes. Retry policy, if any, belongs here and not to callers.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the handler name."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the handler is configured to reach a server."""
        ...

    @abstractmethod
    def send_server_requests(self, *requests: ServerRequest) -> None:
        """Send requests in one round trip and fill their response data.

        Args:
            requests: Requests to send, answered in order.

        Raises:
            RemoteServerError: On transport failure or a malformed envelope.
            LoginFailedError: If the server rejects the credentials.
        """
        ...

    def close(self) -> None:
        """Release transport resources. No-op by default."""
