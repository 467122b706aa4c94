"""In-memory request handler for testing and offline use."""

from collections import defaultdict, deque
from typing import Any, Optional

from src.core.errors import RemoteServerError
from src.core.logging import get_logger
from src.protocol.messages import RequestType, enum_name
from src.services.transport.base import RequestHandler
from src.services.transport.server_request import ServerRequest

logger = get_logger(__name__)


class MockRequestHandler(RequestHandler):
    """Request handler that answers from queued responses.

    Responses are queued per RequestType and consumed first-in first-out.
    Every request sent is recorded in ``sent``. Setting ``fail_with``
    makes the next round trips raise that exception, which simulates
    transport or auth failures.
    """

    def __init__(self) -> None:
        self._responses: dict[int, deque[bytes]] = defaultdict(deque)
        self.sent: list[ServerRequest] = []
        self.fail_with: Optional[Exception] = None

    @property
    def name(self) -> str:
        """Return the handler name."""
        return "mock"

    def is_available(self) -> bool:
        """Check if the handler is available."""
        return True

    def queue_response(self, request_type: int, response: Any) -> None:
        """Queue a response message (or raw bytes) for request_type."""
        if isinstance(response, (bytes, bytearray)):
            payload = bytes(response)
        else:
            payload = response.SerializeToString()
        self._responses[request_type].append(payload)

    def sent_of(self, request_type: int) -> list[ServerRequest]:
        return [r for r in self.sent if r.request_type == request_type]

    def send_server_requests(self, *requests: ServerRequest) -> None:
        if self.fail_with is not None:
            raise self.fail_with

        for request in requests:
            self.sent.append(request)
            queue = self._responses.get(request.request_type)
            if not queue:
                raise RemoteServerError(
                    f"No mock response queued for {enum_name(RequestType, request.request_type)}"
                )
            request.handle_data(queue.popleft())
            logger.debug("Mock answered %r", request)
