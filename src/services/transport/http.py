"""HTTP request handler — protobuf envelopes over httpx."""

from typing import Optional

import httpx
from google.protobuf.message import DecodeError

from src.core.errors import LoginFailedError, RemoteServerError
from src.core.logging import get_logger
from src.protocol.messages import (
    STATUS_INVALID_AUTH_TOKEN,
    STATUS_OK,
    STATUS_OK_RPC_URL_IN_RESPONSE,
    RequestEnvelope,
    ResponseEnvelope,
)
from src.services.transport.base import RequestHandler
from src.services.transport.server_request import ServerRequest

logger = get_logger(__name__)

CONTENT_TYPE = "application/x-protobuf"


class HttpRequestHandler(RequestHandler):
    """Request handler posting RequestEnvelope messages to the game server."""

    def __init__(
        self,
        api_url: str,
        auth_token: Optional[str],
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the HTTP handler.

        Args:
            api_url: RPC endpoint receiving the envelopes.
            auth_token: Session token sent in every envelope.
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured httpx client (tests inject one).
        """
        self._api_url = api_url
        self._auth_token = auth_token
        self._client = client or httpx.Client(timeout=timeout)
        self._request_id = 0
        logger.info("HttpRequestHandler initialized for %s", api_url)

    @property
    def name(self) -> str:
        """Return the handler name."""
        return "http"

    def is_available(self) -> bool:
        """Check if the handler has credentials."""
        return bool(self._auth_token)

    def send_server_requests(self, *requests: ServerRequest) -> None:
        """Send all requests in a single envelope.

        Raises:
            LoginFailedError: No token, HTTP 401/403, or an invalid-token status.
            RemoteServerError: Transport errors, unexpected status codes,
                an undecodable envelope, or missing returns.
        """
        if not requests:
            return
        if not self.is_available():
            raise LoginFailedError("HttpRequestHandler has no auth token")

        self._request_id += 1
        envelope = RequestEnvelope(
            request_id=self._request_id,
            auth_token=self._auth_token,
            requests=[r.to_proto() for r in requests],
        )

        try:
            http_response = self._client.post(
                self._api_url,
                content=envelope.SerializeToString(),
                headers={"Content-Type": CONTENT_TYPE},
            )
        except httpx.HTTPError as e:
            logger.error("Transport error: %s", e)
            raise RemoteServerError(f"Transport error: {e}") from e

        if http_response.status_code in (401, 403):
            raise LoginFailedError(
                f"Server rejected credentials (HTTP {http_response.status_code})"
            )
        if http_response.status_code != 200:
            raise RemoteServerError(
                f"Unexpected HTTP status {http_response.status_code}"
            )

        try:
            response = ResponseEnvelope.FromString(http_response.content)
        except DecodeError as e:
            raise RemoteServerError.from_decode_error("envelope", e) from e

        if response.status_code == STATUS_INVALID_AUTH_TOKEN:
            raise LoginFailedError("Invalid auth token")
        if response.status_code not in (STATUS_OK, STATUS_OK_RPC_URL_IN_RESPONSE):
            raise RemoteServerError(
                f"Server returned status code {response.status_code}"
            )
        if len(response.returns) < len(requests):
            raise RemoteServerError(
                f"Expected {len(requests)} returns, got {len(response.returns)}"
            )

        for request, payload in zip(requests, response.returns):
            request.handle_data(payload)

    def close(self) -> None:
        self._client.close()
