"""A single typed request and the raw bytes the server returned for it."""

from typing import Any, Optional

from google.protobuf.message import DecodeError

from src.core.errors import RemoteServerError
from src.protocol.messages import Request, RequestType, enum_name


class ServerRequest:
    """Pairs an outgoing protocol message with its response payload.

    The request handler fills the payload via handle_data() once the round
    trip completes; callers then decode ``data`` into the expected response.
    """

    def __init__(self, request_type: int, message: Any) -> None:
        self.request_type = request_type
        self.message = message
        self._data: Optional[bytes] = None

    @property
    def has_response(self) -> bool:
        return self._data is not None

    @property
    def data(self) -> bytes:
        """Raw response bytes.

        Raises:
            RemoteServerError: If no response was received for this request.
        """
        if self._data is None:
            raise RemoteServerError(
                f"No response received for {enum_name(RequestType, self.request_type)}"
            )
        return self._data

    def handle_data(self, data: bytes) -> None:
        self._data = data

    def parse(self, response_cls: Any, what: str) -> Any:
        """Decode the response payload into response_cls.

        Raises:
            RemoteServerError: kind=REMOTE_PROTOCOL if the bytes do not decode.
        """
        try:
            return response_cls.FromString(self.data)
        except DecodeError as e:
            raise RemoteServerError.from_decode_error(what, e) from e

    def to_proto(self):
        """Envelope entry for the wire."""
        return Request(
            request_type=self.request_type,
            request_message=self.message.SerializeToString(),
        )

    def __repr__(self) -> str:
        return f"ServerRequest({enum_name(RequestType, self.request_type)})"
