"""Game API error taxonomy.

Every exception carries an ErrorKind tag so callers can branch on
``err.kind`` without inspecting the class hierarchy.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    REMOTE_PROTOCOL = "remote_protocol"
    REMOTE_SERVER = "remote_server"
    LOGIN_FAILED = "login_failed"


class GameApiError(Exception):
    """Base class for all game API failures."""

    kind: ErrorKind = ErrorKind.REMOTE_SERVER

    def __init__(self, message: str, kind: Optional[ErrorKind] = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class InvalidArgumentError(GameApiError, ValueError):
    """Caller input violates a precondition. Raised before any side effect."""

    kind = ErrorKind.INVALID_ARGUMENT


class RemoteServerError(GameApiError):
    """Transport failure or a response that could not be decoded."""

    kind = ErrorKind.REMOTE_SERVER

    @classmethod
    def from_decode_error(cls, what: str, err: Exception) -> "RemoteServerError":
        """Wrap a protobuf DecodeError for the ``what`` response."""
        return cls(f"Malformed {what} response: {err}", ErrorKind.REMOTE_PROTOCOL)


class LoginFailedError(GameApiError):
    """The server rejected the session credentials."""

    kind = ErrorKind.LOGIN_FAILED
