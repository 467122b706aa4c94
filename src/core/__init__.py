"""Game API client core"""
__version__ = "0.1.0"

from src.core.errors import (
    ErrorKind,
    GameApiError,
    InvalidArgumentError,
    LoginFailedError,
    RemoteServerError,
)

__all__ = [
    "ErrorKind",
    "GameApiError",
    "InvalidArgumentError",
    "LoginFailedError",
    "RemoteServerError",
]
