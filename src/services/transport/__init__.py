"""Transport module."""

from src.services.transport.base import RequestHandler
from src.services.transport.factory import get_request_handler
from src.services.transport.http import HttpRequestHandler
from src.services.transport.mock import MockRequestHandler
from src.services.transport.server_request import ServerRequest

__all__ = [
    "HttpRequestHandler",
    "MockRequestHandler",
    "RequestHandler",
    "ServerRequest",
    "get_request_handler",
]
