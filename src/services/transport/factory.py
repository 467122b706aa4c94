"""Factory for creating request handler instances."""

from typing import Optional

from src.config import settings
from src.core.logging import get_logger
from src.services.transport.base import RequestHandler
from src.services.transport.http import HttpRequestHandler
from src.services.transport.mock import MockRequestHandler

logger = get_logger(__name__)


def get_request_handler(transport_name: Optional[str] = None) -> RequestHandler:
    """Get a request handler instance.

    Args:
        transport_name: Optional transport name. If not specified,
                        uses TRANSPORT from config.

    Returns:
        A RequestHandler instance.
    """
    name = transport_name or settings.TRANSPORT

    if name == "mock":
        logger.debug("Using MockRequestHandler")
        return MockRequestHandler()

    if name == "http":
        if settings.AUTH_TOKEN:
            logger.debug("Using HttpRequestHandler for %s", settings.API_URL)
            return HttpRequestHandler(
                api_url=settings.API_URL,
                auth_token=settings.AUTH_TOKEN,
                timeout=settings.REQUEST_TIMEOUT,
            )
        else:
            logger.warning("AUTH_TOKEN not set, falling back to MockRequestHandler")
            return MockRequestHandler()

    # Fallback to MockRequestHandler for unknown transports
    logger.warning("Unknown transport '%s', falling back to MockRequestHandler", name)
    return MockRequestHandler()
