"""Game API facade — one player session.

Owns the request handler and the session's ItemBag. The bag receives the
facade at construction and only uses it to issue requests.
"""

from src.core.errors import RemoteServerError
from src.core.logging import get_logger
from src.protocol.messages import GetInventoryMessage, GetInventoryResponse, RequestType
from src.services.item_bag import ItemBag
from src.services.transport.base import RequestHandler
from src.services.transport.server_request import ServerRequest

logger = get_logger(__name__)


class GameApi:
    """세션 컨텍스트: 전송 계층 + 아이템 가방"""

    def __init__(self, request_handler: RequestHandler) -> None:
        self.request_handler = request_handler
        self.item_bag = ItemBag(self)

    def refresh_inventory(self) -> int:
        """GET_INVENTORY → 가방 재동기화.
        실패 응답이면 가방을 건드리지 않고 RemoteServerError.
        반환: 저장된 아이템 종류 수.
        """
        request = ServerRequest(RequestType.GET_INVENTORY, GetInventoryMessage())
        self.request_handler.send_server_requests(request)
        response = request.parse(GetInventoryResponse, "get inventory")

        if not response.success:
            raise RemoteServerError("Server reported inventory fetch failure")

        stored = self.item_bag.load_items(response.items)
        logger.info(
            "Inventory refreshed: %d kinds, %d items",
            stored,
            self.item_bag.get_items_count(),
        )
        return stored

    def close(self) -> None:
        self.request_handler.close()
