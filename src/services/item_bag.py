"""아이템 가방 Service — 로컬 인벤토리 뷰 + 아이템 관련 원격 요청

로컬 상태는 서버 확인(SUCCESS) 이후에만 갱신한다.
원격 실패는 재시도/무시 없이 그대로 호출자에게 전파.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Optional

from src.core.errors import InvalidArgumentError
from src.core.item.categories import is_incense, require_recognized
from src.core.item.inventory import calculate_used_space
from src.core.item.models import Item
from src.core.logging import get_logger
from src.protocol.messages import (
    ItemId,
    RecycleInventoryItemMessage,
    RecycleInventoryItemResponse,
    RecycleResult,
    RequestType,
    UseIncenseMessage,
    UseIncenseResponse,
    UseIncenseResult,
    UseItemXpBoostMessage,
    UseItemXpBoostResponse,
    UseXpBoostResult,
    enum_name,
)
from src.services.transport.server_request import ServerRequest

if TYPE_CHECKING:
    from src.services.game_api import GameApi

logger = get_logger(__name__)


class ItemBag:
    """플레이어 세션 하나의 아이템 스택 저장소.

    동기화 없음 — 인스턴스당 한 스레드에서만 변경할 것.
    """

    def __init__(self, api: GameApi) -> None:
        self._api = api
        self._items: dict[int, Item] = {}

    # === 로컬 상태 ===

    def reset(self) -> None:
        """전체 비우기. 세션 재동기화 시 호출."""
        self._items.clear()

    def add_item(self, item: Item) -> None:
        """item_id 기준 삽입/덮어쓰기 (last-write-wins). count 검증 없음."""
        self._items[item.item_id] = item

    def load_items(self, item_data: Iterable[Any]) -> int:
        """인벤토리 스냅샷(ItemData 목록)으로 가방 재구성.
        count 0 이하 항목은 저장하지 않는다.
        반환: 저장된 아이템 종류 수.
        """
        self.reset()
        for data in item_data:
            item = Item.from_proto(data)
            if item.count > 0:
                self.add_item(item)
        logger.debug("Loaded %d item kinds into bag", len(self._items))
        return len(self._items)

    def get_item(self, item_id: int) -> Item:
        """보유 아이템 조회. 없으면 count 0 placeholder 반환 (저장하지 않음).

        Raises:
            InvalidArgumentError: item_id가 UNRECOGNIZED일 때.
        """
        require_recognized(item_id, "get")
        item = self._items.get(item_id)
        if item is None:
            return Item.empty(item_id)
        return item

    def get_items(self) -> list[Item]:
        """저장된 아이템 스냅샷."""
        return list(self._items.values())

    def get_items_count(self) -> int:
        """인벤토리 사용 공간 (count 합계)."""
        return calculate_used_space(self._items.values())

    def has_item(self, item_id: int) -> bool:
        return item_id in self._items

    def delete_local(self, item_id: int) -> Optional[Item]:
        """로컬 맵에서만 삭제. 네트워크 호출 없음. 없으면 None."""
        return self._items.pop(item_id, None)

    # === 원격 요청 ===

    def discard_remote(self, item_id: int, quantity: int) -> int:
        """서버 인벤토리에서 quantity개 버리기(recycle) 후 로컬 반영.

        SUCCESS면 서버가 확인한 new_count로 갱신하고, 0 이하이면 삭제.
        그 외 결과는 로컬 상태를 건드리지 않는다.

        Returns:
            RecycleInventoryItemResponse.Result 값.

        Raises:
            InvalidArgumentError: UNRECOGNIZED, quantity < 1, 보유량 초과.
            RemoteServerError: 전송 실패 또는 응답 디코딩 실패.
            LoginFailedError: 인증 실패.
        """
        item = self.get_item(item_id)
        if quantity < 1:
            raise InvalidArgumentError("Quantity to discard must be positive")
        if item.count < quantity:
            raise InvalidArgumentError("You cannot remove more quantity than you have")

        request = ServerRequest(
            RequestType.RECYCLE_INVENTORY_ITEM,
            RecycleInventoryItemMessage(item_id=item_id, count=quantity),
        )
        self._send(request)
        response = request.parse(RecycleInventoryItemResponse, "recycle inventory item")

        if response.result == RecycleResult.SUCCESS:
            item.count = response.new_count
            if item.count <= 0:
                self.delete_local(item_id)
            logger.info(
                "Recycled %d x %s, %d left", quantity, item.name, max(item.count, 0)
            )
        else:
            logger.warning(
                "Recycle %s failed: %s",
                item.name,
                enum_name(RecycleResult, response.result),
            )
        return response.result

    def use_item(self, item_id: int) -> Optional[Any]:
        """종류별 사용 처리. 현재는 incense 계열만 지원, 나머지는 no-op.

        Returns:
            incense면 UseIncenseResponse, 그 외 None.
        """
        require_recognized(item_id, "use")

        if is_incense(item_id):
            return self.use_incense(item_id)
        logger.debug("use_item: %s has no use handler", ItemId.Name(item_id))
        return None

    def use_incense(self, item_id: int = ItemId.ITEM_INCENSE_ORDINARY) -> Any:
        """incense 사용 요청. 가방 상태는 바꾸지 않는다 (서버가 권위)."""
        require_recognized(item_id, "use")

        request = ServerRequest(
            RequestType.USE_INCENSE,
            UseIncenseMessage(incense_type=item_id),
        )
        self._send(request)
        response = request.parse(UseIncenseResponse, "use incense")
        logger.info(
            "Use incense result: %s", enum_name(UseIncenseResult, response.result)
        )
        return response

    def use_lucky_egg(self) -> Any:
        """행운의 알(XP boost) 사용. 응답 전체를 반환."""
        request = ServerRequest(
            RequestType.USE_ITEM_XP_BOOST,
            UseItemXpBoostMessage(item_id=ItemId.ITEM_LUCKY_EGG),
        )
        self._send(request)
        response = request.parse(UseItemXpBoostResponse, "use xp boost")
        logger.info(
            "Use lucky egg result: %s", enum_name(UseXpBoostResult, response.result)
        )
        return response

    def _send(self, request: ServerRequest) -> None:
        self._api.request_handler.send_server_requests(request)
