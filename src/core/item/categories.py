"""아이템 분류 규칙 — 인식 가능 여부, 향로(incense) 계열"""

from src.core.errors import InvalidArgumentError
from src.protocol.messages import ItemId

INCENSE_KINDS: frozenset[int] = frozenset(
    {
        ItemId.ITEM_INCENSE_ORDINARY,
        ItemId.ITEM_INCENSE_SPICY,
        ItemId.ITEM_INCENSE_COOL,
        ItemId.ITEM_INCENSE_FLORAL,
    }
)


def is_recognized(item_id: int) -> bool:
    """protocol에 선언된 ItemId 값인지. 선언 외 정수 = UNRECOGNIZED."""
    return item_id in ItemId.values()


def is_incense(item_id: int) -> bool:
    return item_id in INCENSE_KINDS


def require_recognized(item_id: int, action: str) -> None:
    """UNRECOGNIZED면 InvalidArgumentError."""
    if not is_recognized(item_id):
        raise InvalidArgumentError(f"You cannot {action} item for UNRECOGNIZED")
