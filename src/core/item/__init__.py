"""아이템 시스템 Core — 순수 Python, 전송 계층 무관"""

from .categories import INCENSE_KINDS, is_incense, is_recognized, require_recognized
from .inventory import BASE_ITEM_STORAGE, calculate_used_space, can_store
from .models import Item

__all__ = [
    "BASE_ITEM_STORAGE",
    "INCENSE_KINDS",
    "Item",
    "calculate_used_space",
    "can_store",
    "is_incense",
    "is_recognized",
    "require_recognized",
]
