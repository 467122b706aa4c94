"""인벤토리 공간 계산"""

from collections.abc import Iterable

from .models import Item

BASE_ITEM_STORAGE = 350  # 업그레이드 없는 기본 가방 용량


def calculate_used_space(items: Iterable[Item]) -> int:
    """보유 아이템 count 합계 = 사용 중인 공간."""
    return sum(item.count for item in items)


def can_store(used_space: int, amount: int, capacity: int = BASE_ITEM_STORAGE) -> bool:
    """amount개 추가 가능 여부"""
    return used_space + amount <= capacity
