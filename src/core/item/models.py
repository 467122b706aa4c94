"""아이템 도메인 모델 (전송 계층 무관)"""

from __future__ import annotations

from dataclasses import dataclass

from src.protocol.messages import ItemId

UNRECOGNIZED_NAME = "UNRECOGNIZED"


@dataclass
class Item:
    """아이템 스택 한 종류. item_id = protocol ItemId 값."""

    item_id: int
    count: int = 0
    unseen: bool = False

    @classmethod
    def empty(cls, item_id: int) -> Item:
        """count 0 placeholder. 가방에 저장되지 않는다."""
        return cls(item_id=item_id, count=0)

    @classmethod
    def from_proto(cls, item_data) -> Item:
        """ItemData 메시지 → Item"""
        return cls(
            item_id=item_data.item_id,
            count=item_data.count,
            unseen=item_data.unseen,
        )

    @property
    def name(self) -> str:
        try:
            return ItemId.Name(self.item_id)
        except ValueError:
            return UNRECOGNIZED_NAME
