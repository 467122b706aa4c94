"""API request/response schemas."""

from typing import Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class RecycleRequest(BaseModel):
    """아이템 버리기 요청"""

    quantity: int = Field(..., description="버릴 수량 (보유량 이하)")


class IncenseRequest(BaseModel):
    """incense 사용 요청. item_id 생략 시 ITEM_INCENSE_ORDINARY"""

    item_id: Optional[int] = Field(None, description="incense ItemId")


# === Response Schemas ===


class ItemInfo(BaseModel):
    """아이템 스택 정보"""

    item_id: int
    name: str
    count: int
    unseen: bool = False


class ItemListResponse(BaseModel):
    """가방 전체"""

    items: list[ItemInfo] = []
    items_count: int
    capacity: int
    is_full: bool = False


class AppliedItemInfo(BaseModel):
    """적용 중인 아이템 (incense, lucky egg)"""

    item_id: int
    name: str
    expire_ms: int
    applied_ms: int


class RecycleResponse(BaseModel):
    result: str
    item: ItemInfo


class IncenseResponse(BaseModel):
    result: str
    applied_incense: Optional[AppliedItemInfo] = None


class UseItemResponse(BaseModel):
    """use_item 결과. handled=False면 지원하지 않는 종류 (no-op)"""

    item_id: int
    handled: bool
    result: Optional[str] = None


class LuckyEggResponse(BaseModel):
    result: str
    applied_items: list[AppliedItemInfo] = []


class RefreshResponse(BaseModel):
    item_kinds: int
    items_count: int
