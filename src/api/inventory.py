"""Inventory API endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import (
    AppliedItemInfo,
    IncenseRequest,
    IncenseResponse,
    ItemInfo,
    ItemListResponse,
    LuckyEggResponse,
    RecycleRequest,
    RecycleResponse,
    RefreshResponse,
    UseItemResponse,
)
from src.core.errors import ErrorKind, GameApiError
from src.core.item.inventory import BASE_ITEM_STORAGE, can_store
from src.core.item.models import Item
from src.core.logging import get_logger
from src.protocol.messages import (
    ItemId,
    RecycleResult,
    UseIncenseResult,
    UseXpBoostResult,
    enum_name,
)
from src.services.game_api import GameApi

logger = get_logger(__name__)

router = APIRouter(prefix="/inventory", tags=["inventory"])

ERROR_STATUS = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.LOGIN_FAILED: 401,
    ErrorKind.REMOTE_PROTOCOL: 502,
    ErrorKind.REMOTE_SERVER: 502,
}


def get_game_api(request: Request) -> GameApi:
    """GameApi 인스턴스 반환 (의존성 주입)"""
    api: GameApi = request.app.state.game_api
    return api


def _to_http(err: GameApiError) -> HTTPException:
    status = ERROR_STATUS.get(err.kind, 500)
    if status >= 500:
        logger.error("Game API failure (%s): %s", err.kind.value, err)
    return HTTPException(
        status_code=status, detail={"error": str(err), "kind": err.kind.value}
    )


def _item_info(item: Item) -> ItemInfo:
    return ItemInfo(
        item_id=item.item_id, name=item.name, count=item.count, unseen=item.unseen
    )


def _applied_info(applied: Any) -> AppliedItemInfo:
    return AppliedItemInfo(
        item_id=applied.item_id,
        name=enum_name(ItemId, applied.item_id),
        expire_ms=applied.expire_ms,
        applied_ms=applied.applied_ms,
    )


def _incense_response(response: Any) -> IncenseResponse:
    applied = None
    if response.HasField("applied_incense"):
        applied = _applied_info(response.applied_incense)
    return IncenseResponse(
        result=enum_name(UseIncenseResult, response.result),
        applied_incense=applied,
    )


@router.get("/items", response_model=ItemListResponse)
def list_items(api: GameApi = Depends(get_game_api)) -> ItemListResponse:
    """가방 전체 조회"""
    bag = api.item_bag
    used = bag.get_items_count()
    return ItemListResponse(
        items=[_item_info(i) for i in bag.get_items()],
        items_count=used,
        capacity=BASE_ITEM_STORAGE,
        is_full=not can_store(used, 1),
    )


@router.get("/items/{item_id}", response_model=ItemInfo)
def get_item(item_id: int, api: GameApi = Depends(get_game_api)) -> ItemInfo:
    """단일 아이템 조회. 없으면 count 0"""
    try:
        return _item_info(api.item_bag.get_item(item_id))
    except GameApiError as e:
        raise _to_http(e)


@router.post("/items/{item_id}/recycle", response_model=RecycleResponse)
def recycle_item(
    item_id: int, body: RecycleRequest, api: GameApi = Depends(get_game_api)
) -> RecycleResponse:
    """서버에서 quantity개 버리기"""
    try:
        result = api.item_bag.discard_remote(item_id, body.quantity)
        item = api.item_bag.get_item(item_id)
    except GameApiError as e:
        raise _to_http(e)
    return RecycleResponse(
        result=enum_name(RecycleResult, result), item=_item_info(item)
    )


@router.post("/items/{item_id}/use", response_model=UseItemResponse)
def use_item(item_id: int, api: GameApi = Depends(get_game_api)) -> UseItemResponse:
    """아이템 사용 (incense 계열만 처리)"""
    try:
        response = api.item_bag.use_item(item_id)
    except GameApiError as e:
        raise _to_http(e)
    if response is None:
        return UseItemResponse(item_id=item_id, handled=False)
    return UseItemResponse(
        item_id=item_id,
        handled=True,
        result=enum_name(UseIncenseResult, response.result),
    )


@router.post("/incense", response_model=IncenseResponse)
def use_incense(
    body: IncenseRequest, api: GameApi = Depends(get_game_api)
) -> IncenseResponse:
    """incense 사용"""
    try:
        if body.item_id is None:
            response = api.item_bag.use_incense()
        else:
            response = api.item_bag.use_incense(body.item_id)
    except GameApiError as e:
        raise _to_http(e)
    return _incense_response(response)


@router.post("/lucky-egg", response_model=LuckyEggResponse)
def use_lucky_egg(api: GameApi = Depends(get_game_api)) -> LuckyEggResponse:
    """행운의 알 사용"""
    try:
        response = api.item_bag.use_lucky_egg()
    except GameApiError as e:
        raise _to_http(e)
    return LuckyEggResponse(
        result=enum_name(UseXpBoostResult, response.result),
        applied_items=[_applied_info(a) for a in response.applied_items],
    )


@router.post("/refresh", response_model=RefreshResponse)
def refresh_inventory(api: GameApi = Depends(get_game_api)) -> RefreshResponse:
    """서버 인벤토리로 가방 재동기화"""
    try:
        kinds = api.refresh_inventory()
    except GameApiError as e:
        raise _to_http(e)
    return RefreshResponse(item_kinds=kinds, items_count=api.item_bag.get_items_count())
