"""Shared test fixtures."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.health import router as health_router
from src.api.inventory import router as inventory_router
from src.core.item.models import Item
from src.protocol.messages import ItemId
from src.services.game_api import GameApi
from src.services.item_bag import ItemBag
from src.services.transport.mock import MockRequestHandler


@pytest.fixture()
def handler() -> MockRequestHandler:
    """Queued-response transport."""
    return MockRequestHandler()


@pytest.fixture()
def api(handler: MockRequestHandler) -> GameApi:
    """GameApi wired to the mock transport."""
    return GameApi(handler)


@pytest.fixture()
def bag(api: GameApi) -> ItemBag:
    """Bag with 5 potions, 3 spicy incense, 1 lucky egg."""
    item_bag = api.item_bag
    item_bag.add_item(Item(ItemId.ITEM_POTION, 5))
    item_bag.add_item(Item(ItemId.ITEM_INCENSE_SPICY, 3))
    item_bag.add_item(Item(ItemId.ITEM_LUCKY_EGG, 1))
    return item_bag


@pytest.fixture()
def client(api: GameApi) -> TestClient:
    """FastAPI TestClient with the inventory routers and a mock-backed GameApi."""
    app = FastAPI()
    app.include_router(health_router)
    app.include_router(inventory_router)
    app.state.game_api = api
    return TestClient(app)


@pytest.fixture()
def malformed() -> bytes:
    """디코딩 불가 응답 (길이 5 선언, 실제 2바이트)."""
    return b"\x0a\x05ab"
