"""ItemBag Service 테스트 (MockRequestHandler)"""

import pytest

from src.core.errors import (
    ErrorKind,
    InvalidArgumentError,
    LoginFailedError,
    RemoteServerError,
)
from src.core.item.models import Item
from src.protocol.messages import (
    AppliedItem,
    ItemData,
    ItemId,
    RecycleInventoryItemResponse,
    RecycleResult,
    RequestType,
    UseIncenseResponse,
    UseIncenseResult,
    UseItemXpBoostResponse,
    UseXpBoostResult,
)

UNRECOGNIZED = 9999


def _recycle_response(result: int, new_count: int = 0):
    return RecycleInventoryItemResponse(result=result, new_count=new_count)


# ── 로컬 상태 ────────────────────────────────────────────────


class TestLocalState:
    def test_new_bag_is_empty(self, api) -> None:
        assert api.item_bag.get_items() == []
        assert api.item_bag.get_items_count() == 0

    def test_reset_clears_everything(self, bag) -> None:
        bag.reset()
        assert bag.get_items() == []
        assert bag.get_items_count() == 0

    def test_reset_is_idempotent(self, bag) -> None:
        bag.reset()
        bag.reset()
        assert bag.get_items() == []

    def test_add_then_get(self, api) -> None:
        api.item_bag.add_item(Item(ItemId.ITEM_GREAT_BALL, 12))
        assert api.item_bag.get_item(ItemId.ITEM_GREAT_BALL).count == 12

    def test_add_overwrites_same_kind(self, api) -> None:
        bag = api.item_bag
        bag.add_item(Item(ItemId.ITEM_POKE_BALL, 10))
        bag.add_item(Item(ItemId.ITEM_POKE_BALL, 4))
        assert bag.get_item(ItemId.ITEM_POKE_BALL).count == 4
        assert len(bag.get_items()) == 1

    def test_items_count_sums_counts(self, bag) -> None:
        assert bag.get_items_count() == 5 + 3 + 1

    def test_get_items_is_snapshot(self, bag) -> None:
        items = bag.get_items()
        bag.reset()
        assert len(items) == 3


class TestGetItem:
    def test_missing_returns_zero_placeholder(self, bag) -> None:
        item = bag.get_item(ItemId.ITEM_MASTER_BALL)
        assert item.item_id == ItemId.ITEM_MASTER_BALL
        assert item.count == 0

    def test_placeholder_not_stored(self, bag) -> None:
        before = {i.item_id for i in bag.get_items()}
        bag.get_item(ItemId.ITEM_MASTER_BALL)
        after = {i.item_id for i in bag.get_items()}
        assert before == after
        assert not bag.has_item(ItemId.ITEM_MASTER_BALL)

    def test_item_unknown_is_recognized(self, bag) -> None:
        assert bag.get_item(ItemId.ITEM_UNKNOWN).count == 0

    def test_unrecognized_raises(self, bag) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            bag.get_item(UNRECOGNIZED)
        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENT


class TestDeleteLocal:
    def test_delete_existing(self, bag, handler) -> None:
        removed = bag.delete_local(ItemId.ITEM_POTION)
        assert removed is not None
        assert removed.count == 5
        assert not bag.has_item(ItemId.ITEM_POTION)
        assert handler.sent == []

    def test_delete_missing_returns_none(self, bag) -> None:
        assert bag.delete_local(ItemId.ITEM_MASTER_BALL) is None


class TestLoadItems:
    def test_replaces_contents(self, bag) -> None:
        stored = bag.load_items(
            [
                ItemData(item_id=ItemId.ITEM_POKE_BALL, count=20, unseen=True),
                ItemData(item_id=ItemId.ITEM_RAZZ_BERRY, count=2),
            ]
        )
        assert stored == 2
        assert not bag.has_item(ItemId.ITEM_POTION)
        ball = bag.get_item(ItemId.ITEM_POKE_BALL)
        assert ball.count == 20
        assert ball.unseen is True

    def test_skips_zero_counts(self, api) -> None:
        stored = api.item_bag.load_items(
            [
                ItemData(item_id=ItemId.ITEM_POKE_BALL, count=0),
                ItemData(item_id=ItemId.ITEM_REVIVE, count=1),
            ]
        )
        assert stored == 1
        assert not api.item_bag.has_item(ItemId.ITEM_POKE_BALL)


# ── discard_remote ───────────────────────────────────────────


class TestDiscardRemote:
    def test_success_partial(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.RECYCLE_INVENTORY_ITEM,
            _recycle_response(RecycleResult.SUCCESS, new_count=2),
        )
        result = bag.discard_remote(ItemId.ITEM_POTION, 3)
        assert result == RecycleResult.SUCCESS
        assert bag.get_item(ItemId.ITEM_POTION).count == 2

    def test_success_to_zero_removes_record(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.RECYCLE_INVENTORY_ITEM,
            _recycle_response(RecycleResult.SUCCESS, new_count=0),
        )
        result = bag.discard_remote(ItemId.ITEM_POTION, 5)
        assert result == RecycleResult.SUCCESS
        assert not bag.has_item(ItemId.ITEM_POTION)
        assert bag.get_item(ItemId.ITEM_POTION).count == 0

    def test_request_carries_kind_and_quantity(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.RECYCLE_INVENTORY_ITEM,
            _recycle_response(RecycleResult.SUCCESS, new_count=4),
        )
        bag.discard_remote(ItemId.ITEM_POTION, 1)
        sent = handler.sent_of(RequestType.RECYCLE_INVENTORY_ITEM)
        assert len(sent) == 1
        assert sent[0].message.item_id == ItemId.ITEM_POTION
        assert sent[0].message.count == 1

    def test_non_success_leaves_state(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.RECYCLE_INVENTORY_ITEM,
            _recycle_response(RecycleResult.ERROR_NOT_ENOUGH_COPIES, new_count=0),
        )
        result = bag.discard_remote(ItemId.ITEM_POTION, 5)
        assert result == RecycleResult.ERROR_NOT_ENOUGH_COPIES
        assert bag.get_item(ItemId.ITEM_POTION).count == 5

    def test_too_many_raises_before_network(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.discard_remote(ItemId.ITEM_POTION, 6)
        assert handler.sent == []
        assert bag.get_item(ItemId.ITEM_POTION).count == 5

    def test_missing_kind_raises(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.discard_remote(ItemId.ITEM_MASTER_BALL, 1)
        assert handler.sent == []

    def test_non_positive_quantity_raises(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.discard_remote(ItemId.ITEM_POTION, 0)
        assert handler.sent == []

    def test_unrecognized_raises(self, bag) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.discard_remote(UNRECOGNIZED, 1)

    def test_malformed_response(self, bag, handler, malformed) -> None:
        handler.queue_response(RequestType.RECYCLE_INVENTORY_ITEM, malformed)
        with pytest.raises(RemoteServerError) as exc_info:
            bag.discard_remote(ItemId.ITEM_POTION, 2)
        assert exc_info.value.kind == ErrorKind.REMOTE_PROTOCOL
        assert bag.get_item(ItemId.ITEM_POTION).count == 5

    def test_transport_failure_propagates(self, bag, handler) -> None:
        handler.fail_with = LoginFailedError("session expired")
        with pytest.raises(LoginFailedError):
            bag.discard_remote(ItemId.ITEM_POTION, 2)
        assert bag.get_item(ItemId.ITEM_POTION).count == 5


# ── use_item / use_incense ───────────────────────────────────


class TestUseItem:
    def test_non_incense_is_noop(self, bag, handler) -> None:
        before = [(i.item_id, i.count) for i in bag.get_items()]
        assert bag.use_item(ItemId.ITEM_POTION) is None
        assert handler.sent == []
        assert [(i.item_id, i.count) for i in bag.get_items()] == before

    def test_lucky_egg_via_use_item_is_noop(self, bag, handler) -> None:
        assert bag.use_item(ItemId.ITEM_LUCKY_EGG) is None
        assert handler.sent == []

    def test_spicy_incense_sends_one_request(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.USE_INCENSE, UseIncenseResponse(result=UseIncenseResult.SUCCESS)
        )
        response = bag.use_item(ItemId.ITEM_INCENSE_SPICY)
        assert response.result == UseIncenseResult.SUCCESS
        assert len(handler.sent) == 1
        assert handler.sent[0].request_type == RequestType.USE_INCENSE
        assert handler.sent[0].message.incense_type == ItemId.ITEM_INCENSE_SPICY

    @pytest.mark.parametrize(
        "kind",
        [
            ItemId.ITEM_INCENSE_ORDINARY,
            ItemId.ITEM_INCENSE_COOL,
            ItemId.ITEM_INCENSE_FLORAL,
        ],
    )
    def test_every_incense_kind_dispatches(self, api, handler, kind) -> None:
        handler.queue_response(
            RequestType.USE_INCENSE, UseIncenseResponse(result=UseIncenseResult.SUCCESS)
        )
        api.item_bag.use_item(kind)
        assert handler.sent[0].message.incense_type == kind

    def test_unrecognized_raises(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.use_item(UNRECOGNIZED)
        assert handler.sent == []


class TestUseIncense:
    def test_default_is_ordinary(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.USE_INCENSE,
            UseIncenseResponse(result=UseIncenseResult.INCENSE_ALREADY_ACTIVE),
        )
        response = bag.use_incense()
        assert response.result == UseIncenseResult.INCENSE_ALREADY_ACTIVE
        assert handler.sent[0].message.incense_type == ItemId.ITEM_INCENSE_ORDINARY

    def test_does_not_touch_bag(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.USE_INCENSE, UseIncenseResponse(result=UseIncenseResult.SUCCESS)
        )
        bag.use_incense(ItemId.ITEM_INCENSE_SPICY)
        assert bag.get_item(ItemId.ITEM_INCENSE_SPICY).count == 3

    def test_malformed_response(self, bag, handler, malformed) -> None:
        handler.queue_response(RequestType.USE_INCENSE, malformed)
        with pytest.raises(RemoteServerError) as exc_info:
            bag.use_incense()
        assert exc_info.value.kind == ErrorKind.REMOTE_PROTOCOL
        assert bag.get_items_count() == 9

    def test_unrecognized_raises(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.use_incense(UNRECOGNIZED)
        assert handler.sent == []

    def test_out_of_range_kind_raises(self, bag, handler) -> None:
        with pytest.raises(InvalidArgumentError):
            bag.use_incense(2**40)
        assert handler.sent == []


# ── use_lucky_egg ────────────────────────────────────────────


class TestUseLuckyEgg:
    def test_returns_full_response(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.USE_ITEM_XP_BOOST,
            UseItemXpBoostResponse(
                result=UseXpBoostResult.SUCCESS,
                applied_items=[
                    AppliedItem(
                        item_id=ItemId.ITEM_LUCKY_EGG,
                        applied_ms=1000,
                        expire_ms=1_801_000,
                    )
                ],
            ),
        )
        response = bag.use_lucky_egg()
        assert response.result == UseXpBoostResult.SUCCESS
        assert response.applied_items[0].expire_ms == 1_801_000
        assert handler.sent[0].message.item_id == ItemId.ITEM_LUCKY_EGG

    def test_no_local_mutation(self, bag, handler) -> None:
        handler.queue_response(
            RequestType.USE_ITEM_XP_BOOST,
            UseItemXpBoostResponse(result=UseXpBoostResult.SUCCESS),
        )
        bag.use_lucky_egg()
        assert bag.get_item(ItemId.ITEM_LUCKY_EGG).count == 1

    def test_malformed_response(self, bag, handler, malformed) -> None:
        handler.queue_response(RequestType.USE_ITEM_XP_BOOST, malformed)
        with pytest.raises(RemoteServerError):
            bag.use_lucky_egg()
        assert bag.get_item(ItemId.ITEM_LUCKY_EGG).count == 1
