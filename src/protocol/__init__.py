"""Game API protocol — protobuf messages and enums."""

from src.protocol.messages import (
    AppliedItem,
    GetInventoryMessage,
    GetInventoryResponse,
    ItemData,
    ItemId,
    RecycleInventoryItemMessage,
    RecycleInventoryItemResponse,
    Request,
    RequestEnvelope,
    RequestType,
    ResponseEnvelope,
    UseIncenseMessage,
    UseIncenseResponse,
    UseItemXpBoostMessage,
    UseItemXpBoostResponse,
)

__all__ = [
    "AppliedItem",
    "GetInventoryMessage",
    "GetInventoryResponse",
    "ItemData",
    "ItemId",
    "RecycleInventoryItemMessage",
    "RecycleInventoryItemResponse",
    "Request",
    "RequestEnvelope",
    "RequestType",
    "ResponseEnvelope",
    "UseIncenseMessage",
    "UseIncenseResponse",
    "UseItemXpBoostMessage",
    "UseItemXpBoostResponse",
]
