"""Game API protocol definitions.

The wire schema is declared here as a FileDescriptorProto and registered in a
private descriptor pool; message classes and enum wrappers are generated from
it with the protobuf runtime, so the module behaves like a regular *_pb2 file.

Enums are proto3 (open): an integer outside the declared values is kept as-is
and is treated as UNRECOGNIZED by callers.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from google.protobuf.internal.enum_type_wrapper import EnumTypeWrapper

PROTO_FILE = "gameapi/protocol.proto"
PROTO_PACKAGE = "gameapi"

_F = descriptor_pb2.FieldDescriptorProto

# protocol 정의 순서 그대로 유지 (번호 = 서버 값)
ITEM_IDS: list[tuple[str, int]] = [
    ("ITEM_UNKNOWN", 0),
    ("ITEM_POKE_BALL", 1),
    ("ITEM_GREAT_BALL", 2),
    ("ITEM_ULTRA_BALL", 3),
    ("ITEM_MASTER_BALL", 4),
    ("ITEM_POTION", 101),
    ("ITEM_SUPER_POTION", 102),
    ("ITEM_HYPER_POTION", 103),
    ("ITEM_MAX_POTION", 104),
    ("ITEM_REVIVE", 201),
    ("ITEM_MAX_REVIVE", 202),
    ("ITEM_LUCKY_EGG", 301),
    ("ITEM_INCENSE_ORDINARY", 401),
    ("ITEM_INCENSE_SPICY", 402),
    ("ITEM_INCENSE_COOL", 403),
    ("ITEM_INCENSE_FLORAL", 404),
    ("ITEM_TROY_DISK", 501),
    ("ITEM_RAZZ_BERRY", 701),
    ("ITEM_BLUK_BERRY", 702),
    ("ITEM_NANAB_BERRY", 703),
    ("ITEM_WEPAR_BERRY", 704),
    ("ITEM_PINAP_BERRY", 705),
    ("ITEM_INCUBATOR_BASIC_UNLIMITED", 901),
    ("ITEM_INCUBATOR_BASIC", 902),
    ("ITEM_POKEMON_STORAGE_UPGRADE", 1001),
    ("ITEM_ITEM_STORAGE_UPGRADE", 1002),
]

REQUEST_TYPES: list[tuple[str, int]] = [
    ("METHOD_UNSET", 0),
    ("GET_INVENTORY", 4),
    ("RECYCLE_INVENTORY_ITEM", 137),
    ("USE_ITEM_XP_BOOST", 139),
    ("USE_INCENSE", 141),
]


def _add_enum(scope, name: str, values: list[tuple[str, int]]) -> None:
    enum = scope.enum_type.add(name=name)
    for value_name, number in values:
        enum.value.add(name=value_name, number=number)


def _add_field(
    message,
    name: str,
    number: int,
    field_type: int,
    type_name: str | None = None,
    repeated: bool = False,
) -> None:
    field = message.field.add(
        name=name,
        number=number,
        type=field_type,
        label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
    )
    if type_name:
        field.type_name = f".{PROTO_PACKAGE}.{type_name}"


def _build_file() -> descriptor_pb2.FileDescriptorProto:
    f = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE, package=PROTO_PACKAGE, syntax="proto3"
    )
    _add_enum(f, "ItemId", ITEM_IDS)
    _add_enum(f, "RequestType", REQUEST_TYPES)

    # === 공용 ===
    m = f.message_type.add(name="ItemData")
    _add_field(m, "item_id", 1, _F.TYPE_ENUM, "ItemId")
    _add_field(m, "count", 2, _F.TYPE_INT32)
    _add_field(m, "unseen", 3, _F.TYPE_BOOL)

    m = f.message_type.add(name="AppliedItem")
    _add_field(m, "item_id", 1, _F.TYPE_ENUM, "ItemId")
    _add_field(m, "expire_ms", 2, _F.TYPE_INT64)
    _add_field(m, "applied_ms", 3, _F.TYPE_INT64)

    # === GET_INVENTORY ===
    m = f.message_type.add(name="GetInventoryMessage")
    _add_field(m, "last_timestamp_ms", 1, _F.TYPE_INT64)

    m = f.message_type.add(name="GetInventoryResponse")
    _add_field(m, "success", 1, _F.TYPE_BOOL)
    _add_field(m, "items", 2, _F.TYPE_MESSAGE, "ItemData", repeated=True)

    # === RECYCLE_INVENTORY_ITEM ===
    m = f.message_type.add(name="RecycleInventoryItemMessage")
    _add_field(m, "item_id", 1, _F.TYPE_ENUM, "ItemId")
    _add_field(m, "count", 2, _F.TYPE_INT32)

    m = f.message_type.add(name="RecycleInventoryItemResponse")
    _add_enum(
        m,
        "Result",
        [
            ("UNSET", 0),
            ("SUCCESS", 1),
            ("ERROR_NOT_ENOUGH_COPIES", 2),
            ("ERROR_CANNOT_RECYCLE_INCUBATORS", 3),
        ],
    )
    _add_field(m, "result", 1, _F.TYPE_ENUM, "RecycleInventoryItemResponse.Result")
    _add_field(m, "new_count", 2, _F.TYPE_INT32)

    # === USE_INCENSE ===
    m = f.message_type.add(name="UseIncenseMessage")
    _add_field(m, "incense_type", 1, _F.TYPE_ENUM, "ItemId")

    m = f.message_type.add(name="UseIncenseResponse")
    _add_enum(
        m,
        "Result",
        [
            ("UNKNOWN", 0),
            ("SUCCESS", 1),
            ("INCENSE_ALREADY_ACTIVE", 2),
            ("NONE_IN_INVENTORY", 3),
            ("LOCATION_UNSET", 4),
        ],
    )
    _add_field(m, "result", 1, _F.TYPE_ENUM, "UseIncenseResponse.Result")
    _add_field(m, "applied_incense", 2, _F.TYPE_MESSAGE, "AppliedItem")

    # === USE_ITEM_XP_BOOST ===
    m = f.message_type.add(name="UseItemXpBoostMessage")
    _add_field(m, "item_id", 1, _F.TYPE_ENUM, "ItemId")

    m = f.message_type.add(name="UseItemXpBoostResponse")
    _add_enum(
        m,
        "Result",
        [
            ("UNSET", 0),
            ("SUCCESS", 1),
            ("ERROR_INVALID_ITEM_TYPE", 2),
            ("ERROR_XP_BOOST_ALREADY_ACTIVE", 3),
            ("ERROR_NO_ITEMS_REMAINING", 4),
            ("ERROR_LOCATION_UNSET", 5),
        ],
    )
    _add_field(m, "result", 1, _F.TYPE_ENUM, "UseItemXpBoostResponse.Result")
    _add_field(
        m, "applied_items", 2, _F.TYPE_MESSAGE, "AppliedItem", repeated=True
    )

    # === Envelope ===
    m = f.message_type.add(name="Request")
    _add_field(m, "request_type", 1, _F.TYPE_ENUM, "RequestType")
    _add_field(m, "request_message", 2, _F.TYPE_BYTES)

    m = f.message_type.add(name="RequestEnvelope")
    _add_field(m, "request_id", 1, _F.TYPE_UINT64)
    _add_field(m, "auth_token", 2, _F.TYPE_STRING)
    _add_field(m, "requests", 3, _F.TYPE_MESSAGE, "Request", repeated=True)

    m = f.message_type.add(name="ResponseEnvelope")
    _add_field(m, "status_code", 1, _F.TYPE_INT32)
    _add_field(m, "request_id", 2, _F.TYPE_UINT64)
    _add_field(m, "returns", 3, _F.TYPE_BYTES, repeated=True)

    return f


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file().SerializeToString())
DESCRIPTOR = _pool.FindFileByName(PROTO_FILE)


def _message_class(name: str):
    return message_factory.GetMessageClass(DESCRIPTOR.message_types_by_name[name])


ItemId = EnumTypeWrapper(DESCRIPTOR.enum_types_by_name["ItemId"])
RequestType = EnumTypeWrapper(DESCRIPTOR.enum_types_by_name["RequestType"])

ItemData = _message_class("ItemData")
AppliedItem = _message_class("AppliedItem")
GetInventoryMessage = _message_class("GetInventoryMessage")
GetInventoryResponse = _message_class("GetInventoryResponse")
RecycleInventoryItemMessage = _message_class("RecycleInventoryItemMessage")
RecycleInventoryItemResponse = _message_class("RecycleInventoryItemResponse")
UseIncenseMessage = _message_class("UseIncenseMessage")
UseIncenseResponse = _message_class("UseIncenseResponse")
UseItemXpBoostMessage = _message_class("UseItemXpBoostMessage")
UseItemXpBoostResponse = _message_class("UseItemXpBoostResponse")
Request = _message_class("Request")
RequestEnvelope = _message_class("RequestEnvelope")
ResponseEnvelope = _message_class("ResponseEnvelope")

# 응답 상태 코드 (ResponseEnvelope.status_code)
STATUS_OK = 1
STATUS_OK_RPC_URL_IN_RESPONSE = 2
STATUS_BAD_REQUEST = 3
STATUS_INVALID_AUTH_TOKEN = 102


def _nested_enum(message_name: str, enum_name: str = "Result") -> EnumTypeWrapper:
    return EnumTypeWrapper(
        DESCRIPTOR.message_types_by_name[message_name].enum_types_by_name[enum_name]
    )


RecycleResult = _nested_enum("RecycleInventoryItemResponse")
UseIncenseResult = _nested_enum("UseIncenseResponse")
UseXpBoostResult = _nested_enum("UseItemXpBoostResponse")


def enum_name(enum_wrapper: EnumTypeWrapper, value: int) -> str:
    """Enum value name, or the raw number for undeclared values."""
    try:
        return enum_wrapper.Name(value)
    except ValueError:
        return str(value)
