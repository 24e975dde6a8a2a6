from __future__ import annotations

from dataclasses import dataclass

import pytest

from cairoserde.containers import ArraySerde, OptionSerde
from cairoserde.derive import EnumSerde, StructSerde
from cairoserde.errors import DeserializeError, SerializeError
from cairoserde.primitives import FELT, U32, U64


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Bag:
    owner: int
    items: list
    tag: object


@dataclass
class Empty:
    pass


@dataclass
class Single:
    value: int


@dataclass
class Pair:
    a: int
    b: list


@dataclass
class Holder:
    kind: object
    count: int


POINT = StructSerde(Point, [("x", U32), ("y", U32)])
BAG = StructSerde(Bag, {"owner": FELT, "items": ArraySerde(U64), "tag": OptionSerde(U32)})
SHAPE = EnumSerde([Empty, (Single, [("value", U32)]), (Pair, [("a", FELT), ("b", ArraySerde(U32))])])


def test_struct_serialize_fields_in_order():
    assert POINT.serialize(Point(1, 2)) == [1, 2]


def test_struct_deserialize_at_offset():
    assert POINT.deserialize([9, 4, 7], 1) == Point(4, 7)


def test_struct_is_dynamic():
    assert POINT.SERIALIZED_SIZE is None
    assert POINT.is_dynamic() is True


def test_struct_with_dynamic_fields_round_trip():
    bag = Bag(owner=5, items=[1, 2, 3], tag=None)
    felts = BAG.serialize(bag)
    assert felts == [5, 3, 1, 2, 3, 1]
    assert BAG.serialized_size(bag) == len(felts)
    assert BAG.deserialize(felts, 0) == bag


def test_struct_rejects_wrong_type():
    with pytest.raises(SerializeError):
        POINT.serialize(Single(1))


def test_struct_short_buffer():
    with pytest.raises(DeserializeError):
        POINT.deserialize([1], 0)


def test_struct_duplicate_field_names():
    with pytest.raises(ValueError):
        StructSerde(Point, [("x", U32), ("x", U32)])


def test_enum_unit_variant():
    assert SHAPE.serialize(Empty()) == [0]
    assert SHAPE.deserialize([0], 0) == Empty()
    assert SHAPE.serialized_size(Empty()) == 1


def test_enum_variant_index_prefix():
    assert SHAPE.serialize(Single(5)) == [1, 5]
    assert SHAPE.deserialize([1, 5], 0) == Single(5)


@pytest.mark.parametrize("value", [Empty(), Single(7), Pair(3, []), Pair(11, [4, 5, 6])])
def test_enum_round_trip(value):
    felts = SHAPE.serialize(value)
    assert SHAPE.serialized_size(value) == len(felts)
    assert SHAPE.deserialize(felts, 0) == value


def test_enum_invalid_variant_id():
    with pytest.raises(DeserializeError, match="Invalid variant Id"):
        SHAPE.deserialize([3, 1], 0)


def test_enum_empty_buffer():
    with pytest.raises(DeserializeError):
        SHAPE.deserialize([], 0)


def test_enum_rejects_unknown_value():
    with pytest.raises(SerializeError):
        SHAPE.serialize(Point(1, 2))


def test_enum_nested_in_struct():
    holder_serde = StructSerde(Holder, [("kind", SHAPE), ("count", U32)])
    holder = Holder(kind=Pair(1, [2]), count=9)
    felts = holder_serde.serialize(holder)
    assert felts == [2, 1, 1, 2, 9]
    assert holder_serde.deserialize([0, *felts], 1) == holder