"""Serializers for felts, booleans, integers, the unit type and tuples."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from .core import CairoSerde, to_felt
from .errors import SerializeError

_LOW_128_MASK = (1 << 128) - 1
_USIZE_MASK = (1 << 64) - 1
_SUPPORTED_BITS = (8, 16, 32, 64, 128)


class FeltSerde(CairoSerde):
    """A single field element."""

    def serialize(self, value: Any) -> list[int]:
        return [to_felt(value)]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> int:
        self._check_bounds(felts, offset, "a felt")
        return int(felts[offset])


class BoolSerde(CairoSerde):
    """A boolean stored as 0 or 1; any felt other than 1 reads as false."""

    def serialize(self, value: Any) -> list[int]:
        return [1 if value else 0]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> bool:
        self._check_bounds(felts, offset, "a boolean")
        return int(felts[offset]) == 1


@dataclass(frozen=True)
class IntegerSerde(CairoSerde):
    """A fixed-width integer stored in one felt.

    Signed values are written as their 64-bit unsigned image; reading keeps
    the low 128 bits of the felt and truncates them to the integer width.
    """

    bits: int
    signed: bool = False

    def __post_init__(self) -> None:
        if self.bits not in _SUPPORTED_BITS:
            raise ValueError(f"unsupported integer width: {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def _name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    def serialize(self, value: Any) -> list[int]:
        try:
            number = operator.index(value)
        except TypeError as exc:
            raise SerializeError(f"{value!r} is not an integer") from exc
        if not self.min_value <= number <= self.max_value:
            raise SerializeError(f"{number} is out of range for {self._name}")
        if self.signed:
            return [number & _USIZE_MASK]
        return [number]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> int:
        kind = "a signed integer" if self.signed else "a unsigned integer"
        self._check_bounds(felts, offset, kind)
        raw = int(felts[offset]) & _LOW_128_MASK & ((1 << self.bits) - 1)
        if self.signed and raw >= 1 << (self.bits - 1):
            raw -= 1 << self.bits
        return raw


class UnitSerde(CairoSerde):
    """The unit type: takes no felts and reads back as ``None``."""

    SERIALIZED_SIZE: ClassVar[int | None] = 0

    def serialized_size(self, value: Any) -> int:
        return 0

    def serialize(self, value: Any) -> list[int]:
        return []

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> None:
        return None


class TupleSerde(CairoSerde):
    """A tuple whose members are serialized one after another."""

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, *args: CairoSerde) -> None:
        self.items: tuple[CairoSerde, ...] = args

    def __repr__(self) -> str:
        return f"TupleSerde({', '.join(map(repr, self.items))})"

    def _check_arity(self, value: Sequence[Any]) -> None:
        if len(value) != len(self.items):
            raise SerializeError(
                f"expected a tuple of {len(self.items)} items, got {len(value)}"
            )

    def serialized_size(self, value: Sequence[Any]) -> int:
        self._check_arity(value)
        return sum(serde.serialized_size(item) for serde, item in zip(self.items, value))

    def serialize(self, value: Sequence[Any]) -> list[int]:
        self._check_arity(value)
        return [
            felt
            for serde, item in zip(self.items, value)
            for felt in serde.serialize(item)
        ]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> tuple[Any, ...]:
        values = []
        for serde in self.items:
            item = serde.deserialize(felts, offset)
            offset += serde.serialized_size(item)
            values.append(item)
        return tuple(values)


FELT = FeltSerde()
BOOL = BoolSerde()
UNIT = UnitSerde()
U8 = IntegerSerde(8)
U16 = IntegerSerde(16)
U32 = IntegerSerde(32)
U64 = IntegerSerde(64)
U128 = IntegerSerde(128)
USIZE = IntegerSerde(64)
I8 = IntegerSerde(8, True)
I16 = IntegerSerde(16, True)
I32 = IntegerSerde(32, True)
I64 = IntegerSerde(64, True)
I128 = IntegerSerde(128, True)
ISIZE = IntegerSerde(64, True)