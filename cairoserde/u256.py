"""The 256-bit unsigned integer of Cairo, stored as two 128-bit halves."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar

from .core import CairoSerde, to_felt
from .errors import CairoSerdeError, SerializeError
from .primitives import U128

_BITS_128 = 128
_MASK_128 = (1 << _BITS_128) - 1
_DECIMAL = re.compile(r"[+-]?[0-9][0-9_]*")


class ValueOutOfRangeError(CairoSerdeError, ValueError):
    """A felt pair does not describe a valid 256-bit value."""

    def __init__(self) -> None:
        super().__init__("Value out of range")


@total_ordering
@dataclass(frozen=True)
class U256:
    """An unsigned 256-bit integer split into ``low`` and ``high`` halves."""

    low: int = 0
    high: int = 0

    def __post_init__(self) -> None:
        for name in ("low", "high"):
            half = getattr(self, name)
            if isinstance(half, bool) or not isinstance(half, int):
                raise TypeError(f"U256.{name} must be an int, got {half!r}")
            if not 0 <= half <= _MASK_128:
                raise ValueError(f"U256.{name} does not fit into 128 bits: {half}")

    def __int__(self) -> int:
        return (self.high << _BITS_128) | self.low

    def __add__(self, other: U256) -> U256:
        if not isinstance(other, U256):
            return NotImplemented
        low = self.low + other.low
        carry = low >> _BITS_128
        high = (self.high + carry + other.high) & _MASK_128
        return U256(low & _MASK_128, high)

    def __sub__(self, other: U256) -> U256:
        if not isinstance(other, U256):
            return NotImplemented
        if other.high > self.high:
            raise OverflowError("High underflow")
        high = self.high - other.high
        low = self.low - other.low
        if low < 0:
            if high == 0:
                raise OverflowError("High underflow")
            high -= 1
        return U256(low & _MASK_128, high)

    def __or__(self, other: U256) -> U256:
        if not isinstance(other, U256):
            return NotImplemented
        return U256(self.low | other.low, self.high | other.high)

    def __lt__(self, other: U256) -> bool:
        if not isinstance(other, U256):
            return NotImplemented
        return (self.high, self.low) < (other.high, other.low)

    def __str__(self) -> str:
        return str(int(self))

    @classmethod
    def from_str(cls, text: str) -> U256:
        """Parse a decimal string; bits beyond 256 are dropped."""
        if not _DECIMAL.fullmatch(text):
            raise ValueError(f"invalid decimal integer: {text!r}")
        number = int(text, 10)
        if number < 0:
            raise ValueError(f"U256 cannot be negative: {text!r}")
        return cls(number & _MASK_128, (number >> _BITS_128) & _MASK_128)

    @classmethod
    def from_felts(cls, low: Any, high: Any) -> U256:
        """Build a value from its two serialized felts, each below 2**128."""
        low_felt = to_felt(low)
        high_felt = to_felt(high)
        if low_felt > _MASK_128 or high_felt > _MASK_128:
            raise ValueOutOfRangeError()
        return cls(low_felt, high_felt)

    def to_bytes_be(self) -> bytes:
        return self.high.to_bytes(16, "big") + self.low.to_bytes(16, "big")

    def to_bytes_le(self) -> bytes:
        return self.low.to_bytes(16, "little") + self.high.to_bytes(16, "little")

    @classmethod
    def from_bytes_be(cls, data: bytes) -> U256:
        _check_length(data)
        return cls(
            low=int.from_bytes(data[16:32], "big"),
            high=int.from_bytes(data[0:16], "big"),
        )

    @classmethod
    def from_bytes_le(cls, data: bytes) -> U256:
        _check_length(data)
        return cls(
            low=int.from_bytes(data[0:16], "little"),
            high=int.from_bytes(data[16:32], "little"),
        )


def _check_length(data: bytes) -> None:
    if len(data) != 32:
        raise ValueError(f"expected 32 bytes, got {len(data)}")


class U256Serde(CairoSerde):
    """A U256 as two felts: the low half, then the high half."""

    SERIALIZED_SIZE: ClassVar[int | None] = 2

    def serialized_size(self, value: U256) -> int:
        return U128.serialized_size(value.low) + U128.serialized_size(value.high)

    def serialize(self, value: U256) -> list[int]:
        if not isinstance(value, U256):
            raise SerializeError(f"expected a U256, got {value!r}")
        return [*U128.serialize(value.low), *U128.serialize(value.high)]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> U256:
        low = U128.deserialize(felts, offset)
        high = U128.deserialize(felts, offset + U128.serialized_size(low))
        return U256(low, high)


U256_SERDE = U256Serde()