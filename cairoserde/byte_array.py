"""Strings stored as Cairo ``ByteArray`` values.

A ``ByteArray`` packs the UTF-8 bytes of a string into felts of 31 bytes
each. The trailing bytes that do not fill a whole word are kept in
``pending_word``, with their count in ``pending_word_len``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .containers import ArraySerde
from .core import CairoSerde, to_felt
from .errors import Bytes31OutOfRangeError, SerializeError
from .primitives import FELT, U32

MAX_WORD_LEN = 31
BYTES31_MAX = (1 << (8 * MAX_WORD_LEN)) - 1


@dataclass(frozen=True, order=True)
class Bytes31:
    """A felt that holds at most 31 bytes."""

    felt: int = 0

    def __post_init__(self) -> None:
        value = to_felt(self.felt)
        if value > BYTES31_MAX:
            raise Bytes31OutOfRangeError()
        object.__setattr__(self, "felt", value)

    @classmethod
    def new(cls, felt: Any) -> Bytes31:
        """Wrap ``felt``, raising :class:`Bytes31OutOfRangeError` if it is too large."""
        return cls(felt)

    def __int__(self) -> int:
        return self.felt


def _felt_to_utf8(felt: int, length: int) -> str:
    if not 0 <= length <= MAX_WORD_LEN:
        raise ValueError(f"a word holds at most {MAX_WORD_LEN} bytes, got {length}")
    # The first byte of a word is always zero, so the payload starts at 1.
    raw = felt.to_bytes(32, "big")[1 + MAX_WORD_LEN - length :]
    return raw.decode("utf-8")


@dataclass(order=True)
class ByteArray:
    """A string split into full 31-byte words and one pending word."""

    data: list[Bytes31] = field(default_factory=list)
    pending_word: int = 0
    pending_word_len: int = 0

    @classmethod
    def from_string(cls, text: str) -> ByteArray:
        """Pack the UTF-8 encoding of ``text``."""
        raw = text.encode("utf-8")
        split = len(raw) - len(raw) % MAX_WORD_LEN
        data = [
            Bytes31.new(int.from_bytes(raw[start : start + MAX_WORD_LEN], "big"))
            for start in range(0, split, MAX_WORD_LEN)
        ]
        remainder = raw[split:]
        return cls(
            data=data,
            pending_word=int.from_bytes(remainder, "big") if remainder else 0,
            pending_word_len=len(remainder),
        )

    def to_string(self) -> str:
        """Decode the words back into a string.

        Each word is decoded on its own; ``UnicodeDecodeError`` is raised when
        one of them is not valid UTF-8.
        """
        parts = [_felt_to_utf8(word.felt, MAX_WORD_LEN) for word in self.data]
        if self.pending_word_len > 0:
            parts.append(_felt_to_utf8(self.pending_word, self.pending_word_len))
        return "".join(parts)


class Bytes31Serde(CairoSerde):
    """A :class:`Bytes31` as its single felt."""

    def serialize(self, value: Bytes31) -> list[int]:
        if not isinstance(value, Bytes31):
            raise SerializeError(f"expected a Bytes31, got {value!r}")
        return [value.felt]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Bytes31:
        self._check_bounds(felts, offset, "a Bytes31")
        return Bytes31.new(int(felts[offset]))


BYTES31 = Bytes31Serde()
_BYTES31_ARRAY = ArraySerde(BYTES31)


class ByteArraySerde(CairoSerde):
    """A :class:`ByteArray`: the word array, the pending word and its length."""

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def serialized_size(self, value: ByteArray) -> int:
        return (
            _BYTES31_ARRAY.serialized_size(value.data)
            + FELT.serialized_size(value.pending_word)
            + U32.serialized_size(value.pending_word_len)
        )

    def serialize(self, value: ByteArray) -> list[int]:
        if not isinstance(value, ByteArray):
            raise SerializeError(f"expected a ByteArray, got {value!r}")
        return [
            *_BYTES31_ARRAY.serialize(value.data),
            *FELT.serialize(value.pending_word),
            *U32.serialize(value.pending_word_len),
        ]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> ByteArray:
        data = _BYTES31_ARRAY.deserialize(felts, offset)
        offset += _BYTES31_ARRAY.serialized_size(data)
        pending_word = FELT.deserialize(felts, offset)
        offset += FELT.serialized_size(pending_word)
        pending_word_len = U32.deserialize(felts, offset)
        return ByteArray(data, pending_word, pending_word_len)


BYTE_ARRAY = ByteArraySerde()