"""The serialization protocol shared by every Cairo type."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from .errors import DeserializeError

FIELD_PRIME = 2**251 + 17 * 2**192 + 1


def to_felt(value: Any) -> int:
    """Return ``value`` as a field element, an int in ``[0, FIELD_PRIME)``.

    Integers are reduced modulo the field prime; strings are read as
    hexadecimal when prefixed by ``0x`` and as decimal otherwise.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            if text[:2] in ("0x", "0X"):
                number = int(text[2:], 16)
            else:
                number = int(text, 10)
        except ValueError as exc:
            raise ValueError(f"invalid felt literal: {value!r}") from exc
    else:
        try:
            number = operator.index(value)
        except TypeError as exc:
            raise TypeError(f"cannot convert {type(value).__name__} to a felt") from exc
    return number % FIELD_PRIME


class CairoSerde(ABC):
    """Converts values of one Cairo type to and from a sequence of felts.

    ``SERIALIZED_SIZE`` is the number of felts a value always takes, or
    ``None`` when the size depends on the value.
    """

    SERIALIZED_SIZE: ClassVar[int | None] = 1

    def is_dynamic(self) -> bool:
        """Whether the serialized size depends on the value."""
        return self.SERIALIZED_SIZE is None

    def serialized_size(self, value: Any) -> int:
        """Number of felts ``value`` takes once serialized."""
        if self.SERIALIZED_SIZE is None:
            raise TypeError(
                f"{type(self).__name__} has a dynamic size and must compute it from the value"
            )
        return self.SERIALIZED_SIZE

    @abstractmethod
    def serialize(self, value: Any) -> list[int]:
        """Turn ``value`` into a list of felts."""

    @abstractmethod
    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Any:
        """Read a value from ``felts`` starting at ``offset``."""

    def _check_bounds(self, felts: Sequence[int], offset: int, what: str) -> None:
        if not 0 <= offset < len(felts):
            raise DeserializeError(
                f"Buffer too short to deserialize {what}: "
                f"offset ({offset}) : buffer {list(felts)!r}"
            )