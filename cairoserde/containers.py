"""Serializers for arrays, legacy arrays, options and results."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, TypeVar

from .core import CairoSerde
from .errors import DeserializeError, SerializeError

T = TypeVar("T")
E = TypeVar("E")

_USIZE_MAX = (1 << 64) - 1


class ArraySerde(CairoSerde):
    """A Cairo ``Array`` or ``Span``: the length first, then every item."""

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, item: CairoSerde) -> None:
        self.item = item

    def __repr__(self) -> str:
        return f"ArraySerde({self.item!r})"

    def serialized_size(self, value: Iterable[Any]) -> int:
        return 1 + sum(self.item.serialized_size(element) for element in value)

    def serialize(self, value: Iterable[Any]) -> list[int]:
        elements = list(value)
        out = [len(elements)]
        for element in elements:
            out.extend(self.item.serialize(element))
        return out

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> list[Any]:
        self._check_bounds(felts, offset, "an array")
        length = int(felts[offset])
        if length > _USIZE_MAX:
            raise DeserializeError("First felt of an array must fit into usize")
        if offset + length >= len(felts):
            raise DeserializeError(
                f"Buffer too short to deserialize an array of length {length}: "
                f"offset ({offset}) : buffer {list(felts)!r}"
            )
        out: list[Any] = []
        offset += 1
        while len(out) < length:
            element = self.item.deserialize(felts, offset)
            offset += self.item.serialized_size(element)
            out.append(element)
        return out


@dataclass(order=True)
class CairoArrayLegacy(Generic[T]):
    """An array of the legacy ABI, whose length is not part of its felts."""

    items: list[T] = field(default_factory=list)

    @classmethod
    def from_slice(cls, items: Iterable[T]) -> CairoArrayLegacy[T]:
        return cls(list(items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def is_empty(self) -> bool:
        return not self.items


class ArrayLegacySerde(CairoSerde):
    """Items of a legacy array; the length is the felt just before ``offset``."""

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, item: CairoSerde) -> None:
        self.item = item

    def __repr__(self) -> str:
        return f"ArrayLegacySerde({self.item!r})"

    def serialized_size(self, value: Iterable[Any]) -> int:
        return sum(self.item.serialized_size(element) for element in value)

    def serialize(self, value: Iterable[Any]) -> list[int]:
        return [felt for element in value for felt in self.item.serialize(element)]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> CairoArrayLegacy[Any]:
        if offset >= len(felts):
            # The length is not serialized with the items: nothing left means empty.
            return CairoArrayLegacy([])
        if offset <= 0:
            raise DeserializeError(
                "A legacy array needs its length in the felt before the offset"
            )
        length = int(felts[offset - 1])
        if offset + length > len(felts):
            raise DeserializeError(
                f"Buffer too short to deserialize an array of length {length}: "
                f"offset ({offset}) : buffer {list(felts)!r}"
            )
        out: list[Any] = []
        while len(out) < length:
            element = self.item.deserialize(felts, offset)
            offset += self.item.serialized_size(element)
            out.append(element)
        return CairoArrayLegacy(out)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The success variant of a Cairo ``Result``."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """The failure variant of a Cairo ``Result``."""

    value: E


class OptionSerde(CairoSerde):
    """A Cairo ``Option``: index 0 then the value for some, index 1 for none.

    ``None`` stands for the absent value. A present value that is itself
    ``None`` (the unit type) is given and read back as ``()``.
    """

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, inner: CairoSerde) -> None:
        self.inner = inner

    def __repr__(self) -> str:
        return f"OptionSerde({self.inner!r})"

    def serialized_size(self, value: Any) -> int:
        if value is None:
            return 1
        return 1 + self.inner.serialized_size(value)

    def serialize(self, value: Any) -> list[int]:
        if value is None:
            return [1]
        return [0, *self.inner.serialize(value)]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Any:
        self._check_bounds(felts, offset, "an Option")
        index = int(felts[offset])
        if index == 0:
            value = self.inner.deserialize(felts, offset + 1)
            return () if value is None else value
        if index == 1:
            return None
        raise DeserializeError("Option is expected 0 or 1 index only")


class ResultSerde(CairoSerde):
    """A Cairo ``Result``: index 0 for :class:`Ok`, 1 for :class:`Err`."""

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, ok: CairoSerde, err: CairoSerde) -> None:
        self.ok = ok
        self.err = err

    def __repr__(self) -> str:
        return f"ResultSerde({self.ok!r}, {self.err!r})"

    def serialized_size(self, value: Ok[Any] | Err[Any]) -> int:
        if isinstance(value, Ok):
            return 1 + self.ok.serialized_size(value.value)
        if isinstance(value, Err):
            return 1 + self.err.serialized_size(value.value)
        raise SerializeError(f"expected Ok or Err, got {value!r}")

    def serialize(self, value: Ok[Any] | Err[Any]) -> list[int]:
        if isinstance(value, Ok):
            return [0, *self.ok.serialize(value.value)]
        if isinstance(value, Err):
            return [1, *self.err.serialize(value.value)]
        raise SerializeError(f"expected Ok or Err, got {value!r}")

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Ok[Any] | Err[Any]:
        self._check_bounds(felts, offset, "a Result")
        index = int(felts[offset])
        if index == 0:
            return Ok(self.ok.deserialize(felts, offset + 1))
        if index == 1:
            return Err(self.err.deserialize(felts, offset + 1))
        raise DeserializeError("Result is expected 0 or 1 index only")