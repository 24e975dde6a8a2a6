"""The ``NonZero`` wrapper, serialized exactly as the value it holds."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .core import CairoSerde
from .errors import SerializeError, ZeroedNonZeroError
from .starknet import ContractAddress
from .u256 import U256

T = TypeVar("T")


def is_zero(value: Any) -> bool:
    """Whether ``value`` is the zero of its type.

    Integers, felts, :class:`U256` and :class:`ContractAddress` can be zero;
    other types raise ``TypeError``.
    """
    if isinstance(value, bool):
        raise TypeError("bool values cannot be wrapped in NonZero")
    if isinstance(value, int):
        return value == 0
    if isinstance(value, U256):
        return value.low == 0 and value.high == 0
    if isinstance(value, ContractAddress):
        return value.felt == 0
    raise TypeError(f"{type(value).__name__} values cannot be wrapped in NonZero")


@dataclass(frozen=True, order=True)
class NonZero(Generic[T]):
    """A value that is guaranteed not to be zero."""

    value: T

    def __post_init__(self) -> None:
        if is_zero(self.value):
            raise ZeroedNonZeroError()

    @classmethod
    def new(cls, value: T) -> NonZero[T] | None:
        """Wrap ``value``, or return ``None`` if it is zero."""
        if is_zero(value):
            return None
        return cls(value)


class NonZeroSerde(CairoSerde):
    """Serializes a :class:`NonZero` with no overhead over its inner type."""

    def __init__(self, inner: CairoSerde) -> None:
        self.inner = inner

    def __repr__(self) -> str:
        return f"NonZeroSerde({self.inner!r})"

    @property  # type: ignore[override]
    def SERIALIZED_SIZE(self) -> int | None:  # noqa: N802
        return self.inner.SERIALIZED_SIZE

    def is_dynamic(self) -> bool:
        return self.inner.is_dynamic()

    def serialized_size(self, value: NonZero[Any]) -> int:
        return self.inner.serialized_size(_unwrap(value))

    def serialize(self, value: NonZero[Any]) -> list[int]:
        return self.inner.serialize(_unwrap(value))

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> NonZero[Any]:
        inner = self.inner.deserialize(felts, offset)
        wrapped = NonZero.new(inner)
        if wrapped is None:
            raise ZeroedNonZeroError()
        return wrapped


def _unwrap(value: Any) -> Any:
    if not isinstance(value, NonZero):
        raise SerializeError(f"expected a NonZero, got {value!r}")
    return value.value