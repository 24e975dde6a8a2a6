"""Starknet types that are a single felt under the hood."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .core import CairoSerde, to_felt
from .errors import SerializeError
from .primitives import FELT


@dataclass(frozen=True, order=True)
class _FeltWrapper:
    felt: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "felt", to_felt(self.felt))

    def __int__(self) -> int:
        return self.felt


class ContractAddress(_FeltWrapper):
    """The address of a deployed contract."""


class ClassHash(_FeltWrapper):
    """The hash of a declared contract class."""


class EthAddress(_FeltWrapper):
    """An Ethereum address."""


W = TypeVar("W", bound=_FeltWrapper)


class FeltWrapperSerde(CairoSerde, Generic[W]):
    """Serializes one of the felt wrapper types as its single felt."""

    def __init__(self, wrapper: type[W]) -> None:
        self.wrapper = wrapper

    def __repr__(self) -> str:
        return f"FeltWrapperSerde({self.wrapper.__name__})"

    def serialize(self, value: Any) -> list[int]:
        if not isinstance(value, self.wrapper):
            raise SerializeError(
                f"expected a {self.wrapper.__name__}, got {value!r}"
            )
        return FELT.serialize(value.felt)

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> W:
        name = self.wrapper.__name__
        article = "an" if name[0] in "AEIOU" else "a"
        self._check_bounds(felts, offset, f"{article} {name}")
        return self.wrapper(FELT.deserialize(felts, offset))


CONTRACT_ADDRESS = FeltWrapperSerde(ContractAddress)
CLASS_HASH = FeltWrapperSerde(ClassHash)
ETH_ADDRESS = FeltWrapperSerde(EthAddress)