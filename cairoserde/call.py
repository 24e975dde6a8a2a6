"""Read-only contract calls whose answer is decoded into a typed value."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, Union

from .core import CairoSerde, to_felt
from .errors import ProviderError


class BlockTag(enum.Enum):
    """A block named by its position rather than its number or hash."""

    LATEST = "latest"
    PENDING = "pending"


BlockId = Union[BlockTag, int, str]


@dataclass(frozen=True)
class FunctionCall:
    """The target, selector and arguments of a contract call."""

    contract_address: int
    entry_point_selector: int
    calldata: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "contract_address", to_felt(self.contract_address))
        object.__setattr__(self, "entry_point_selector", to_felt(self.entry_point_selector))
        object.__setattr__(self, "calldata", tuple(to_felt(item) for item in self.calldata))


class Provider(Protocol):
    """Anything able to run a call against a node."""

    async def call(self, request: FunctionCall, block_id: BlockId) -> Iterable[int]: ...


class FCall:
    """A prepared call whose result is decoded with ``return_type``.

    Calls target the pending block unless another one is chosen with
    :meth:`with_block_id`.
    """

    def __init__(self, call_raw: FunctionCall, provider: Provider, return_type: CairoSerde) -> None:
        self.call_raw = call_raw
        self.provider = provider
        self.return_type = return_type
        self.block_id: BlockId = BlockTag.PENDING

    def __repr__(self) -> str:
        return (
            f"FCall({self.call_raw!r}, block_id={self.block_id!r}, "
            f"return_type={self.return_type!r})"
        )

    def with_block_id(self, block_id: BlockId) -> FCall:
        """Return a copy of this call aimed at ``block_id``."""
        copy = FCall(self.call_raw, self.provider, self.return_type)
        copy.block_id = block_id
        return copy

    async def raw_call(self) -> list[int]:
        """Run the call and return the felts the node answered with."""
        try:
            result = await self.provider.call(self.call_raw, self.block_id)
        except ProviderError:
            raise
        except Exception as exc:
            raise ProviderError(exc) from exc
        return [int(felt) for felt in result]

    async def call(self) -> Any:
        """Run the call and decode its answer from offset 0."""
        felts = await self.raw_call()
        return self.return_type.deserialize(felts, 0)