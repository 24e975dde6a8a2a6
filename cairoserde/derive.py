"""Serializers for user-defined structs and enums built from field serializers.

A struct is serialized as its fields one after another. An enum is
serialized as the index of its variant followed by the fields of that
variant. Neither has a size known in advance.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, ClassVar, Union

from .core import CairoSerde
from .errors import DeserializeError, SerializeError

FieldSpecs = Union[Mapping[str, CairoSerde], Iterable[tuple[str, CairoSerde]]]


def _normalize_fields(fields: FieldSpecs) -> tuple[tuple[str, CairoSerde], ...]:
    items = fields.items() if isinstance(fields, Mapping) else fields
    normalized = []
    for name, serde in items:
        if not isinstance(serde, CairoSerde):
            raise TypeError(f"field {name!r} needs a CairoSerde, got {serde!r}")
        normalized.append((str(name), serde))
    names = [name for name, _ in normalized]
    if len(set(names)) != len(names):
        raise ValueError(f"duplicate field names in {names!r}")
    return tuple(normalized)


class StructSerde(CairoSerde):
    """A struct whose fields are serialized in the order they are given.

    ``cls`` is called with every field as a keyword argument to build the
    value back; fields are read from a value with ``getattr``.
    """

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, cls: type, fields: FieldSpecs = ()) -> None:
        self.cls = cls
        self.fields = _normalize_fields(fields)

    def __repr__(self) -> str:
        return f"StructSerde({self.cls.__name__}, {list(self.fields)!r})"

    def _check(self, value: Any) -> None:
        if not isinstance(value, self.cls):
            raise SerializeError(f"expected a {self.cls.__name__}, got {value!r}")

    def serialized_size(self, value: Any) -> int:
        self._check(value)
        return sum(serde.serialized_size(getattr(value, name)) for name, serde in self.fields)

    def serialize(self, value: Any) -> list[int]:
        self._check(value)
        return [
            felt
            for name, serde in self.fields
            for felt in serde.serialize(getattr(value, name))
        ]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Any:
        values: dict[str, Any] = {}
        for name, serde in self.fields:
            item = serde.deserialize(felts, offset)
            offset += serde.serialized_size(item)
            values[name] = item
        return self.cls(**values)


VariantSpec = Union[StructSerde, type, tuple[type, FieldSpecs]]


def _normalize_variant(spec: VariantSpec) -> StructSerde:
    if isinstance(spec, StructSerde):
        return spec
    if isinstance(spec, type):
        return StructSerde(spec)
    cls, fields = spec
    return StructSerde(cls, fields)


class EnumSerde(CairoSerde):
    """An enum: the variant index, then the fields of that variant.

    Each variant is a :class:`StructSerde`, a ``(cls, fields)`` pair, or a
    bare class for a variant without fields. Variants are numbered by their
    position, starting at 0.
    """

    SERIALIZED_SIZE: ClassVar[int | None] = None

    def __init__(self, variants: Iterable[VariantSpec]) -> None:
        self.variants = tuple(_normalize_variant(spec) for spec in variants)
        if not self.variants:
            raise ValueError("an enum needs at least one variant")

    def __repr__(self) -> str:
        names = ", ".join(variant.cls.__name__ for variant in self.variants)
        return f"EnumSerde([{names}])"

    def _variant_of(self, value: Any) -> tuple[int, StructSerde]:
        for index, variant in enumerate(self.variants):
            if type(value) is variant.cls:
                return index, variant
        for index, variant in enumerate(self.variants):
            if isinstance(value, variant.cls):
                return index, variant
        raise SerializeError(f"{value!r} is not a variant of this enum")

    def serialized_size(self, value: Any) -> int:
        _, variant = self._variant_of(value)
        return 1 + variant.serialized_size(value)

    def serialize(self, value: Any) -> list[int]:
        index, variant = self._variant_of(value)
        return [index, *variant.serialize(value)]

    def deserialize(self, felts: Sequence[int], offset: int = 0) -> Any:
        self._check_bounds(felts, offset, "an enum")
        index = int(felts[offset])
        if not 0 <= index < len(self.variants):
            raise DeserializeError("Invalid variant Id")
        return self.variants[index].deserialize(felts, offset + 1)