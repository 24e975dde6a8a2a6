"""Reading and writing integers as hexadecimal or decimal strings."""

from __future__ import annotations

import operator
import re
from collections.abc import Callable, Iterable, Sequence
from typing import Any

_HEX_DIGITS = re.compile(r"\+?[0-9a-fA-F]+")
_DEC_DIGITS = re.compile(r"\+?[0-9]+")
_SUPPORTED_BITS = (64, 128)


def _parse_unsigned(digits: str, base: int, bits: int) -> int:
    pattern = _HEX_DIGITS if base == 16 else _DEC_DIGITS
    if not pattern.fullmatch(digits):
        raise ValueError(f"invalid digit found in {digits!r}")
    number = int(digits, base)
    if number >> bits:
        raise ValueError(f"number too large to fit in {bits} bits: {digits!r}")
    return number


def from_str_hex_or_dec(text: str, bits: int = 64, signed: bool = False) -> int:
    """Parse ``text`` as hexadecimal if prefixed by ``0x``, decimal otherwise.

    The digits are read as an unsigned integer of ``bits`` bits. A signed
    result reinterprets those bits as two's complement.
    """
    if bits not in _SUPPORTED_BITS:
        raise ValueError(f"unsupported integer width: {bits}")
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    if text[:2] in ("0x", "0X"):
        number = _parse_unsigned(text[2:], 16, bits)
    else:
        number = _parse_unsigned(text, 10, bits)
    if signed and number >> (bits - 1):
        number -= 1 << bits
    return number


def serialize_as_hex(value: Any) -> str:
    """Format a non-negative integer as ``0x`` followed by lower-case digits."""
    number = operator.index(value)
    if number < 0:
        raise ValueError(f"cannot format a negative value as hex: {number}")
    return f"{number:#x}"


def serialize_as_hex_seq(values: Iterable[Any]) -> list[str]:
    """Format every value of ``values`` as a hex string."""
    return [serialize_as_hex(value) for value in values]


def deserialize_from_hex(text: str, bits: int = 64, signed: bool = False) -> int:
    """Read one integer from a hex or decimal string."""
    return from_str_hex_or_dec(text, bits, signed)


def deserialize_from_hex_seq(
    texts: Iterable[str], bits: int = 64, signed: bool = False
) -> list[int]:
    """Read a list of integers from hex or decimal strings."""
    return [from_str_hex_or_dec(text, bits, signed) for text in texts]


def _strip_hex_prefix(text: str) -> str:
    while text.startswith("0x"):
        text = text[2:]
    return text


def _parse_with_fallback(text: str, parser: Callable[[str], Any]) -> Any:
    try:
        return parser(text)
    except ValueError:
        pass
    digits = _strip_hex_prefix(text)
    try:
        decimal = str(_parse_unsigned(digits, 16, 128))
    except ValueError:
        decimal = digits
    return parser(decimal)


def deserialize_from_hex_tuple(
    texts: Sequence[str], parsers: Sequence[Callable[[str], Any]]
) -> tuple[Any, ...]:
    """Read a tuple, one string per parser.

    Each string goes to its parser as it is; if that fails, its ``0x``
    prefixes are dropped, the digits are read as a 128-bit hex number when
    possible, and the parser is tried again on the decimal form.
    """
    if len(texts) != len(parsers):
        raise ValueError(f"expected {len(parsers)} strings, got {len(texts)}")
    return tuple(_parse_with_fallback(text, parser) for text, parser in zip(texts, parsers))