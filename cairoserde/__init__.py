"""Serialization of Python values to and from Cairo felt sequences."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "core",
    "primitives",
    "containers",
    "u256",
    "starknet",
    "non_zero",
    "byte_array",
    "serde_hex",
    "derive",
    "call",
]