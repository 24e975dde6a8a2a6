"""Exceptions raised while converting values to and from field elements."""

from __future__ import annotations


class CairoSerdeError(Exception):
    """Base class of every error raised by this package."""


class InvalidTypeStringError(CairoSerdeError):
    """A type description could not be understood."""

    def __init__(self, type_string: str) -> None:
        self.type_string = type_string
        super().__init__(f"Invalid type found {type_string!r}.")


class SerializeError(CairoSerdeError):
    """A value could not be turned into field elements."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Error during serialization {message!r}.")


class DeserializeError(CairoSerdeError):
    """Field elements could not be turned back into a value."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Error during deserialization {message!r}.")


class ProviderError(CairoSerdeError):
    """The node provider failed to answer a call."""

    def __init__(self, cause: object) -> None:
        self.cause = cause
        super().__init__(f"Provider error {cause!r}.")


class Bytes31OutOfRangeError(CairoSerdeError):
    """A felt does not fit into 31 bytes."""

    def __init__(self) -> None:
        super().__init__("Bytes31 out of range.")


class ZeroedNonZeroError(CairoSerdeError):
    """A value declared as non-zero turned out to be zero."""

    def __init__(self) -> None:
        super().__init__("NonZero that is zero")