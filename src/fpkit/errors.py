"""Error types raised by fpkit itself."""

from __future__ import annotations


class FpkitError(Exception):
    """Base class for errors raised by the library."""


class UnwrapError(FpkitError):
    """Error raised when extracting a value from an empty container.

    Preserves the value that blocked extraction (the left value of an
    Either, or None for an empty Option).
    """

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"UnwrapError({super().__repr__()}, value={self.value!r})"
