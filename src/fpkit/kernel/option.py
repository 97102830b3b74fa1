"""Optional values: Some(value) or Nothing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpkit.errors import UnwrapError

A = TypeVar("A")
B = TypeVar("B")


class Option(Generic[A]):
    """An optional value.

    Kinds:
    - Some: holds a value (which may itself be None)
    - Nothing: holds no value; a single shared instance, ``nothing``
    """

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return not self.is_some()

    def fold(self, on_none: B, on_some: Callable[[A], B]) -> B:
        if isinstance(self, Some):
            return on_some(self.value)
        return on_none

    def fold_l(self, on_none: Callable[[], B], on_some: Callable[[A], B]) -> B:
        """Lazy version of ``fold``."""
        if isinstance(self, Some):
            return on_some(self.value)
        return on_none()

    def map(self, f: Callable[[A], B]) -> Option[B]:
        if isinstance(self, Some):
            return Some(f(self.value))
        return nothing

    def chain(self, f: Callable[[A], Option[B]]) -> Option[B]:
        if isinstance(self, Some):
            return f(self.value)
        return nothing

    def get_or_else(self, default: A) -> A:
        if isinstance(self, Some):
            return self.value
        return default

    def unwrap(self) -> A:
        if isinstance(self, Some):
            return self.value
        raise UnwrapError("Option is empty.")


@dataclass(frozen=True)
class Some(Option[A]):
    value: A


class Nothing(Option[Any]):
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "nothing"


nothing: Option[Any] = Nothing()


def some(value: A) -> Option[A]:
    return Some(value)


def from_nullable(value: A | None) -> Option[A]:
    """Wrap a value, treating None as absent."""
    return nothing if value is None else Some(value)
