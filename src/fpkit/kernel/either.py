"""Disjoint union: Left(value) for failures, Right(value) for successes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from fpkit.errors import UnwrapError

L = TypeVar("L")
A = TypeVar("A")
B = TypeVar("B")


class Either(Generic[L, A]):
    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def fold(self, on_left: Callable[[L], B], on_right: Callable[[A], B]) -> B:
        """Dispatch on whichever branch is populated."""
        if isinstance(self, Left):
            return on_left(self.value)
        return on_right(self.value)  # type: ignore[attr-defined]

    def map(self, f: Callable[[A], B]) -> Either[L, B]:
        if isinstance(self, Right):
            return Right(f(self.value))
        return self  # type: ignore[return-value]

    def chain(self, f: Callable[[A], Either[L, B]]) -> Either[L, B]:
        if isinstance(self, Right):
            return f(self.value)
        return self  # type: ignore[return-value]

    def get_or_else(self, default: A) -> A:
        if isinstance(self, Right):
            return self.value
        return default

    def unwrap(self) -> A:
        if isinstance(self, Right):
            return self.value
        raise UnwrapError("Either is Left.", self.value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[L, A]):
    value: L


@dataclass(frozen=True)
class Right(Either[L, A]):
    value: A


def left(value: L) -> Either[L, A]:
    return Left(value)


def right(value: A) -> Either[L, A]:
    return Right(value)
