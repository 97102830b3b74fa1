"""Small function helpers shared by the instances."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")

Lazy = Callable[[], A]
Predicate = Callable[[A], bool]
Endomorphism = Callable[[A], A]


def identity(a: A) -> A:
    return a


def tuple_(a: A, b: B) -> tuple[A, B]:
    return (a, b)


def concat(x: list[A], y: list[A]) -> list[A]:
    """Concatenate two lists into a new list."""
    return [*x, *y]
