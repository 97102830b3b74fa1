"""Synchronous effects."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class IO(Generic[A]):
    """A synchronous computation run for its result or side effect.

    By convention the wrapped function does not raise.
    """

    _run: Callable[[], A]

    def run(self) -> A:
        return self._run()

    def map(self, f: Callable[[A], B]) -> IO[B]:
        return IO(lambda: f(self.run()))

    def chain(self, f: Callable[[A], IO[B]]) -> IO[B]:
        return IO(lambda: f(self.run()).run())

    def __repr__(self) -> str:
        return f"IO({self._run!r})"
