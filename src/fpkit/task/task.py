"""Task - a deferred asynchronous computation."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Task(Generic[A]):
    """A recipe for an asynchronous computation.

    Wraps a zero-argument producer returning an awaitable. Nothing starts
    until ``run()`` is called, and every call is an independent execution:
    results are never cached.
    """

    _run: Callable[[], Awaitable[A]]

    def run(self) -> Awaitable[A]:
        """Invoke the producer and return its awaitable."""
        return self._run()

    def map(self, f: Callable[[A], B]) -> Task[B]:
        async def new_run() -> B:
            return f(await self.run())

        return Task(new_run)

    def ap(self, fab: Task[Callable[[A], B]]) -> Task[B]:
        """Apply the function produced by ``fab`` to this task's value.

        Both producers are started before either is awaited. The first
        rejection wins; the sibling keeps running and its outcome is dropped.
        """
        async def new_run() -> B:
            f, a = await asyncio.gather(fab.run(), self.run())
            return f(a)

        return Task(new_run)

    def ap_(self: Task[Callable[[B], C]], fb: Task[B]) -> Task[C]:
        """Flipped ``ap``: this task produces the function."""
        return fb.ap(self)

    def chain(self, f: Callable[[A], Task[B]]) -> Task[B]:
        """Run this task, then the task ``f`` builds from its value."""
        async def new_run() -> B:
            a = await self.run()
            return await f(a).run()

        return Task(new_run)

    def __repr__(self) -> str:
        return f"Task({_describe(self._run)})"


def _describe(fn: Any) -> str:
    name = getattr(fn, "__qualname__", None)
    return name if name is not None else repr(fn)
