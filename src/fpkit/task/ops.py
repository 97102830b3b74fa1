"""Task constructors, instances and algebraic combinators."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from fpkit.array.ops import traverse as array_traverse
from fpkit.kernel.algebra import Monad, Monoid, Semigroup
from fpkit.kernel.either import Either, Left, Right
from fpkit.kernel.function import Lazy, identity
from fpkit.kernel.io import IO
from fpkit.task.task import Task

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
L = TypeVar("L")

URI = "Task"


async def _resolved(value: A) -> A:
    return value


def of(value: A) -> Task[A]:
    """Create a Task that resolves immediately with ``value``."""
    return Task(lambda: _resolved(value))


def from_io(io: IO[A]) -> Task[A]:
    """Lift an IO action into a Task.

    The effect runs synchronously when the producer is invoked.
    """
    def produce() -> Awaitable[A]:
        return _resolved(io.run())

    return Task(produce)


def try_catch(f: Lazy[Awaitable[A]], on_rejected: Callable[[Exception], L]) -> Task[Either[L, A]]:
    """Convert a rejection of ``f`` into a Left value.

    Exceptions raised while calling ``f`` or while awaiting its result are
    both handled. Cancellation is not intercepted.
    """
    async def new_run() -> Either[L, A]:
        try:
            a = await f()
        except Exception as exc:
            logger.debug("try_catch: converting rejection %r into Left", exc)
            return Left(on_rejected(exc))
        return Right(a)

    return Task(new_run)


async def _never() -> Any:
    await asyncio.get_running_loop().create_future()


never: Task[Any] = Task(_never)


def map(fa: Task[A], f: Callable[[A], B]) -> Task[B]:
    return fa.map(f)


def ap(fab: Task[Callable[[A], B]], fa: Task[A]) -> Task[B]:
    return fa.ap(fab)


def chain(fa: Task[A], f: Callable[[A], Task[B]]) -> Task[B]:
    return fa.chain(f)


task = Monad(uri=URI, map=map, of=of, ap=ap, chain=chain)


def get_semigroup(S: Semigroup[A]) -> Semigroup[Task[A]]:
    """Lift ``S`` to Tasks; the left operand completes before the right starts."""
    def concat(x: Task[A], y: Task[A]) -> Task[A]:
        return x.chain(lambda rx: y.map(lambda ry: S.concat(rx, ry)))

    return Semigroup(concat)


def get_monoid(M: Monoid[A]) -> Monoid[Task[A]]:
    return Monoid(get_semigroup(M).concat, of(M.empty))


# Strong references to race operands until they settle
_operands: set[asyncio.Future[Any]] = set()


def _discard(fut: asyncio.Future[Any]) -> None:
    _operands.discard(fut)
    if fut.cancelled():
        return
    exc = fut.exception()
    if exc is not None:
        logger.debug("race: operand settled with rejection %r", exc)


def _race(x: Task[A], y: Task[A]) -> Task[A]:
    async def new_run() -> A:
        operands = [asyncio.ensure_future(x.run()), asyncio.ensure_future(y.run())]
        for fut in operands:
            _operands.add(fut)
            fut.add_done_callback(_discard)
        done, _ = await asyncio.wait(operands, return_when=asyncio.FIRST_COMPLETED)
        # Left operand wins a simultaneous settle
        winner = next(fut for fut in operands if fut in done)
        logger.debug("race: operand %d settled first", operands.index(winner))
        return winner.result()

    return Task(new_run)


def get_race_monoid() -> Monoid[Task[Any]]:
    """Monoid where concatenation returns whichever operand settles first.

    A rejection settles too, so a failing operand can win. ``never`` is the
    identity.
    """
    def concat(x: Task[A], y: Task[A]) -> Task[A]:
        if x is never:
            return Task(y._run)
        if y is never:
            return Task(x._run)
        return _race(x, y)

    return Monoid(concat, never)


def traverse(items: Sequence[A], f: Callable[[A], Task[B]]) -> Task[list[B]]:
    """Run ``f`` over every item concurrently, collecting results in order."""
    return array_traverse(task)(items, f)


def sequence(tasks: Sequence[Task[A]]) -> Task[list[A]]:
    return traverse(tasks, identity)
