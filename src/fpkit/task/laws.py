"""Executable algebraic laws for Task.

Each check runs the Tasks involved and compares resolved values:

1. Functor composition: t.map(f).map(g) == t.map(lambda x: g(f(x)))
2. Left identity: of(a).chain(f) == f(a)
3. Monoid identity: concat(t, empty) == t == concat(empty, t)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from fpkit.kernel.algebra import Monoid
from fpkit.task.ops import of
from fpkit.task.task import Task


async def functor_composition(t: Task[Any], f: Callable[[Any], Any], g: Callable[[Any], Any]) -> bool:
    composed = await t.map(f).map(g).run()
    fused = await t.map(lambda x: g(f(x))).run()
    return composed == fused


async def left_identity(a: Any, f: Callable[[Any], Task[Any]]) -> bool:
    return await of(a).chain(f).run() == await f(a).run()


async def monoid_identity(monoid: Monoid[Task[Any]], t: Task[Any]) -> bool:
    expected = await t.run()
    right = await monoid.concat(t, monoid.empty).run()
    left = await monoid.concat(monoid.empty, t).run()
    return right == expected and left == expected
