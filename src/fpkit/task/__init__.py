"""Deferred asynchronous computations."""

from fpkit.task.ops import (
    ap,
    chain,
    from_io,
    get_monoid,
    get_race_monoid,
    get_semigroup,
    map,
    never,
    of,
    sequence,
    task,
    traverse,
    try_catch,
)
from fpkit.task.task import Task

__all__ = [
    "Task",
    # Constructors
    "of",
    "from_io",
    "try_catch",
    "never",
    # Instance
    "task",
    "map",
    "ap",
    "chain",
    # Algebra
    "get_semigroup",
    "get_monoid",
    "get_race_monoid",
    # Collections
    "traverse",
    "sequence",
]
