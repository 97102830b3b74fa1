"""Type class records and stock instances.

Instances are plain frozen records of functions; a combinator that needs,
for example, a Monoid receives the record as an argument.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Semigroup(Generic[A]):
    """An associative binary operation."""

    concat: Callable[[A, A], A]


@dataclass(frozen=True)
class Monoid(Semigroup[A]):
    """A semigroup with an identity element ``empty``."""

    empty: A


@dataclass(frozen=True)
class Ord(Generic[A]):
    """A total order; ``compare`` returns a negative, zero or positive int."""

    compare: Callable[[A, A], int]


@dataclass(frozen=True)
class Applicative:
    """Record of the operations needed to traverse a structure.

    Attributes:
        uri: Name of the container type the instance belongs to.
        map: (fa, f) -> fb
        of: a -> fa
        ap: (fab, fa) -> fb
    """

    uri: str
    map: Callable[..., Any]
    of: Callable[[Any], Any]
    ap: Callable[[Any, Any], Any]


@dataclass(frozen=True)
class Monad(Applicative):
    chain: Callable[[Any, Callable[[Any], Any]], Any]


def lift_a2(F: Applicative, f: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    """Lift a binary function into the applicative ``F``."""
    return lambda fa, fb: F.ap(F.map(fa, lambda a: lambda b: f(a, b)), fb)


def _compare(x: Any, y: Any) -> int:
    return -1 if x < y else (1 if x > y else 0)


ord_number: Ord[Any] = Ord(_compare)
ord_string: Ord[str] = Ord(_compare)

semigroup_string: Semigroup[str] = Semigroup(lambda x, y: x + y)
monoid_string: Monoid[str] = Monoid(lambda x, y: x + y, "")
monoid_sum: Monoid[Any] = Monoid(lambda x, y: x + y, 0)
monoid_product: Monoid[Any] = Monoid(lambda x, y: x * y, 1)
monoid_all: Monoid[bool] = Monoid(lambda x, y: x and y, True)
monoid_any: Monoid[bool] = Monoid(lambda x, y: x or y, False)
