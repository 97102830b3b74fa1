"""Pure helpers over Python lists.

Every function returns a new list and leaves its input untouched. Optional
results are returned as ``Option``; lookups and index-based edits return
``nothing`` instead of raising when the index is out of bounds.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fpkit.kernel.algebra import Applicative, Monad, Monoid, Ord, lift_a2
from fpkit.kernel.either import Either
from fpkit.kernel.function import Endomorphism, Predicate, concat, identity, tuple_
from fpkit.kernel.option import Option, Some, nothing

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
L = TypeVar("L")
R = TypeVar("R")

URI = "Array"


@dataclass(frozen=True)
class Partition(Generic[L, R]):
    left: list[L]
    right: list[R]


@dataclass(frozen=True)
class Span(Generic[A]):
    """Result of ``span``: the matching prefix and everything after it."""

    init: list[A]
    rest: list[A]


def get_monoid() -> Monoid[list[Any]]:
    return Monoid(concat, [])


def map(fa: Sequence[A], f: Callable[[A], B]) -> list[B]:
    return [f(a) for a in fa]


def of(a: A) -> list[A]:
    return [a]


def ap(fab: Sequence[Callable[[A], B]], fa: Sequence[A]) -> list[B]:
    """Apply every function to every value, functions outermost."""
    return flatten([map(fa, f) for f in fab])


def chain(fa: Sequence[A], f: Callable[[A], Sequence[B]]) -> list[B]:
    return [b for a in fa for b in f(a)]


def reduce(fa: Sequence[A], b: B, f: Callable[[B, A], B]) -> B:
    r = b
    for a in fa:
        r = f(r, a)
    return r


def traverse(F: Applicative) -> Callable[[Sequence[A], Callable[[A], Any]], Any]:
    """Build a traversal of lists into the applicative ``F``.

    The returned function maps each element to an ``F`` value and collects
    the results into ``F`` of a list, preserving order.
    """
    lifted_snoc = lift_a2(F, snoc)

    def go(ta: Sequence[A], f: Callable[[A], Any]) -> Any:
        return reduce(ta, F.of(zero()), lambda fab, a: lifted_snoc(fab, f(a)))

    return go


def zero() -> list[Any]:
    return []


alt = concat


def unfoldr(b: B, f: Callable[[B], Option[tuple[A, B]]]) -> list[A]:
    """Build a list from a seed until ``f`` returns ``nothing``."""
    ret: list[A] = []
    bb = b
    while True:
        mt = f(bb)
        if not isinstance(mt, Some):
            break
        a, bb = mt.value
        ret.append(a)
    return ret


def extend(fa: Sequence[A], f: Callable[[list[A]], B]) -> list[B]:
    """Apply ``f`` to every suffix of ``fa``."""
    return [f(list(fa[i:])) for i in range(len(fa))]


def partition_map(fa: Sequence[A], f: Callable[[A], Either[L, R]]) -> Partition[L, R]:
    left: list[L] = []
    right: list[R] = []
    for a in fa:
        f(a).fold(left.append, right.append)
    return Partition(left=left, right=right)


def flatten(ffa: Sequence[Sequence[A]]) -> list[A]:
    """Example: ``flatten([[1], [2], [3]]) == [1, 2, 3]``"""
    return [a for fa in ffa for a in fa]


def fold(fa: Sequence[A], b: B, cons: Callable[[A, list[A]], B]) -> B:
    """Break a list into its first element and remaining elements."""
    return b if is_empty(fa) else cons(fa[0], list(fa[1:]))


def fold_l(fa: Sequence[A], nil: Callable[[], B], cons: Callable[[A, list[A]], B]) -> B:
    """Lazy version of ``fold``."""
    return nil() if is_empty(fa) else cons(fa[0], list(fa[1:]))


def scan_left(fa: Sequence[A], b: B, f: Callable[[B, A], B]) -> list[B]:
    """Same as ``reduce`` but keeps every intermediate accumulator.

    ``scan_left([1, 2, 3], 10, lambda b, a: b - a) == [10, 9, 7, 4]``
    """
    r = [b]
    for a in fa:
        r.append(f(r[-1], a))
    return r


def scan_right(fa: Sequence[A], b: B, f: Callable[[A, B], B]) -> list[B]:
    """Fold from the right, keeping every intermediate accumulator.

    ``scan_right([1, 2, 3], 10, lambda a, b: b - a) == [4, 5, 7, 10]``
    """
    r = [b]
    for a in reversed(fa):
        r.append(f(a, r[-1]))
    r.reverse()
    return r


def is_empty(fa: Sequence[Any]) -> bool:
    return len(fa) == 0


def is_out_of_bound(i: int, fa: Sequence[Any]) -> bool:
    return i < 0 or i >= len(fa)


def index(i: int, fa: Sequence[A]) -> Option[A]:
    """Safely read the element at ``i``."""
    return nothing if is_out_of_bound(i, fa) else Some(fa[i])


def cons(a: A, fa: Sequence[A]) -> list[A]:
    return [a, *fa]


def snoc(fa: Sequence[A], a: A) -> list[A]:
    return [*fa, a]


def head(fa: Sequence[A]) -> Option[A]:
    return nothing if is_empty(fa) else Some(fa[0])


def last(fa: Sequence[A]) -> Option[A]:
    return index(len(fa) - 1, fa)


def tail(fa: Sequence[A]) -> Option[list[A]]:
    return nothing if is_empty(fa) else Some(list(fa[1:]))


def init(fa: Sequence[A]) -> Option[list[A]]:
    return nothing if is_empty(fa) else Some(list(fa[:-1]))


def take(n: int, fa: Sequence[A]) -> list[A]:
    return list(fa[:max(n, 0)])


def drop(n: int, fa: Sequence[A]) -> list[A]:
    return list(fa[max(n, 0):])


def _span_index(fa: Sequence[A], predicate: Predicate[A]) -> int:
    i = 0
    for a in fa:
        if not predicate(a):
            break
        i += 1
    return i


def span(fa: Sequence[A], predicate: Predicate[A]) -> Span[A]:
    """Split into the longest prefix satisfying ``predicate`` and the rest."""
    i = _span_index(fa, predicate)
    return Span(init=list(fa[:i]), rest=list(fa[i:]))


def take_while(fa: Sequence[A], predicate: Predicate[A]) -> list[A]:
    return list(fa[:_span_index(fa, predicate)])


def drop_while(fa: Sequence[A], predicate: Predicate[A]) -> list[A]:
    return list(fa[_span_index(fa, predicate):])


def find_index(fa: Sequence[A], predicate: Predicate[A]) -> Option[int]:
    for i, a in enumerate(fa):
        if predicate(a):
            return Some(i)
    return nothing


def find_first(fa: Sequence[A], predicate: Predicate[A]) -> Option[A]:
    for a in fa:
        if predicate(a):
            return Some(a)
    return nothing


def find_last(fa: Sequence[A], predicate: Predicate[A]) -> Option[A]:
    for a in reversed(fa):
        if predicate(a):
            return Some(a)
    return nothing


def filter_(fa: Sequence[A], predicate: Predicate[A]) -> list[A]:
    return [a for a in fa if predicate(a)]


def copy(fa: Sequence[A]) -> list[A]:
    return list(fa)


def unsafe_insert_at(i: int, a: A, fa: Sequence[A]) -> list[A]:
    xs = copy(fa)
    xs.insert(i, a)
    return xs


def insert_at(i: int, a: A, fa: Sequence[A]) -> Option[list[A]]:
    """Insert ``a`` before index ``i``; ``i == len(fa)`` appends."""
    return nothing if i < 0 or i > len(fa) else Some(unsafe_insert_at(i, a, fa))


def unsafe_update_at(i: int, a: A, fa: Sequence[A]) -> list[A]:
    xs = copy(fa)
    xs[i] = a
    return xs


def update_at(i: int, a: A, fa: Sequence[A]) -> Option[list[A]]:
    return nothing if is_out_of_bound(i, fa) else Some(unsafe_update_at(i, a, fa))


def unsafe_delete_at(i: int, fa: Sequence[A]) -> list[A]:
    xs = copy(fa)
    del xs[i]
    return xs


def delete_at(i: int, fa: Sequence[A]) -> Option[list[A]]:
    return nothing if is_out_of_bound(i, fa) else Some(unsafe_delete_at(i, fa))


def modify_at(fa: Sequence[A], i: int, f: Endomorphism[A]) -> Option[list[A]]:
    return nothing if is_out_of_bound(i, fa) else Some(unsafe_update_at(i, f(fa[i]), fa))


def reverse(fa: Sequence[A]) -> list[A]:
    return list(reversed(fa))


def map_option(fa: Sequence[A], f: Callable[[A], Option[B]]) -> list[B]:
    """Map and keep only the ``Some`` results."""
    return chain(fa, lambda a: f(a).fold([], of))


def cat_options(fa: Sequence[Option[A]]) -> list[A]:
    return map_option(fa, identity)


def rights(fa: Sequence[Either[L, R]]) -> list[R]:
    return chain(fa, lambda e: e.fold(lambda _: [], of))


def lefts(fa: Sequence[Either[L, R]]) -> list[L]:
    return chain(fa, lambda e: e.fold(of, lambda _: []))


def sort(order: Ord[A]) -> Callable[[Sequence[A]], list[A]]:
    """Stable sort in increasing order according to ``order``."""
    key = functools.cmp_to_key(order.compare)
    return lambda fa: sorted(fa, key=key)


def zip_with(fa: Sequence[A], fb: Sequence[B], f: Callable[[A, B], C]) -> list[C]:
    """Combine elements pairwise; the longer input is truncated."""
    return [f(fa[i], fb[i]) for i in range(min(len(fa), len(fb)))]


def zip_(fa: Sequence[A], fb: Sequence[B]) -> list[tuple[A, B]]:
    return zip_with(fa, fb, tuple_)


def rotate(n: int, fa: Sequence[A]) -> list[A]:
    """Rotate right by ``n`` steps; negative ``n`` rotates left."""
    size = len(fa)
    if size <= 1:
        return copy(fa)
    k = n % size
    if k == 0:
        return copy(fa)
    return [*fa[-k:], *fa[:size - k]]


@dataclass(frozen=True)
class ArrayInstance(Monad):
    """Monad, Foldable, Unfoldable, Traversable, Alternative, Plus and Extend for lists."""

    reduce: Callable[..., Any]
    unfoldr: Callable[..., Any]
    traverse: Callable[..., Any]
    zero: Callable[[], Any]
    alt: Callable[..., Any]
    extend: Callable[..., Any]


array = ArrayInstance(
    uri=URI,
    map=map,
    of=of,
    ap=ap,
    chain=chain,
    reduce=reduce,
    unfoldr=unfoldr,
    traverse=traverse,
    zero=zero,
    alt=alt,
    extend=extend,
)
