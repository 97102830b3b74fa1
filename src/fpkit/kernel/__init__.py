"""Kernel layer - containers and type class records."""

from fpkit.kernel.algebra import (
    Applicative,
    Monad,
    Monoid,
    Ord,
    Semigroup,
    lift_a2,
    monoid_all,
    monoid_any,
    monoid_product,
    monoid_string,
    monoid_sum,
    ord_number,
    ord_string,
    semigroup_string,
)
from fpkit.kernel.either import Either, Left, Right, left, right
from fpkit.kernel.function import identity
from fpkit.kernel.io import IO
from fpkit.kernel.option import Nothing, Option, Some, from_nullable, nothing, some

__all__ = [
    # Containers
    "Option",
    "Some",
    "Nothing",
    "nothing",
    "some",
    "from_nullable",
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "IO",
    # Type classes
    "Semigroup",
    "Monoid",
    "Ord",
    "Applicative",
    "Monad",
    "lift_a2",
    # Instances
    "semigroup_string",
    "monoid_string",
    "monoid_sum",
    "monoid_product",
    "monoid_all",
    "monoid_any",
    "ord_number",
    "ord_string",
    "identity",
]
