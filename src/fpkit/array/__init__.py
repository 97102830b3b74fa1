"""Pure, non-mutating helpers over lists."""

from fpkit.array import ops
from fpkit.array.ops import (
    Partition,
    Span,
    array,
    cat_options,
    cons,
    delete_at,
    drop,
    drop_while,
    find_first,
    find_index,
    find_last,
    flatten,
    fold,
    fold_l,
    get_monoid,
    head,
    index,
    init,
    insert_at,
    is_empty,
    is_out_of_bound,
    last,
    lefts,
    map_option,
    modify_at,
    partition_map,
    reverse,
    rights,
    rotate,
    scan_left,
    scan_right,
    snoc,
    sort,
    span,
    tail,
    take,
    take_while,
    traverse,
    unfoldr,
    update_at,
    zip_,
    zip_with,
)

__all__ = [
    "ops",
    "array",
    "Partition",
    "Span",
    "get_monoid",
    "traverse",
    "unfoldr",
    # Construction
    "cons",
    "snoc",
    "flatten",
    # Access
    "is_empty",
    "is_out_of_bound",
    "index",
    "head",
    "last",
    "tail",
    "init",
    # Slicing
    "take",
    "drop",
    "span",
    "take_while",
    "drop_while",
    # Search
    "find_index",
    "find_first",
    "find_last",
    # Folds
    "fold",
    "fold_l",
    "scan_left",
    "scan_right",
    # Edits
    "insert_at",
    "update_at",
    "delete_at",
    "modify_at",
    "reverse",
    "sort",
    "rotate",
    # Option / Either
    "map_option",
    "cat_options",
    "partition_map",
    "rights",
    "lefts",
    # Zipping
    "zip_with",
    "zip_",
]
