from .config import RuntimeConfig
from .errors import FpkitError, UnwrapError
from .kernel import (
    IO,
    Either,
    Left,
    Monoid,
    Nothing,
    Option,
    Ord,
    Right,
    Semigroup,
    Some,
    nothing,
)
from .runtime import configure_logging, run_sync
from .task import (
    Task,
    from_io,
    get_monoid,
    get_race_monoid,
    get_semigroup,
    never,
    of,
    sequence,
    task,
    traverse,
    try_catch,
)
from .array import array

__all__ = [
    # Task
    "Task",
    "task",
    "of",
    "from_io",
    "try_catch",
    "never",
    "get_semigroup",
    "get_monoid",
    "get_race_monoid",
    "traverse",
    "sequence",
    # Containers
    "Option",
    "Some",
    "Nothing",
    "nothing",
    "Either",
    "Left",
    "Right",
    "IO",
    "Semigroup",
    "Monoid",
    "Ord",
    # Array
    "array",
    # Runtime
    "RuntimeConfig",
    "configure_logging",
    "run_sync",
    # Errors
    "FpkitError",
    "UnwrapError",
]
