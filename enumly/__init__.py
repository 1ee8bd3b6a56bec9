"""
'     ___  _ __  _   _ _ __ ___ | |_   _
'    / _ \| '_ \| | | | '_ ` _ \| | | | |
'   |  __/| | | | |_| | | | | | | | |_| |
'    \___||_| |_|\__,_|_| |_| |_|_|\__, |
'                                   |___/
"""
import logging

# expose the main classes
from .enumerable import Enumerable
from .lazy import LazySequence

# expose the sort engine and ordering
from .sorting import Sorter, KeyedEntry, quicksort, sort, sort_by
from .ordering import Comparable, compare, sign

# expose the factory functions
from .factories import (
    IterableSource,
    FunctionSource,
    from_iterable,
    from_range,
    repeat,
    empty,
    generate,
    E
)

# expose result types, errors and settings
from .types import Option, Some, Nothing, NOTHING
from .errors import (
    EnumerationError,
    ArgumentError,
    ComparisonError,
    TypeCoercionError
)
from .settings import Settings, configure, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Enumerable",
    "LazySequence",
    "Sorter",
    "KeyedEntry",
    "quicksort",
    "sort",
    "sort_by",
    "Comparable",
    "compare",
    "sign",
    "IterableSource",
    "FunctionSource",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "E",
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "EnumerationError",
    "ArgumentError",
    "ComparisonError",
    "TypeCoercionError",
    "Settings",
    "configure",
    "get_settings",
]
