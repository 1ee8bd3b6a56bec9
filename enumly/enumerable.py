from __future__ import annotations

from abc import ABC, abstractmethod
from .traversal import Pass
from .types import *

# --- operation mixins ---
from .extensions.core import _CoreOperations
from .extensions.search import _SearchOperations
from .extensions.aggregate import _AggregateOperations
from .extensions.grouping import _GroupingOperations
from .extensions.sort import _SortOperations
from .extensions.zip import _ZipOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


class Enumerable(
    _CoreOperations[T],
    _SearchOperations[T],
    _AggregateOperations[T],
    _GroupingOperations[T],
    _SortOperations[T],
    _ZipOperations[T],
    ABC
):
    """
    the enumeration mixin. subclasses implement each(fn), which must call fn
    once per element in a fixed order, and get every other operation for free.

    nothing else is assumed about the source: no indexing, no length and no
    second pass. operations that need the elements more than once (sort,
    reverse_each, cycle, each_slice, ...) buffer them from a single pass.
    """

    @abstractmethod
    def each(self, fn: Visitor) -> Any:
        """call fn(element) for every element, in order"""
        pass

    def _pass(self) -> Pass:
        return Pass(self)

    def _defer(self, operation: str, callback: str, *args: Any, **kwargs: Any) -> 'Enumerable[Any]':
        """the lazy handle returned by operations called without their callback"""
        from .lazy import LazySequence
        return LazySequence(self, operation, callback, args, kwargs)

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_a())
