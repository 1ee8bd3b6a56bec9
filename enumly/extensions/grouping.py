from __future__ import annotations
import typing
from collections import deque
from ..errors import ArgumentError, coerce_count
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _window_size(n: Any, label: str) -> int:
    size = coerce_count(n, label)
    if size <= 0:
        raise ArgumentError(f"invalid {label}: {size}")
    return size


class _GroupingOperations(Generic[T]):
    def partition(self: 'Enumerable[T]',
                  predicate: Optional[Predicate[T]] = None) -> Tuple[List[T], List[T]]:
        """(elements satisfying predicate, the rest), both in source order"""
        if predicate is None: return self._defer('partition', 'predicate')
        matching, rest = [], []
        self.each(lambda item: (matching if predicate(item) else rest).append(item))
        return matching, rest

    def group_by(self: 'Enumerable[T]', fn: Optional[KeySelector[T, K]] = None) -> Dict[K, List[T]]:
        """key -> elements with that key; keys ordered by first appearance"""
        if fn is None: return self._defer('group_by', 'fn')
        groups: Dict[K, List[T]] = {}
        self.each(lambda item: groups.setdefault(fn(item), []).append(item))
        return groups

    def each_slice(self: 'Enumerable[T]', n: int, fn: Optional[Callable[[List[T]], Any]] = None) -> None:
        """
        calls fn with consecutive lists of n elements; the last one may be shorter.
        n is checked before anything else, including before deferring.
        """
        size = _window_size(n, 'slice size')
        if fn is None: return self._defer('each_slice', 'fn', size)
        window: List[T] = []

        def visit(item):
            nonlocal window
            window.append(item)
            if len(window) == size:
                full, window = window, []
                fn(full)

        self.each(visit)
        if window: fn(window)
        return None

    def each_cons(self: 'Enumerable[T]', n: int, fn: Optional[Callable[[List[T]], Any]] = None) -> None:
        """
        calls fn with every run of n consecutive elements, each as a fresh list.
        a source shorter than n produces nothing.
        """
        size = _window_size(n, 'size')
        if fn is None: return self._defer('each_cons', 'fn', size)
        window: typing.Deque[T] = deque(maxlen=size)

        def visit(item):
            window.append(item)
            if len(window) == size: fn(list(window))

        self.each(visit)
        return None
