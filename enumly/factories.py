import itertools
from .enumerable import Enumerable
from .types import *


class IterableSource(Enumerable[T]):
    """
    adapts a python iterable. it can be traversed again exactly when the
    iterable can: lists and ranges yes, generators and iterators only once.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterable = iterable

    def each(self, fn: Visitor) -> 'IterableSource[T]':
        for item in self._iterable:
            fn(item)
        return self

    def __repr__(self) -> str:
        return f"IterableSource({self._iterable!r})"


class FunctionSource(Enumerable[T]):
    """asks data_func for a fresh iterable on every traversal"""

    def __init__(self, data_func: Callable[[], Iterable[T]], label: str = 'generated'):
        self._data_func = data_func
        self._label = label

    def each(self, fn: Visitor) -> 'FunctionSource[T]':
        for item in self._data_func():
            fn(item)
        return self

    def __repr__(self) -> str:
        return f"FunctionSource({self._label})"


def from_iterable(data: Iterable[T]) -> Enumerable[T]:
    """create enumerable from iterable"""
    return IterableSource(data)


def from_range(start: int, count: int) -> Enumerable[int]:
    """create enumerable of count consecutive integers"""
    return FunctionSource(lambda: range(start, start + count), f"range({start}, {start + count})")


def repeat(item: T, count: Optional[int] = None) -> Enumerable[T]:
    """item count times, or endlessly when count is None"""
    if count is None:
        return FunctionSource(lambda: itertools.repeat(item), f"repeat({item!r})")
    return FunctionSource(lambda: itertools.repeat(item, count), f"repeat({item!r}, {count})")


def empty() -> Enumerable[Any]:
    """create empty enumerable"""
    return FunctionSource(tuple, 'empty')


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> Enumerable[T]:
    """generator_func() count times per traversal, or endlessly when count is None"""
    def produce():
        steps = itertools.count() if count is None else range(count)
        return (generator_func() for _ in steps)
    return FunctionSource(produce, getattr(generator_func, '__name__', 'generate'))


# --- aliases ---
E = from_iterable
