from __future__ import annotations
import logging
import re
import typing
from ..errors import ArgumentError, coerce_count
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

logger = logging.getLogger(__name__)


def _case_match(pattern: Any, item: Any) -> bool:
    """grep's matching rule, chosen by the kind of pattern"""
    if isinstance(pattern, re.Pattern):
        return isinstance(item, (str, bytes)) and pattern.search(item) is not None
    if isinstance(pattern, type) or (
            isinstance(pattern, tuple) and pattern and all(isinstance(p, type) for p in pattern)):
        return isinstance(item, pattern)
    if isinstance(pattern, (range, set, frozenset)):
        try:
            return item in pattern
        except TypeError:  # unhashable item against a set
            return False
    if callable(pattern):
        return bool(pattern(item))
    return pattern == item


class _CoreOperations(Generic[T]):
    def to_a(self: 'Enumerable[T]') -> List[T]:
        """collect every element into a new list"""
        collected: List[T] = []
        self.each(collected.append)
        return collected

    entries = to_a

    def map(self: 'Enumerable[T]', fn: Optional[Selector[T, U]] = None) -> List[U]:
        """list of fn(x) for every element"""
        if fn is None: return self._defer('map', 'fn')
        mapped: List[U] = []
        self.each(lambda item: mapped.append(fn(item)))
        return mapped

    collect = map

    def flat_map(self: 'Enumerable[T]', fn: Optional[Selector[T, Any]] = None) -> List[Any]:
        """map, then splice list, tuple and enumerable results into the output"""
        from ..enumerable import Enumerable
        if fn is None: return self._defer('flat_map', 'fn')
        flattened: List[Any] = []

        def visit(item):
            value = fn(item)
            if isinstance(value, (list, tuple)):
                flattened.extend(value)
            elif isinstance(value, Enumerable):
                value.each(flattened.append)
            else:
                flattened.append(value)

        self.each(visit)
        return flattened

    collect_concat = flat_map

    def select(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> List[T]:
        """elements for which predicate is truthy"""
        if predicate is None: return self._defer('select', 'predicate')
        kept: List[T] = []
        self.each(lambda item: kept.append(item) if predicate(item) else None)
        return kept

    find_all = select
    filter = select

    def reject(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> List[T]:
        """elements for which predicate is falsy"""
        if predicate is None: return self._defer('reject', 'predicate')
        kept: List[T] = []
        self.each(lambda item: None if predicate(item) else kept.append(item))
        return kept

    def grep(self: 'Enumerable[T]', pattern: Any, fn: Optional[Selector[T, U]] = None) -> List[Any]:
        """
        elements matching pattern, passed through fn when given.
        a compiled regex is searched in str/bytes elements, a type (or tuple of
        types) checks isinstance, a range or set checks membership, any other
        callable is used as a predicate and everything else compares with ==.
        """
        matched: List[Any] = []

        def visit(item):
            if _case_match(pattern, item):
                matched.append(fn(item) if fn is not None else item)

        self.each(visit)
        return matched

    def each_with_index(self: 'Enumerable[T]', fn: Optional[Callable[[T, int], Any]] = None):
        """calls fn(item, index) for each element, 0-based; returns self"""
        if fn is None: return self._defer('each_with_index', 'fn')
        index = 0

        def visit(item):
            nonlocal index
            position, index = index, index + 1
            fn(item, position)

        self.each(visit)
        return self

    def take(self: 'Enumerable[T]', n: int) -> List[T]:
        """the first n elements; stops the traversal as soon as it has them"""
        n = coerce_count(n, 'take')
        if n < 0: raise ArgumentError(f"attempt to take negative size: {n}")
        taken: List[T] = []
        if n == 0: return taken

        run = self._pass()

        def visit(item):
            taken.append(item)
            if len(taken) >= n: run.stop()

        run.run(visit)
        return taken

    def drop(self: 'Enumerable[T]', n: int) -> List[T]:
        """every element after the first n"""
        n = coerce_count(n, 'drop')
        if n < 0: raise ArgumentError(f"attempt to drop negative size: {n}")
        kept: List[T] = []
        seen = 0

        def visit(item):
            nonlocal seen
            if seen >= n:
                kept.append(item)
            else:
                seen += 1

        self.each(visit)
        return kept

    def take_while(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> List[T]:
        """leading elements up to (not including) the first one failing predicate"""
        if predicate is None: return self._defer('take_while', 'predicate')
        taken: List[T] = []
        run = self._pass()

        def visit(item):
            if not predicate(item): run.stop()
            taken.append(item)

        run.run(visit)
        return taken

    def drop_while(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> List[T]:
        """elements from the first one failing predicate onwards"""
        if predicate is None: return self._defer('drop_while', 'predicate')
        kept: List[T] = []
        dropping = True

        def visit(item):
            nonlocal dropping
            if dropping and predicate(item): return
            dropping = False
            kept.append(item)

        self.each(visit)
        return kept

    def reverse_each(self: 'Enumerable[T]', fn: Optional[Callable[[T], Any]] = None):
        """materializes the source, then calls fn back to front; returns self"""
        if fn is None: return self._defer('reverse_each', 'fn')
        for item in reversed(self.to_a()):
            fn(item)
        return self

    def cycle(self: 'Enumerable[T]', n: Optional[int] = None, fn: Optional[Callable[[T], Any]] = None) -> None:
        """
        calls fn for every element n times over, or forever when n is None.

        the source is traversed once: elements are delivered and buffered on
        that pass, then the buffer is replayed, so changes made to the source
        afterwards are never seen. n <= 0 or an empty source does nothing.
        """
        if n is not None: n = coerce_count(n, 'cycle')
        if fn is None: return self._defer('cycle', 'fn', n)
        if n is not None and n <= 0: return None

        buffer: List[T] = []

        def visit(item):
            buffer.append(item)
            fn(item)

        self.each(visit)
        logger.debug(f"cycle buffered {len(buffer)} elements")
        if not buffer: return None

        if n is None:
            while True:
                for item in buffer: fn(item)
        for _ in range(n - 1):
            for item in buffer: fn(item)
        return None
