"""
the sort engine.

sort() and sort_by() work on a private snapshot of their input and never touch
the caller's sequence. the default strategy is a stable three-way quicksort;
any callable taking (items, comparator) and returning a new list can replace it,
either per Sorter or process-wide through enumly.configure(sort_strategy=...).
"""
from __future__ import annotations
import logging

from .ordering import compare, resolve
from .settings import get_settings
from .traversal import materialize
from .types import *

logger = logging.getLogger(__name__)


class KeyedEntry(Generic[T, K]):
    """an element paired with its precomputed sort key"""
    __slots__ = ('value', 'key')

    def __init__(self, value: T, key: K):
        self.value = value
        self.key = key

    def __repr__(self) -> str:
        return f"KeyedEntry(value={self.value!r}, key={self.key!r})"


def _compare_keys(left: KeyedEntry, right: KeyedEntry) -> int:
    return compare(left.key, right.key)


def quicksort(items: List[T], comparator: Optional[Comparator] = None) -> List[T]:
    """
    stable quicksort with three-way partitioning around the first element.

    every element lands in exactly one of less / equal / greater according to
    comparator(element, pivot), keeping encounter order inside each bucket, and
    the result is sorted(less) + equal + sorted(greater). every reference to the
    pivot object goes to equal without being compared to itself.

    the recursion runs on an explicit stack: already-sorted input partitions n
    levels deep, which would overflow the interpreter stack otherwise.
    worst case is o(n^2) comparisons.
    """
    cmp = resolve(comparator)
    result: List[T] = []
    # ('sort', bucket) still needs partitioning, ('emit', bucket) is final
    pending: List[Tuple[str, List[T]]] = [('sort', list(items))]

    while pending:
        action, bucket = pending.pop()
        if action == 'emit':
            result.extend(bucket)
            continue
        if not bucket:
            continue

        pivot = bucket[0]
        less, equal, greater = [], [pivot], []
        for element in bucket[1:]:
            if element is pivot:
                equal.append(element)
                continue
            order = cmp(element, pivot)
            if order < 0:
                less.append(element)
            elif order > 0:
                greater.append(element)
            else:
                equal.append(element)

        # pushed in reverse: less is handled first
        pending.append(('sort', greater))
        pending.append(('emit', equal))
        pending.append(('sort', less))

    return result


class Sorter:
    """a sort engine with a pluggable strategy"""

    def __init__(self, strategy: Optional[SortStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy or get_settings().sort_strategy or quicksort

    def sort(self, sequence: Any, comparator: Optional[Comparator] = None) -> List[Any]:
        """sort a snapshot of the sequence by comparator (natural order by default)"""
        items = materialize(sequence)
        strategy = self.strategy
        logger.debug(f"sorting {len(items)} items with {getattr(strategy, '__name__', strategy)!s}")
        return strategy(items, comparator or compare)

    __call__ = sort

    def sort_by(self, sequence: Any, key_selector: KeySelector[Any, Any]) -> List[Any]:
        """
        schwartzian transform: key_selector runs exactly once per element,
        entries are sorted on their keys and then projected back to elements.
        """
        from .enumerable import Enumerable
        entries: List[KeyedEntry] = []
        if isinstance(sequence, Enumerable):
            sequence.each(lambda element: entries.append(KeyedEntry(element, key_selector(element))))
        else:
            entries = [KeyedEntry(element, key_selector(element)) for element in sequence]
        return [entry.value for entry in self.sort(entries, _compare_keys)]


def sort(sequence: Any, comparator: Optional[Comparator] = None,
         strategy: Optional[SortStrategy] = None) -> List[Any]:
    """sort any enumerable or iterable, returning a new list"""
    return Sorter(strategy).sort(sequence, comparator)


def sort_by(sequence: Any, key_selector: KeySelector[Any, Any],
            strategy: Optional[SortStrategy] = None) -> List[Any]:
    """sort any enumerable or iterable by a key computed once per element"""
    return Sorter(strategy).sort_by(sequence, key_selector)
