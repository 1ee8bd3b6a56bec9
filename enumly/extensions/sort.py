from __future__ import annotations
import typing
from ..sorting import Sorter
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SortOperations(Generic[T]):
    def sorter(self: 'Enumerable[T]') -> Sorter:
        """the sort engine used by sort and sort_by; override to plug in another strategy"""
        return Sorter()

    def sort(self: 'Enumerable[T]', comparator: Optional[Comparator] = None) -> List[T]:
        """
        a sorted copy of the elements, stable, by comparator(a, b) or by the
        elements' natural order.
        """
        return self.sorter().sort(self, comparator)

    def sort_by(self: 'Enumerable[T]', fn: Optional[KeySelector[T, K]] = None) -> List[T]:
        """a sorted copy ordered by fn(element), with fn called once per element"""
        if fn is None: return self._defer('sort_by', 'fn')
        return self.sorter().sort_by(self, fn)
