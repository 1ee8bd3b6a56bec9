from __future__ import annotations
import operator
import typing
from ..errors import ArgumentError
from ..ordering import compare, resolve
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

_OPERATORS: Dict[str, Accumulator] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
    '/': operator.truediv,
    '//': operator.floordiv,
    '%': operator.mod,
    '**': operator.pow,
    '&': operator.and_,
    '|': operator.or_,
    '^': operator.xor,
}


def _binary_operation(op: Union[str, Accumulator]) -> Accumulator:
    """a two-argument callable from a callable, an operator symbol or a method name"""
    if callable(op):
        return op
    if isinstance(op, str):
        if op in _OPERATORS:
            return _OPERATORS[op]
        return lambda memo, item: getattr(memo, op)(item)
    raise ArgumentError(f"{op!r} is neither callable nor an operator name")


class _AggregateOperations(Generic[T]):
    def reduce(self: 'Enumerable[T]', *args: Any) -> Option[Any]:
        """
        left fold: reduce(op) or reduce(initial, op).

        op is a two-argument callable, an operator symbol such as '+', or the
        name of a method called on the accumulator. without an initial value the
        first element seeds the accumulator untouched. returns Nothing for an
        empty source without initial value.
        """
        if not 1 <= len(args) <= 2:
            raise ArgumentError(f"reduce: expected 1 or 2 arguments, got {len(args)}")
        *initial, op = args
        combine = _binary_operation(op)
        memo = optional_argument(tuple(initial), 'reduce')

        def visit(item):
            nonlocal memo
            memo = Some(combine(memo.value, item)) if memo.is_some else Some(item)

        self.each(visit)
        return memo

    inject = reduce

    # --- extrema: the running extreme only moves on a strict win, so ties keep the earliest ---

    def min(self: 'Enumerable[T]', comparator: Optional[Comparator] = None) -> Option[T]:
        cmp = resolve(comparator)
        best: Option[T] = NOTHING

        def visit(item):
            nonlocal best
            if best.is_none or cmp(item, best.value) < 0:
                best = Some(item)

        self.each(visit)
        return best

    def max(self: 'Enumerable[T]', comparator: Optional[Comparator] = None) -> Option[T]:
        cmp = resolve(comparator)
        best: Option[T] = NOTHING

        def visit(item):
            nonlocal best
            if best.is_none or cmp(item, best.value) > 0:
                best = Some(item)

        self.each(visit)
        return best

    def _extreme_by(self: 'Enumerable[T]', fn: KeySelector[T, K], direction: int) -> Option[T]:
        best: Option[T] = NOTHING
        best_key = None

        def visit(item):
            nonlocal best, best_key
            key = fn(item)
            if best.is_none or compare(key, best_key) == direction:
                best, best_key = Some(item), key

        self.each(visit)
        return best

    def min_by(self: 'Enumerable[T]', fn: Optional[KeySelector[T, K]] = None) -> Option[T]:
        """the element with the smallest fn(element)"""
        if fn is None: return self._defer('min_by', 'fn')
        return self._extreme_by(fn, -1)

    def max_by(self: 'Enumerable[T]', fn: Optional[KeySelector[T, K]] = None) -> Option[T]:
        """the element with the largest fn(element)"""
        if fn is None: return self._defer('max_by', 'fn')
        return self._extreme_by(fn, 1)

    def minmax(self: 'Enumerable[T]', comparator: Optional[Comparator] = None) -> Tuple[Option[T], Option[T]]:
        """(min, max) in a single pass"""
        cmp = resolve(comparator)
        low: Option[T] = NOTHING
        high: Option[T] = NOTHING

        def visit(item):
            nonlocal low, high
            if low.is_none:
                low = high = Some(item)
                return
            if cmp(low.value, item) > 0: low = Some(item)
            if cmp(high.value, item) < 0: high = Some(item)

        self.each(visit)
        return low, high

    def minmax_by(self: 'Enumerable[T]', fn: Optional[KeySelector[T, K]] = None) -> Tuple[Option[T], Option[T]]:
        """(min_by, max_by) in a single pass, fn called once per element"""
        if fn is None: return self._defer('minmax_by', 'fn')
        low: Option[T] = NOTHING
        high: Option[T] = NOTHING
        low_key = high_key = None

        def visit(item):
            nonlocal low, high, low_key, high_key
            key = fn(item)
            if low.is_none:
                low = high = Some(item)
                low_key = high_key = key
                return
            if compare(low_key, key) > 0: low, low_key = Some(item), key
            if compare(high_key, key) < 0: high, high_key = Some(item), key

        self.each(visit)
        return low, high
