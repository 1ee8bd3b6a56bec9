from __future__ import annotations
from abc import ABC, abstractmethod

from .errors import ComparisonError
from .types import *


class Comparable(ABC):
    """
    opt-in ordering capability for element types.
    compare_to returns a negative, zero or positive number, like a comparator.
    """

    @abstractmethod
    def compare_to(self, other: Any) -> Any:
        pass


def sign(result: Any, left: Any = None, right: Any = None) -> int:
    """
    normalizes a comparator result to -1, 0 or 1.
    left and right are only used to name the operand types in the error.
    """
    try:
        if result < 0: return -1
        if result > 0: return 1
        if result == 0: return 0
    except TypeError:
        pass
    raise ComparisonError(left, right, f"failed (comparator returned {result!r})")


def compare(left: Any, right: Any) -> int:
    """natural three-way comparison between two elements"""
    if isinstance(left, Comparable):
        return sign(left.compare_to(right), left, right)
    try:
        if left == right: return 0
        if left < right: return -1
        if left > right: return 1
    except (TypeError, ValueError):
        # ValueError: ambiguous truth values such as numpy arrays
        raise ComparisonError(left, right) from None
    raise ComparisonError(left, right, "failed (operands are unordered)")


def resolve(comparator: Optional[Comparator] = None) -> Callable[[Any, Any], int]:
    """turns an optional user comparator into one that always answers -1, 0 or 1"""
    if comparator is None or comparator is compare:
        return compare
    return lambda left, right: sign(comparator(left, right), left, right)
