import math
import numbers
import operator


class EnumerationError(Exception):
    """Base class of the errors raised by enumly."""


class ArgumentError(EnumerationError, ValueError):
    """Raised when an operation receives an invalid size, count or argument list."""


class ComparisonError(EnumerationError, TypeError):
    """Raised when two elements cannot be ordered."""

    def __init__(self, left, right, detail: str = "failed"):
        self.left_type = type(left)
        self.right_type = type(right)
        super().__init__(
            f"comparison of {self.left_type.__name__} with {self.right_type.__name__} {detail}")


class TypeCoercionError(EnumerationError, TypeError):
    """Raised when a count-like argument cannot be turned into an integer."""


def coerce_count(value, name: str = "count") -> int:
    """
    converts a count-like argument to an int.
    integers (anything with __index__) pass through, finite reals are truncated
    toward zero. booleans, nan and infinities are rejected.
    """
    if isinstance(value, bool):
        raise TypeCoercionError(f"no implicit conversion of bool into integer for {name}")
    try:
        return operator.index(value)
    except TypeError:
        pass
    if isinstance(value, numbers.Real) and math.isfinite(value):
        return int(value)
    raise TypeCoercionError(
        f"no implicit conversion of {type(value).__name__} into integer for {name}")
