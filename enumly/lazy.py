from __future__ import annotations
import logging

from .enumerable import Enumerable
from .settings import get_settings
from .types import *

logger = logging.getLogger(__name__)


class LazySequence(Enumerable[Any]):
    """
    a deferred operation: {origin, operation, arguments}, nothing run yet.

    creating one never touches the origin. drive(callback) runs the operation
    with callback filling in the missing block and returns whatever the
    operation returns. the handle is itself enumerable: its each() drives the
    operation and forwards what it yields, so further operations chain onto it
    and stream through the origin without building intermediate lists.

        seq.each_slice(2).map(sum)       # sums of pairs
        seq.cycle().take(7)              # stops the endless cycle after 7
        seq.each_with_index().to_a()     # [(item, index), ...]
    """

    def __init__(self, origin: Enumerable[Any], operation: str, callback: str,
                 args: Tuple[Any, ...] = (), kwargs: Optional[Dict[str, Any]] = None):
        self._origin = origin
        self._operation = operation
        self._callback = callback
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})
        if get_settings().log_deferred:
            logger.debug(f"deferred {self!r}")

    @property
    def origin(self) -> Enumerable[Any]:
        return self._origin

    @property
    def operation(self) -> str:
        return self._operation

    @property
    def args(self) -> Tuple[Any, ...]:
        return self._args

    def drive(self, callback: Callable[..., Any]) -> Any:
        """run the deferred operation now, with callback as its block"""
        if get_settings().log_deferred:
            logger.debug(f"driving {self!r}")
        method = getattr(self._origin, self._operation)
        return method(*self._args, **{**self._kwargs, self._callback: callback})

    def each(self, fn: Visitor) -> Any:
        # operations yielding several values (each_with_index) hand them over as one tuple.
        # the block always answers True: predicate operations pass every element on
        def forward(*values):
            fn(values[0] if len(values) == 1 else values)
            return True

        return self.drive(forward)

    def __repr__(self) -> str:
        arguments = [repr(arg) for arg in self._args]
        arguments += [f"{key}={value!r}" for key, value in self._kwargs.items() if value is not None]
        return f"LazySequence({self._origin!r}.{self._operation}({', '.join(arguments)}))"
