from __future__ import annotations
import typing
from ..traversal import materialize
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _ZipOperations(Generic[T]):
    def zip(self: 'Enumerable[T]', *others: Iterable[Any],
            fn: Optional[Callable[[List[Any]], Any]] = None) -> Optional[List[List[Any]]]:
        """
        rows of [element, others[0][i], others[1][i], ...] for each position i of
        this sequence. the other sequences are copied to lists first and padded
        with Nothing where they run short. with fn, each row goes straight to
        fn and the call returns None.
        """
        columns = [materialize(other) for other in others]
        rows: List[List[Any]] = []
        index = 0

        def visit(item):
            nonlocal index
            row = [item] + [column[index] if index < len(column) else NOTHING for column in columns]
            index += 1
            if fn is None:
                rows.append(row)
            else:
                fn(row)

        self.each(visit)
        return None if fn is not None else rows
