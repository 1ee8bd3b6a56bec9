from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _SearchOperations(Generic[T]):
    def find(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None,
             if_none: Optional[Callable[[], T]] = None) -> Option[T]:
        """
        Some(first element satisfying predicate), stopping there.
        when nothing matches: Some(if_none()) if a fallback was given, else Nothing.
        """
        if predicate is None: return self._defer('find', 'predicate', if_none=if_none)
        run = self._pass()

        def visit(item):
            if predicate(item): run.stop(Some(item))

        found = run.run(visit, NOTHING)
        if found.is_none and if_none is not None:
            return Some(if_none())
        return found

    detect = find

    def find_index(self: 'Enumerable[T]', *value: Any, predicate: Optional[Predicate[T]] = None) -> Option[int]:
        """Some(position) of the first element equal to value (or matching predicate), else Nothing"""
        target = optional_argument(value, 'find_index')
        if target.is_some:
            wanted = target.value
            test = lambda item: item == wanted
        elif predicate is not None:
            test = predicate
        else:
            return self._defer('find_index', 'predicate')

        run = self._pass()
        index = 0

        def visit(item):
            nonlocal index
            if test(item): run.stop(Some(index))
            index += 1

        return run.run(visit, NOTHING)

    def first(self: 'Enumerable[T]', *n: int):
        """Some(first element) or Nothing; first(n) is take(n)"""
        count = optional_argument(n, 'first')
        if count.is_some: return self.take(count.value)
        run = self._pass()
        return run.run(lambda item: run.stop(Some(item)), NOTHING)

    def include(self: 'Enumerable[T]', obj: Any) -> bool:
        """true as soon as an element equals obj"""
        run = self._pass()

        def visit(item):
            if obj == item: run.stop(True)

        return run.run(visit, False)

    member = include

    def __contains__(self: 'Enumerable[T]', obj: Any) -> bool:
        return self.include(obj)

    # --- quantifiers, truthiness of the element when no predicate is given ---

    def all(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        test = predicate or bool
        run = self._pass()

        def visit(item):
            if not test(item): run.stop(False)

        return run.run(visit, True)

    def any(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        test = predicate or bool
        run = self._pass()

        def visit(item):
            if test(item): run.stop(True)

        return run.run(visit, False)

    def none(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        return not self.any(predicate)

    def one(self: 'Enumerable[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """exactly one match; gives up at the second"""
        test = predicate or bool
        run = self._pass()
        found = False

        def visit(item):
            nonlocal found
            if test(item):
                if found: run.stop(False)
                found = True

        return run.run(visit, True) and found

    def count(self: 'Enumerable[T]', *item: Any, predicate: Optional[Predicate[T]] = None) -> int:
        """elements equal to item, elements matching predicate, or all elements"""
        target = optional_argument(item, 'count')
        if target.is_some:
            wanted = target.value
            test = lambda element: wanted == element
        else:
            test = predicate or (lambda element: True)

        total = 0

        def visit(element):
            nonlocal total
            if test(element): total += 1

        self.each(visit)
        return total
