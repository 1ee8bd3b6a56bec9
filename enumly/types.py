from abc import ABC, abstractmethod
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Visitor = Callable[..., Any]
Predicate = Callable[[T], Any]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparator = Callable[[T, T], Any]
Accumulator = Callable[[U, T], U]
SortStrategy = Callable[[List[T], Comparator], List[T]]


class Option(ABC, Generic[T]):
    """
    an explicit "maybe a value" result. it is either Some(value) or Nothing.
    truthiness reports presence, so Some(False) and Some(None) are truthy.
    """
    __slots__ = ()

    is_some: bool = False

    @property
    def is_none(self) -> bool:
        return not self.is_some

    def __bool__(self) -> bool:
        return self.is_some

    @abstractmethod
    def unwrap(self) -> T:
        """the wrapped value, or ValueError for an empty result"""
        pass

    def get(self, default: Optional[T] = None) -> Optional[T]:
        return self.unwrap() if self.is_some else default

    def or_else(self, fallback: Callable[[], T]) -> T:
        return self.unwrap() if self.is_some else fallback()

    def map(self, selector: Selector[T, U]) -> 'Option[U]':
        return Some(selector(self.unwrap())) if self.is_some else self


class Some(Option[T]):
    __slots__ = ('value',)

    is_some = True

    def __init__(self, value: T):
        self.value = value

    def unwrap(self) -> T:
        return self.value

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self.value == other.value

    def __hash__(self) -> int:
        return hash(('Some', self.value))

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing(Option[Any]):
    __slots__ = ()

    def unwrap(self):
        raise ValueError("result is empty")

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash('Nothing')

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()


def optional_argument(args: Tuple, name: str) -> Option:
    """turns an optional trailing positional argument (*args) into an Option"""
    from .errors import ArgumentError
    if len(args) > 1:
        raise ArgumentError(f"{name}: expected at most 1 argument, got {len(args)}")
    return Some(args[0]) if args else NOTHING
