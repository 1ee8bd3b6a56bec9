from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    """conversions that materialize the sequence in one pass: seq.to.list(), seq.to.frame() ..."""

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        return self._enumerable.to_a()

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self._enumerable.to_a())

    def set(self) -> typing.Set[T]:
        return set(self._enumerable.to_a())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """key_selector(item) -> value_selector(item) (or the item); later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        result: Dict[K, V] = {}
        self._enumerable.each(lambda item: result.__setitem__(key_selector(item), val_sel(item)))
        return result

    def array(self, dtype: Any = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable.to_a(), dtype=dtype)

    def series(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable.to_a(), name=name)

    def frame(self, columns: Optional[List[str]] = None) -> pd.DataFrame:
        """convert to pandas dataframe; elements are rows (dicts, tuples or lists)"""
        return pd.DataFrame(self._enumerable.to_a(), columns=columns)
