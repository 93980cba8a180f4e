from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..errors import require_callable

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class _TerminalOperations(Generic[T]):
    """
    consuming operations. each call opens its own cursor and walks the whole
    pipeline again; nothing is remembered between calls.
    """

    def reduce(self: 'Sequence[T]', reducer: Accumulator[U, T], initial: U) -> U:
        """left fold over the elements in traversal order"""
        require_callable(reducer, "reducer", "reduce this sequence")
        accumulator = initial
        for item in self.create_cursor():
            accumulator = reducer(accumulator, item)
        return accumulator

    def to_list(self: 'Sequence[T]') -> List[T]:
        def append(items: List[T], item: T) -> List[T]:
            items.append(item)
            return items
        return self.reduce(append, [])

    def to_set(self: 'Sequence[T]') -> Set[T]:
        def add(items: Set[T], item: T) -> Set[T]:
            items.add(item)
            return items
        return self.reduce(add, set())

    def length(self: 'Sequence[T]') -> int:
        return self.reduce(lambda count, _: count + 1, 0)

    def first(self: 'Sequence[T]') -> Maybe[T]:
        """the first element, pulling nothing beyond it"""
        cursor = self.create_cursor()
        return Maybe.some(cursor.next()) if cursor.has_next() else Maybe.nothing()

    def last(self: 'Sequence[T]') -> Maybe[T]:
        """the final element; walks the whole sequence"""
        return self.reduce(lambda _, item: Maybe.some(item), Maybe.nothing())

    def some(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """true if any element satisfies the predicate; stops at the first match"""
        require_callable(predicate, "predicate", "test this sequence")
        return self.filter(predicate).first().is_present


class TerminalAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._sequence.to_list()

    def set(self) -> Set[T]:
        """convert to set"""
        return self._sequence.to_set()

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        require_callable(key_selector, "key selector", "convert this sequence to a dict")
        if value_selector is not None:
            require_callable(value_selector, "value selector", "convert this sequence to a dict")
        val_sel = value_selector if value_selector else lambda item: item

        def put(result: Dict[K, V], item: T) -> Dict[K, V]:
            result[key_selector(item)] = val_sel(item)
            return result
        return self._sequence.reduce(put, {})

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence.to_list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence.to_list())

    def df(self) -> pd.DataFrame:
        """convert records (dicts, namedtuples, tuples) to a pandas dataframe"""
        return pd.DataFrame(self._sequence.to_list())
