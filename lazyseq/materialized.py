"""
variants that must read their whole upstream before producing anything.
both are lazy on construction and eager on the first pull, and both rebuild
their buffer for every new cursor so that repeated traversals see fresh data.
"""
from __future__ import annotations

import logging
from abc import abstractmethod
from functools import cmp_to_key
from .types import *
from .errors import require_callable, require_sequence
from .sequence import Sequence, Cursor, LookaheadCursor, _DONE
from .sources import IterableSequence

logger = logging.getLogger(__name__)


class _BufferedCursor(LookaheadCursor[T]):
    """serves elements from a list that is built on the first pull"""

    def __init__(self, upstream: Cursor[Any]):
        super().__init__()
        self._upstream = upstream
        self._buffer: Optional[List[T]] = None
        self._position = 0

    @abstractmethod
    def _materialize(self, items: List[Any]) -> List[T]:
        pass

    def _fetch(self) -> Any:
        if self._buffer is None:
            self._buffer = self._materialize(list(self._upstream))
        if self._position >= len(self._buffer):
            return _DONE
        item = self._buffer[self._position]
        self._position += 1
        return item


# --- sort ---

class _SortedCursor(_BufferedCursor[T]):
    def __init__(self, upstream: Cursor[T], comparator: Comparer[T]):
        super().__init__(upstream)
        self._comparator = comparator

    def _materialize(self, items: List[T]) -> List[T]:
        items.sort(key=cmp_to_key(self._comparator))
        logger.debug("sorted %d elements", len(items))
        return items


class SortedSequence(Sequence[T]):
    """
    sorts its upstream with a comparator returning <0, 0 or >0.
    sorting happens just in time, once per traversal; iterating twice sorts twice.
    """

    def __init__(self, upstream: Sequence[T], comparator: Comparer[T]):
        require_sequence(upstream, "sort this sequence")
        require_callable(comparator, "comparator", "sort this sequence")
        self._upstream = upstream
        self._comparator = comparator

    def create_cursor(self) -> Cursor[T]:
        return _SortedCursor(self._upstream.create_cursor(), self._comparator)


def key_comparator(key_selector: KeySelector[T, K], descending: bool = False) -> Comparer[T]:
    """build a comparator that orders elements by an extracted key"""

    def compare(left: T, right: T) -> int:
        left_key, right_key = key_selector(left), key_selector(right)
        if descending:
            left_key, right_key = right_key, left_key
        if left_key < right_key: return -1
        if right_key < left_key: return 1
        return 0

    return compare


# --- group ---

class Group(IterableSequence[T], Generic[K, T]):
    """
    a grouping key plus the elements that mapped to it, in their original order.
    a group is itself a sequence, so it can be chained like any other.
    """

    def __init__(self, key: K, elements: List[T]):
        super().__init__(elements)
        self.key = key

    @property
    def elements(self) -> List[T]:
        return list(self._source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.key == other.key and list(self._source) == list(other._source)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, elements={list(self._source)!r})"


class _GroupedCursor(_BufferedCursor['Group[K, T]']):
    def __init__(self, upstream: Cursor[T], key_selector: KeySelector[T, K]):
        super().__init__(upstream)
        self._key_selector = key_selector

    def _materialize(self, items: List[T]) -> List['Group[K, T]']:
        # dicts keep insertion order, which is first-occurrence order of each key
        buckets: Dict[K, List[T]] = {}
        for item in items:
            buckets.setdefault(self._key_selector(item), []).append(item)
        logger.debug("grouped %d elements into %d groups", len(items), len(buckets))
        return [Group(key, members) for key, members in buckets.items()]


class GroupedSequence(Sequence['Group[K, T]']):
    """stable grouping: one Group per distinct key, in order of first occurrence"""

    def __init__(self, upstream: Sequence[T], key_selector: KeySelector[T, K]):
        require_sequence(upstream, "group this sequence")
        require_callable(key_selector, "key selector", "group this sequence")
        self._upstream = upstream
        self._key_selector = key_selector

    def create_cursor(self) -> Cursor['Group[K, T]']:
        return _GroupedCursor(self._upstream.create_cursor(), self._key_selector)
