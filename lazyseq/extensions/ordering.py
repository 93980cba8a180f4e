from __future__ import annotations
import typing
from ..types import *
from ..errors import require_callable

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class _OrderingOperations(Generic[T]):
    def sort(self: 'Sequence[T]', comparator: Comparer[T]) -> 'Sequence[T]':
        """
        sort with a comparator returning a negative, zero or positive int.
        lazy but greedy: nothing is read until traversal starts, then the whole
        upstream is read and sorted. every traversal sorts again.
        """
        from ..materialized import SortedSequence
        return SortedSequence(self, comparator)

    def sort_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """sort ascending by an extracted key"""
        from ..materialized import key_comparator
        require_callable(key_selector, "key selector", "sort this sequence")
        return self.sort(key_comparator(key_selector))

    def sort_by_descending(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[T]':
        """sort descending by an extracted key"""
        from ..materialized import key_comparator
        require_callable(key_selector, "key selector", "sort this sequence")
        return self.sort(key_comparator(key_selector, descending=True))
