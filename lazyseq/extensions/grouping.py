from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence
    from ..materialized import Group


class _GroupingOperations(Generic[T]):
    def group_by(self: 'Sequence[T]', key_selector: KeySelector[T, K]) -> 'Sequence[Group[K, T]]':
        """
        group elements by a key. yields one Group per distinct key in order of
        first occurrence; members keep their original relative order.
        """
        from ..materialized import GroupedSequence
        return GroupedSequence(self, key_selector)
