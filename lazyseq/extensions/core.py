from __future__ import annotations
import typing
from ..types import *
from ..errors import InvalidArgumentError, require_callable, require_type

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class _CoreOperations(Generic[T]):
    def map(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..transforms import MappedSequence
        return MappedSequence(self, selector)

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep elements that satisfy the predicate"""
        from ..transforms import FilteredSequence
        return FilteredSequence(self, predicate)

    def cast(self: 'Sequence[T]', target: TypeFilter[U]) -> 'Sequence[U]':
        """
        assert every element is an instance of target. the check runs as each
        element is pulled, raising CastError on the first mismatch.
        """
        from ..transforms import CastSequence
        return CastSequence(self, target)

    def of_class(self: 'Sequence[T]', target: TypeFilter[U]) -> 'Sequence[U]':
        """keep only instances of target; the cast after the filter can never fail"""
        require_type(target, "filter this sequence by class")
        return self.filter(lambda item: isinstance(item, target)).cast(target)

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        from ..transforms import SkipSequence
        return SkipSequence(self, count)

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        from ..transforms import TakeSequence
        return TakeSequence(self, count)

    def flat_map(self: 'Sequence[T]', selector: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """project each element to a sequence and flatten the results"""
        from ..transforms import FlattenedSequence
        require_callable(selector, "mapper", "flat map this sequence")
        return FlattenedSequence(self.map(selector))

    def flatten(self: 'Sequence[Iterable[U]]') -> 'Sequence[U]':
        """collapse a sequence of sequences (or iterables) into one"""
        from ..transforms import FlattenedSequence
        return FlattenedSequence(self)

    def concat(self: 'Sequence[T]', *others: Iterable[T]) -> 'Sequence[T]':
        """this sequence followed by each of the others, in order"""
        from ..factories import concat
        if any(other is None for other in others):
            raise InvalidArgumentError("unable to concat because one of the sequences is None")
        return concat(self, *others)
