import typing
from .types import *
from .errors import InvalidArgumentError, require_count

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(data: Iterable[T]) -> 'Sequence[T]':
    """create a sequence over an iterable; nothing is read until traversal"""
    from .sources import IterableSequence
    return IterableSequence(data)

def of(*items: T) -> 'Sequence[T]':
    """create a sequence of the given elements"""
    return from_iterable(items)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sources import EmptySequence
    return EmptySequence()

def singleton(item: T) -> 'Sequence[T]':
    """create a sequence of exactly one element"""
    from .sources import SingletonSequence
    return SingletonSequence(item)

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence of `count` consecutive ints starting at `start`"""
    count = require_count(count, "create a range sequence")
    return from_iterable(range(start, start + count))

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with the item repeated `count` times"""
    count = require_count(count, "create a repeated sequence")
    return from_range(0, count).map(lambda _: item)

def concat(*sequences: Iterable[T]) -> 'Sequence[T]':
    """
    chain sequences end to end. plain iterables are accepted and wrapped.
    the result re-reads every part on each traversal.
    """
    from .sequence import Sequence
    from .transforms import FlattenedSequence
    parts = []
    for part in sequences:
        if part is None:
            raise InvalidArgumentError("unable to concat because one of the sequences is None")
        parts.append(part if isinstance(part, Sequence) else from_iterable(part))
    return FlattenedSequence(from_iterable(parts))

# --- aliases ---
seq = from_iterable
S = from_iterable
