from __future__ import annotations

from collections.abc import Iterable as _IterableABC
from .types import *
from .errors import InvalidArgumentError
from .sequence import Sequence, LookaheadCursor, _DONE


# --- empty ---

class _EmptyCursor(LookaheadCursor[T]):
    def _fetch(self) -> Any:
        return _DONE


class EmptySequence(Sequence[T]):
    """a sequence without elements"""

    def create_cursor(self) -> LookaheadCursor[T]:
        return _EmptyCursor()


# --- singleton ---

class _SingletonCursor(LookaheadCursor[T]):
    def __init__(self, value: T):
        super().__init__()
        self._value = value
        self._served = False

    def _fetch(self) -> Any:
        if self._served:
            return _DONE
        self._served = True
        return self._value


class SingletonSequence(Sequence[T]):
    """a sequence of exactly one element (which may be None)"""

    def __init__(self, value: T):
        self._value = value

    def create_cursor(self) -> LookaheadCursor[T]:
        return _SingletonCursor(self._value)

    def _describe(self) -> str:
        return repr(self._value)


# --- any python iterable ---

class _IterableCursor(LookaheadCursor[T]):
    def __init__(self, iterator: Iterator[T]):
        super().__init__()
        self._iterator = iterator

    def _fetch(self) -> Any:
        return next(self._iterator, _DONE)


class IterableSequence(Sequence[T]):
    """
    wraps an external iterable. each cursor calls iter() on the source again,
    so lists, tuples, ranges and dicts can be traversed any number of times.
    single-pass sources (generators, file objects, iterators) only yield their
    elements on the first traversal; later traversals see them exhausted.
    """

    def __init__(self, source: Iterable[T]):
        if source is None:
            raise InvalidArgumentError("unable to create a sequence because the source is None")
        if not isinstance(source, _IterableABC):
            raise InvalidArgumentError(f"unable to create a sequence from a non-iterable {type(source).__name__}")
        self._source = source

    def create_cursor(self) -> LookaheadCursor[T]:
        return _IterableCursor(iter(self._source))

    def _describe(self) -> str:
        return type(self._source).__name__
