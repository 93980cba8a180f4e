from __future__ import annotations

import typing
from abc import ABC, abstractmethod
from .types import *
from .errors import SequenceExhaustedError

# --- operations mixed into every sequence ---
from .extensions.core import _CoreOperations
from .extensions.ordering import _OrderingOperations
from .extensions.grouping import _GroupingOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

# marks "no element" inside cursors so that None stays a legal element
_DONE: Any = object()


# --- traversal cursor protocol ---

class Cursor(ABC, Generic[T]):
    """
    a single, one-shot traversal over a sequence.
    cursors are created fresh by Sequence.create_cursor() and are never shared
    between traversals. they also speak the python iterator protocol, so
    `for x in cursor` works.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """true if next() will return an element"""
        pass

    @abstractmethod
    def next(self) -> T:
        """return the next element, raising SequenceExhaustedError if there is none"""
        pass

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class LookaheadCursor(Cursor[T]):
    """
    cursor that works out its next element inside has_next() and buffers it.
    subclasses implement _fetch(), returning the next element or _DONE.
    at most one element is ever buffered ahead.
    """

    def __init__(self):
        self._pending: Any = _DONE
        self._finished = False

    @abstractmethod
    def _fetch(self) -> Any:
        pass

    def has_next(self) -> bool:
        if self._pending is not _DONE:
            return True
        if self._finished:
            return False
        self._pending = self._fetch()
        if self._pending is _DONE:
            self._finished = True
            return False
        return True

    def next(self) -> T:
        if not self.has_next():
            raise SequenceExhaustedError(f"{type(self).__name__} has no more elements")
        item, self._pending = self._pending, _DONE
        return item


# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def create_cursor(self) -> Cursor[T]:
        """open a fresh traversal over the elements"""
        pass


# --- main sequence class ---

class Sequence(
    ISequence[T],
    _CoreOperations[T],
    _OrderingOperations[T],
    _GroupingOperations[T],
    _TerminalOperations[T]
):
    """
    a lazy, re-traversable sequence. building a pipeline never reads an element;
    every terminal call (or every `iter()`) walks the whole chain again from the source.
    """

    # variants with an upstream set this in their constructor
    _upstream: Optional['Sequence[Any]'] = None

    @property
    def to(self) -> 'TerminalAccessor[T]':
        """container conversions: seq.to.list(), seq.to.df(), ..."""
        return TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return self.create_cursor()

    def _describe(self) -> str:
        """operator parameters shown by repr, empty by default"""
        return ""

    def __repr__(self) -> str:
        parts = [repr(self._upstream)] if self._upstream is not None else []
        details = self._describe()
        if details:
            parts.append(details)
        return f"{type(self).__name__}({', '.join(parts)})"
