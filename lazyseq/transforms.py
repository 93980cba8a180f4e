from __future__ import annotations

from collections.abc import Iterable as _IterableABC
from .types import *
from .errors import CastError, require_callable, require_count, require_sequence, require_type
from .sequence import Sequence, Cursor, LookaheadCursor, _DONE


# --- map ---

class _MappedCursor(LookaheadCursor[U]):
    def __init__(self, upstream: Cursor[T], selector: Selector[T, U]):
        super().__init__()
        self._upstream = upstream
        self._selector = selector

    def _fetch(self) -> Any:
        if not self._upstream.has_next():
            return _DONE
        return self._selector(self._upstream.next())


class MappedSequence(Sequence[U]):
    """applies a selector to every element as it is pulled"""

    def __init__(self, upstream: Sequence[T], selector: Selector[T, U]):
        require_sequence(upstream, "map this sequence")
        require_callable(selector, "mapper", "map this sequence")
        self._upstream = upstream
        self._selector = selector

    def create_cursor(self) -> Cursor[U]:
        return _MappedCursor(self._upstream.create_cursor(), self._selector)


# --- filter ---

class _FilteredCursor(LookaheadCursor[T]):
    def __init__(self, upstream: Cursor[T], predicate: Predicate[T]):
        super().__init__()
        self._upstream = upstream
        self._predicate = predicate

    def _fetch(self) -> Any:
        while self._upstream.has_next():
            item = self._upstream.next()
            if self._predicate(item):
                return item
        return _DONE


class FilteredSequence(Sequence[T]):
    """keeps only the elements that satisfy a predicate"""

    def __init__(self, upstream: Sequence[T], predicate: Predicate[T]):
        require_sequence(upstream, "filter this sequence")
        require_callable(predicate, "predicate", "filter this sequence")
        self._upstream = upstream
        self._predicate = predicate

    def create_cursor(self) -> Cursor[T]:
        return _FilteredCursor(self._upstream.create_cursor(), self._predicate)


# --- cast ---

class _CastCursor(LookaheadCursor[U]):
    def __init__(self, upstream: Cursor[T], target: TypeFilter[U]):
        super().__init__()
        self._upstream = upstream
        self._target = target

    def _fetch(self) -> Any:
        if not self._upstream.has_next():
            return _DONE
        item = self._upstream.next()
        if not isinstance(item, self._target):
            raise CastError(item, self._target)
        return item


class CastSequence(Sequence[U]):
    """
    checks every element against a type when it is pulled.
    the check is lazy: an incompatible element only fails the traversal that reaches it.
    """

    def __init__(self, upstream: Sequence[T], target: TypeFilter[U]):
        require_sequence(upstream, "cast this sequence")
        require_type(target, "cast this sequence")
        self._upstream = upstream
        self._target = target

    def create_cursor(self) -> Cursor[U]:
        return _CastCursor(self._upstream.create_cursor(), self._target)

    def _describe(self) -> str:
        return repr(self._target)


# --- skip / take ---

class _SkipCursor(LookaheadCursor[T]):
    def __init__(self, upstream: Cursor[T], count: int):
        super().__init__()
        self._upstream = upstream
        self._to_skip = count

    def _fetch(self) -> Any:
        while self._to_skip > 0 and self._upstream.has_next():
            self._upstream.next()
            self._to_skip -= 1
        self._to_skip = 0
        return self._upstream.next() if self._upstream.has_next() else _DONE


class SkipSequence(Sequence[T]):
    """drops the first `count` elements"""

    def __init__(self, upstream: Sequence[T], count: int):
        require_sequence(upstream, "skip elements of this sequence")
        self._count = require_count(count, "skip elements of this sequence")
        self._upstream = upstream

    def create_cursor(self) -> Cursor[T]:
        return _SkipCursor(self._upstream.create_cursor(), self._count)

    def _describe(self) -> str:
        return str(self._count)


class _TakeCursor(LookaheadCursor[T]):
    def __init__(self, upstream: Cursor[T], count: int):
        super().__init__()
        self._upstream = upstream
        self._remaining = count

    def _fetch(self) -> Any:
        # never touch upstream once the quota is used up
        if self._remaining <= 0 or not self._upstream.has_next():
            return _DONE
        self._remaining -= 1
        return self._upstream.next()


class TakeSequence(Sequence[T]):
    """yields at most `count` elements"""

    def __init__(self, upstream: Sequence[T], count: int):
        require_sequence(upstream, "take elements of this sequence")
        self._count = require_count(count, "take elements of this sequence")
        self._upstream = upstream

    def create_cursor(self) -> Cursor[T]:
        return _TakeCursor(self._upstream.create_cursor(), self._count)

    def _describe(self) -> str:
        return str(self._count)


# --- flatten ---

def _open_inner(inner: Any) -> Cursor[Any]:
    if isinstance(inner, Sequence):
        return inner.create_cursor()
    if isinstance(inner, _IterableABC):
        from .sources import IterableSequence
        return IterableSequence(inner).create_cursor()
    raise CastError(inner, "a sequence or iterable")


class _FlattenedCursor(LookaheadCursor[T]):
    def __init__(self, outer: Cursor[Any]):
        super().__init__()
        self._outer = outer
        self._inner: Optional[Cursor[T]] = None

    def _fetch(self) -> Any:
        # advance outward only when the current inner cursor runs dry
        while self._inner is None or not self._inner.has_next():
            if not self._outer.has_next():
                self._inner = None
                return _DONE
            self._inner = _open_inner(self._outer.next())
        return self._inner.next()


class FlattenedSequence(Sequence[T]):
    """
    collapses a sequence of sequences into one. inner elements may be
    sequences or plain python iterables; each is opened only when reached.
    """

    def __init__(self, upstream: Sequence[Any]):
        require_sequence(upstream, "flatten this sequence")
        self._upstream = upstream

    def create_cursor(self) -> Cursor[T]:
        return _FlattenedCursor(self._upstream.create_cursor())
