from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
TypeFilter = Union[Type[U], Tuple[Type[Any], ...]]


class Maybe(Generic[T]):
    """
    explicit optional value returned by first() and last().
    a present None is still present, so an empty sequence is never
    confused with a sequence whose element happens to be None.
    """

    __slots__ = ('_present', '_value')

    def __init__(self, present: bool, value: Optional[T] = None):
        self._present = present
        self._value = value

    @classmethod
    def some(cls, value: T) -> 'Maybe[T]':
        return cls(True, value)

    @classmethod
    def nothing(cls) -> 'Maybe[T]':
        return _NOTHING

    @property
    def is_present(self) -> bool: return self._present

    @property
    def is_empty(self) -> bool: return not self._present

    @property
    def value(self) -> T:
        """the wrapped value; raises if absent"""
        if not self._present:
            raise ValueError("maybe is empty, there is no value to unwrap")
        return self._value

    def or_else(self, default: T) -> T:
        return self._value if self._present else default

    def map(self, selector: Selector[T, U]) -> 'Maybe[U]':
        return Maybe.some(selector(self._value)) if self._present else _NOTHING

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self._present != other._present:
            return False
        return not self._present or self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        return f"Maybe.some({self._value!r})" if self._present else "Maybe.nothing()"


_NOTHING: Maybe[Any] = Maybe(False)
