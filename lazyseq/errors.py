import operator
from typing import Any, Callable, Optional, Tuple, Type, Union


class LazySeqError(Exception):
    """base class for every error raised by lazyseq itself."""


class InvalidArgumentError(LazySeqError, ValueError):
    """a required argument was missing or out of range when an operation was built or called."""


class CastError(LazySeqError, TypeError):
    """an element pulled through cast() (or flatten()) did not have the expected type."""

    def __init__(self, element: Any, target: Union[Type[Any], Tuple[Type[Any], ...], str]):
        self.element = element
        self.target = target
        target_name = target if isinstance(target, str) else _type_name(target)
        super().__init__(f"cannot cast element {element!r} of type {type(element).__name__} to {target_name}")


class SequenceExhaustedError(LazySeqError, LookupError):
    """next() was called on a cursor that has no elements left."""


# --- argument checks, run before any traversal begins ---

def require_callable(func: Optional[Callable], name: str, operation: str) -> None:
    if func is None:
        raise InvalidArgumentError(f"unable to {operation} because the {name} is None")
    if not callable(func):
        raise InvalidArgumentError(f"unable to {operation} because the {name} is not callable: {func!r}")


def require_sequence(upstream: Any, operation: str) -> None:
    from .sequence import Sequence
    if not isinstance(upstream, Sequence):
        raise InvalidArgumentError(f"unable to {operation} because the upstream is not a sequence: {upstream!r}")


def require_count(count: Any, operation: str) -> int:
    # bool is an int subclass but never a meaningful count
    if isinstance(count, bool):
        raise InvalidArgumentError(f"unable to {operation} because the count is not an int: {count!r}")
    try:
        # accepts ints and integer-like values such as numpy.int64
        count = operator.index(count)
    except TypeError:
        raise InvalidArgumentError(f"unable to {operation} because the count is not an int: {count!r}") from None
    if count < 0:
        raise InvalidArgumentError(f"unable to {operation} because the count is negative: {count}")
    return count


def require_type(target: Any, operation: str) -> None:
    targets = target if isinstance(target, tuple) else (target,)
    if not targets or not all(isinstance(t, type) for t in targets):
        raise InvalidArgumentError(f"unable to {operation} because {target!r} is not a type")


def _type_name(target: Union[Type[Any], Tuple[Type[Any], ...]]) -> str:
    if isinstance(target, tuple):
        return " | ".join(t.__name__ for t in target)
    return target.__name__
