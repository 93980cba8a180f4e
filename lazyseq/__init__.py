r"""
'    .__
'    |  | _____  ____________.__.  ______ ____   ______
'    |  | \__  \ \___   <   |  | /  ___// __ \ / ____/
'    |  |__/ __ \_/    / \___  | \___ \  ___/< <_|  |
'    |____(____  /_____ \/ ____|/____  >\___  >__   |
'              \/      \/\/          \/     \/   |__|
"""
import logging

# expose the main classes
from .sequence import Sequence, Cursor, LookaheadCursor

# expose the variants
from .sources import EmptySequence, SingletonSequence, IterableSequence
from .transforms import (
    MappedSequence,
    FilteredSequence,
    CastSequence,
    SkipSequence,
    TakeSequence,
    FlattenedSequence
)
from .materialized import SortedSequence, GroupedSequence, Group, key_comparator

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    empty,
    singleton,
    from_range,
    repeat,
    concat,
    seq,
    S
)

# expose supporting data classes and errors
from .types import Maybe
from .errors import (
    LazySeqError,
    InvalidArgumentError,
    CastError,
    SequenceExhaustedError
)

# silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "Cursor",
    "LookaheadCursor",
    "EmptySequence",
    "SingletonSequence",
    "IterableSequence",
    "MappedSequence",
    "FilteredSequence",
    "CastSequence",
    "SkipSequence",
    "TakeSequence",
    "FlattenedSequence",
    "SortedSequence",
    "GroupedSequence",
    "Group",
    "key_comparator",
    "from_iterable",
    "of",
    "empty",
    "singleton",
    "from_range",
    "repeat",
    "concat",
    "seq",
    "S",
    "Maybe",
    "LazySeqError",
    "InvalidArgumentError",
    "CastError",
    "SequenceExhaustedError"
]
