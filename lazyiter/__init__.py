"""
lazyiter - Lazy, composable sequences for Python

Wrap a list, a container or a generator and chain map, filter, sort,
distinct, set operations and grouping without building intermediate
collections. Work happens only when a terminal operation pulls.
"""

from . import fp
from .adapters import (
    SourceSeq,
    empty,
    from_opener,
    into_seq,
    repeat,
    seq_range,
    seq_range_inclusive,
    wrap,
)
from .config import SeqConfig, get_single_shot_policy, set_single_shot_policy
from .core import Seq
from .errors import (
    EmptySequenceError,
    IndexOutOfRangeError,
    SeqError,
    SourceConsumedError,
)
from .grouping import Group
from .producers import (
    FactoryProducer,
    IterableProducer,
    IteratorProducer,
    ListProducer,
    RangeProducer,
)

__version__ = "0.1.0"

__all__ = [
    "Seq",
    "SourceSeq",
    "Group",
    "wrap",
    "into_seq",
    "from_opener",
    "seq_range",
    "seq_range_inclusive",
    "repeat",
    "empty",
    "fp",
    "ListProducer",
    "RangeProducer",
    "IterableProducer",
    "FactoryProducer",
    "IteratorProducer",
    "SeqConfig",
    "set_single_shot_policy",
    "get_single_shot_policy",
    "SeqError",
    "EmptySequenceError",
    "IndexOutOfRangeError",
    "SourceConsumedError",
]
