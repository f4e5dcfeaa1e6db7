"""
Producer implementations for common data sources.

Producers are the roots of every sequence chain. They decide whether a
sequence is restartable (a fresh cursor per open) or single-shot.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar

from .config import SeqConfig
from .errors import SourceConsumedError
from .protocols import IndexedProducer, Producer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListProducer(IndexedProducer[T]):
    """
    Producer for list-like sequences.

    This wraps lists, tuples, strings, ranges and other sequences. The
    sequence is never copied, so changes made to it by the caller are
    visible to the next traversal.
    """

    def __init__(self, data: Sequence[T]):
        """
        Create a list producer.

        Args:
            data: The sequence to iterate over
        """
        self._data = data

    @property
    def data(self) -> Sequence[T]:
        return self._data

    def __len__(self) -> int:
        """Return the number of elements in the sequence."""
        return len(self._data)

    def into_iter(self) -> Iterator[T]:
        """Open a fresh cursor over the sequence."""
        return iter(self._data)


class RangeProducer(IndexedProducer[int]):
    """
    Producer for integer ranges.

    Backed by a ``range`` object, so length and random access stay O(1)
    however large the range is.
    """

    def __init__(self, start: int, stop: int, step: int = 1):
        """
        Create a range producer.

        Args:
            start: Starting value (inclusive)
            stop: Ending value (exclusive)
            step: Step size (default 1)
        """
        if step == 0:
            raise ValueError("Range step cannot be zero")

        self.start = start
        self.stop = stop
        self.step = step
        self._range = range(start, stop, step)

    @property
    def data(self) -> range:
        return self._range

    def __len__(self) -> int:
        """Return the number of elements in this range."""
        return len(self._range)

    def into_iter(self) -> Iterator[int]:
        """Open a fresh cursor over the range."""
        return iter(self._range)


class IterableProducer(Producer[T]):
    """
    Producer for re-iterable containers that are not sequences.

    Sets, dicts, dict views and similar containers hand out a new iterator
    every time ``iter()`` is called on them, so the producer is restartable,
    but there is no random access.
    """

    def __init__(self, iterable: Iterable[T]):
        self.iterable = iterable

    def into_iter(self) -> Iterator[T]:
        return iter(self.iterable)


class FactoryProducer(Producer[T]):
    """
    Producer around a zero-argument function that opens a cursor.

    Typically the function is a generator function, so every open runs it
    again from the start.
    """

    def __init__(self, opener: Callable[[], Iterable[T]]):
        """
        Create a factory producer.

        Args:
            opener: Function returning a fresh iterable on every call
        """
        if not callable(opener):
            raise TypeError(f"Opener must be callable, got {type(opener).__name__}")
        self.opener = opener

    def into_iter(self) -> Iterator[T]:
        return iter(self.opener())


class IteratorProducer(Producer[T]):
    """
    Producer for a raw, single-use cursor such as a generator object.

    The cursor can be handed out once. What happens on a second open is
    decided by the configured single-shot policy.
    """

    def __init__(self, iterator: Iterator[T]):
        self.iterator = iterator
        self._opened = False

    @property
    def consumed(self) -> bool:
        """True once the cursor has been handed out."""
        return self._opened

    def into_iter(self) -> Iterator[T]:
        """
        Hand out the wrapped cursor.

        Returns:
            The wrapped iterator on the first call

        Raises:
            SourceConsumedError: On later calls under the ``"raise"`` policy
        """
        if not self._opened:
            self._opened = True
            logger.debug("Handing out single-shot cursor %r", self.iterator)
            return self.iterator

        if SeqConfig.global_config().single_shot_policy == "raise":
            raise SourceConsumedError(self.iterator)

        logger.debug("Re-opened single-shot cursor %r, yielding nothing", self.iterator)
        return iter(())
