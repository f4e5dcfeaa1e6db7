"""
Adapters for turning standard Python objects into lazy sequences.

This module provides the entry points of the library: wrap() for existing
collections and cursors, and a few factories for generated sequences.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator, Sequence
from numbers import Real
from typing import Any, TypeVar, overload

from .core import Seq
from .producers import (
    FactoryProducer,
    IterableProducer,
    IteratorProducer,
    ListProducer,
    RangeProducer,
)
from .protocols import IndexedProducer, Producer

T = TypeVar("T")


class SourceSeq(Seq[T]):
    """
    Sequence at the root of a chain, created from a producer.

    The producer decides restartability; SourceSeq only forwards opens to it
    and exposes the materialized data of indexed producers.
    """

    def __init__(self, producer: Producer[T]):
        """
        Create a sequence from a producer.

        Args:
            producer: The producer to wrap
        """
        self.producer = producer

    def open(self) -> Iterator[T]:
        """Open a cursor through the producer."""
        return self.producer.into_iter()

    def indexed(self) -> Sequence[T] | None:
        if isinstance(self.producer, IndexedProducer):
            return self.producer.data
        return None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} over {type(self.producer).__name__}>"


@overload
def wrap[T](source: Seq[T]) -> Seq[T]: ...


@overload
def wrap[T](source: Iterable[T]) -> Seq[T]: ...


def wrap[T](source: Iterable[T]) -> Seq[T]:
    """
    Wrap a collection or a cursor into a lazy sequence.

    Nothing is copied or consumed here. Sequences (lists, tuples, strings,
    ranges) and other containers give a restartable Seq; iterators and
    generator objects give a single-shot Seq.

    Args:
        source: A Seq, any sequence or container, or an iterator

    Returns:
        A Seq over the source (the source itself if it already is one)

    Raises:
        TypeError: If the source is not iterable

    Example:
        >>> from lazyiter import wrap
        >>> wrap([5, 6, 7, 8]).map(lambda x: x + 1).to_list()
        [6, 7, 8, 9]
    """
    if isinstance(source, Seq):
        return source
    elif isinstance(source, range):
        return SourceSeq(RangeProducer(source.start, source.stop, source.step))
    elif isinstance(source, Sequence):
        return SourceSeq(ListProducer(source))
    elif isinstance(source, Iterator):
        return SourceSeq(IteratorProducer(source))
    elif isinstance(source, Iterable):
        return SourceSeq(IterableProducer(source))
    else:
        raise TypeError(f"Cannot wrap non-iterable {type(source).__name__}")


into_seq = wrap


def from_opener[T](opener: Callable[[], Iterable[T]]) -> Seq[T]:
    """
    Create a restartable sequence from a function that opens a cursor.

    The function is called on every traversal, so a generator function
    gives a sequence that can be iterated any number of times.

    Args:
        opener: Zero-argument function returning a fresh iterable

    Example:
        >>> def numbers():
        ...     yield from (1, 2, 3)
        >>> seq = from_opener(numbers)
        >>> seq.sum(), seq.sum()
        (6, 6)
    """
    return SourceSeq(FactoryProducer(opener))


def _stepped(start: Real, stop: Real, step: Real, inclusive: bool) -> Callable[[], Iterator[Any]]:
    def generate() -> Iterator[Any]:
        # Values are computed from the index so float steps do not drift
        for index in itertools.count():
            value = start + index * step
            if step > 0:
                if value > stop or (value == stop and not inclusive):
                    return
            elif value < stop or (value == stop and not inclusive):
                return
            yield value

    return generate


def seq_range(start: Real, stop: Real, step: Real = 1) -> Seq[Any]:
    """
    Create a sequence over a half-open numeric range.

    Integer bounds are backed by ``range`` (O(1) length and random access);
    float bounds or steps are generated on demand.

    Args:
        start: Starting value (inclusive)
        stop: Ending value (exclusive)
        step: Step size (default 1)

    Raises:
        ValueError: If step is zero

    Example:
        >>> from lazyiter import seq_range
        >>> seq_range(0, 10).filter(lambda x: x % 3 == 0).to_list()
        [0, 3, 6, 9]
    """
    if step == 0:
        raise ValueError("Range step cannot be zero")
    if all(isinstance(value, int) for value in (start, stop, step)):
        return SourceSeq(RangeProducer(start, stop, step))
    return from_opener(_stepped(start, stop, step, inclusive=False))


def seq_range_inclusive(start: Real, stop: Real, step: Real = 1) -> Seq[Any]:
    """Create a sequence over a closed numeric range (stop included)."""
    if step == 0:
        raise ValueError("Range step cannot be zero")
    if all(isinstance(value, int) for value in (start, stop, step)):
        return SourceSeq(RangeProducer(start, stop + (1 if step > 0 else -1), step))
    return from_opener(_stepped(start, stop, step, inclusive=True))


def repeat[T](item: T, times: int | None = None) -> Seq[T]:
    """
    Create a sequence repeating one item.

    Args:
        item: The item to repeat
        times: Number of repetitions, or None for an endless sequence
    """
    if times is None:
        return from_opener(lambda: itertools.repeat(item))
    return from_opener(lambda: itertools.repeat(item, max(times, 0)))


def empty() -> Seq[Any]:
    """Create an empty, restartable sequence."""
    return SourceSeq(ListProducer(()))
