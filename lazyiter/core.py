"""
Core lazy sequence implementation.

This module contains the Seq base class, which provides the fluent chain of
lazy combinators and the terminal operations, and the small adapter classes
each combinator returns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from types import MappingProxyType
from typing import Any, TypeVar

from . import combinators
from .config import SeqConfig
from .consumers import (
    AllConsumer,
    AnyConsumer,
    CollectConsumer,
    ContainsConsumer,
    CountConsumer,
    CountSumConsumer,
    FindConsumer,
    FindIndexConsumer,
    FirstConsumer,
    ForEachConsumer,
    ForEachIndexedConsumer,
    LastConsumer,
    MaxConsumer,
    MinConsumer,
    ReduceConsumer,
    SeparatedStringConsumer,
    SequenceEqualsConsumer,
    SumConsumer,
)
from .errors import EmptySequenceError, IndexOutOfRangeError
from .grouping import Group, group_items
from .protocols import Consumer

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
R = TypeVar("R")

_MISSING = object()


def _as_seq(source: Iterable[T]) -> Seq[T]:
    from .adapters import wrap

    return wrap(source)


class Seq[T](ABC):
    """
    Base class for lazy sequences.

    A Seq owns a source opener and nothing else. Combinators such as map and
    filter return a new Seq whose opener re-opens this one, so building a
    chain does no work; terminal operations such as to_list and sum open a
    cursor and drain it.

    Whether a Seq can be traversed more than once is decided by the root of
    its chain: sequences over lists, ranges, containers and opener functions
    are restartable, sequences over a raw iterator are single-shot.
    """

    @abstractmethod
    def open(self) -> Iterator[T]:
        """
        Open a traversal cursor over this sequence.

        This is the core method that subclasses must implement. Terminal
        operations call it exactly once.

        Returns:
            An iterator over the elements
        """
        ...

    def indexed(self) -> Sequence[T] | None:
        """
        Return the materialized sequence backing this Seq, if there is one.

        Only sequences that wrap a list-like source directly return it;
        derived sequences return None.
        """
        return None

    def __iter__(self) -> Iterator[T]:
        return self.open()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"

    def drive(self, consumer: Consumer[T, R]) -> R:
        """
        Open a cursor and hand it to a consumer.

        Args:
            consumer: The consumer that will drain the cursor

        Returns:
            The result from the consumer
        """
        return consumer.consume_iter(self.open())

    # Lazy combinators

    def map(self, func: Callable[[T], U]) -> Seq[U]:
        """
        Apply a function to each element as it is pulled.

        Args:
            func: Function to apply to each element

        Returns:
            A new sequence of transformed elements
        """
        return MapSeq(self, func)

    def filter(self, predicate: Callable[[T], bool]) -> Seq[T]:
        """
        Keep only the elements that satisfy a predicate.

        Args:
            predicate: Function that returns True for elements to keep

        Returns:
            A new sequence of the kept elements, in source order
        """
        return FilterSeq(self, predicate)

    def map_indexed(self, func: Callable[[T, int], U]) -> Seq[U]:
        """
        Apply a function to each element and its 0-based position.

        Args:
            func: Function receiving an element and its position
        """
        return MapIndexedSeq(self, func)

    def filter_indexed(self, predicate: Callable[[T, int], bool]) -> Seq[T]:
        """
        Keep only the elements whose (element, position) pair satisfies a predicate.

        Positions are counted on this sequence, before filtering.
        """
        return FilterIndexedSeq(self, predicate)

    def flat_map(self, func: Callable[[T], Iterable[U]]) -> Seq[U]:
        """
        Map each element to an iterable and flatten the results one level.

        Args:
            func: Function returning the nested items of an element

        Returns:
            A new sequence of all nested items, in order
        """
        return FlatMapSeq(self, func)

    def concat(self, other: Iterable[T]) -> Seq[T]:
        """
        Append another iterable after this sequence.

        Args:
            other: A Seq, a list or any other iterable

        Returns:
            A new sequence with this sequence's items followed by other's
        """
        return ConcatSeq(self, _as_seq(other))

    def distinct(self, key: Callable[[T], Hashable] | None = None) -> Seq[T]:
        """
        Drop repeated elements, keeping the first occurrence of each key.

        Args:
            key: Optional function computing the hashable identity of an
                element (defaults to the element itself)

        Returns:
            A new sequence without duplicates, in first-seen order
        """
        return DistinctSeq(self, key)

    def sort(
        self,
        cmp: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> Seq[T]:
        """
        Sort the elements.

        The returned sequence buffers the whole upstream into a temporary
        list each time it is traversed; the source itself is never
        reordered. The sort is stable.

        Args:
            cmp: Optional 3-way comparator: negative if a goes before b,
                zero if equal, positive if a goes after b
            key: Optional key function (exclusive with cmp)
            reverse: Sort in descending order

        Returns:
            A new sorted sequence

        Raises:
            ValueError: If both cmp and key are given
        """
        if cmp is not None and key is not None:
            raise ValueError("Pass either a comparator or a key function, not both")
        return SortSeq(self, cmp, key, reverse)

    def reverse(self) -> Seq[T]:
        """
        Reverse the order of the elements.

        Walks a materialized source back to front by index; any other
        source is buffered into a temporary list first.
        """
        return ReverseSeq(self)

    def take(self, count: int) -> Seq[T]:
        """
        Keep at most the first count elements.

        Upstream is never pulled past the count-th element, which makes take
        safe on infinite sources.

        Args:
            count: Maximum number of elements (negative counts as 0)
        """
        return TakeSeq(self, count)

    def skip(self, count: int) -> Seq[T]:
        """
        Discard the first count elements.

        Args:
            count: Number of elements to discard (negative counts as 0)
        """
        return SkipSeq(self, count)

    def take_while(self, predicate: Callable[[T], bool]) -> Seq[T]:
        """
        Keep elements until the first one that fails the predicate.

        Iteration stops for good at that element, even if later ones would
        pass again.
        """
        return TakeWhileSeq(self, predicate)

    def intersect(
        self, other: Iterable[T], eq: Callable[[T, T], bool] | None = None
    ) -> Seq[T]:
        """
        Keep elements that equal at least one element of other.

        Args:
            other: Elements to compare against; materialized into a list
                on every traversal
            eq: Optional equality function (defaults to ==)

        Returns:
            A new sequence preserving this sequence's order and duplicates
        """
        return IntersectSeq(self, _as_seq(other), eq)

    def except_(
        self, other: Iterable[T], eq: Callable[[T, T], bool] | None = None
    ) -> Seq[T]:
        """
        Keep elements that equal no element of other.

        Args:
            other: Elements to compare against; materialized into a list
                on every traversal
            eq: Optional equality function (defaults to ==)

        Returns:
            A new sequence preserving this sequence's order and duplicates
        """
        return ExceptSeq(self, _as_seq(other), eq)

    def flatten(
        self, children: Callable[[T, int], Iterable[T] | None] | None = None
    ) -> Seq[T]:
        """
        Walk a nested structure depth-first and yield every node.

        Args:
            children: Function receiving a node and its level (roots are 0)
                and returning its children, or None for a leaf. Returning
                None past some level limits the depth of the walk. By
                default lists and tuples are descended into and only their
                contents are yielded.

        Returns:
            A new sequence of nodes in pre-order

        Example:
            >>> wrap([tree]).flatten(lambda node, level: node.get("content"))
        """
        return FlattenSeq(self, children)

    def flatten_map(
        self,
        children: Callable[[T, int], Iterable[T] | None] | None,
        mapper: Callable[[T, int], U],
    ) -> Seq[U]:
        """
        Walk a nested structure depth-first and map each node with its depth.

        Args:
            children: Function receiving a node and its level and returning
                its children, or None
            mapper: Function receiving a node and its level (roots are 0)
        """
        return FlattenMapSeq(self, children, mapper)

    def peek(self, action: Callable[[T], Any]) -> Seq[T]:
        """Call action on each element as it passes, yielding it unchanged."""
        return PeekSeq(self, action)

    def enumerate(self, start: int = 0) -> Seq[tuple[int, T]]:
        """Pair each element with its position."""
        return EnumerateSeq(self, start)

    # Terminal operations

    def reduce(self, reduce_op: Callable[[R, T], R], initial: R) -> R:
        """
        Fold all elements left to right into a single value.

        Args:
            reduce_op: Function combining the accumulator with an element
            initial: Starting accumulator value

        Returns:
            The final accumulator value
        """
        return self.drive(ReduceConsumer(reduce_op, initial))

    def for_each(self, func: Callable[[T], Any]) -> None:
        """
        Execute a function on each element.

        Args:
            func: Function to execute for each element
        """
        self.drive(ForEachConsumer(func))

    def for_each_indexed(self, func: Callable[[T, int], Any]) -> None:
        """Execute a function on each element and its 0-based position."""
        self.drive(ForEachIndexedConsumer(func))

    def find(self, predicate: Callable[[T], bool], default: Any = None) -> T | Any:
        """
        Return the first element satisfying the predicate.

        Returns:
            The element, or default if none matches
        """
        return self.drive(FindConsumer(predicate, default))

    def find_index(self, predicate: Callable[[T], bool]) -> int:
        """
        Return the 0-based position of the first element satisfying the predicate.

        Returns:
            The position, or -1 if none matches
        """
        return self.drive(FindIndexConsumer(predicate))

    def get_first(self, predicate: Callable[[T], bool]) -> T:
        """
        Return the first element satisfying the predicate.

        Raises:
            EmptySequenceError: If no element matches
        """
        result = self.drive(FindConsumer(predicate, _MISSING))
        if result is _MISSING:
            raise EmptySequenceError("No element satisfies the predicate")
        return result

    def some(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """
        Check whether any element satisfies the predicate.

        Stops at the first match; false for an empty sequence.
        """
        return self.drive(AnyConsumer(predicate))

    def every(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """
        Check whether all elements satisfy the predicate.

        Stops at the first failure; true for an empty sequence.
        """
        return self.drive(AllConsumer(predicate))

    def contains(self, value: T) -> bool:
        """Check membership by value equality, stopping at the first match."""
        return self.drive(ContainsConsumer(value))

    def is_empty(self) -> bool:
        """True if the first pull finds no element."""
        return self.drive(FirstConsumer(_MISSING)) is _MISSING

    def length(self) -> int:
        """
        Count the elements.

        O(1) for a materialized source, otherwise the sequence is drained.
        """
        data = self.indexed()
        if data is not None:
            return len(data)
        return self.drive(CountConsumer())

    def head(self) -> T:
        """
        Return the first element.

        Raises:
            EmptySequenceError: If the sequence is empty
        """
        result = self.try_get_head(_MISSING)
        if result is _MISSING:
            raise EmptySequenceError()
        return result

    def try_get_head(self, default: Any = None) -> T | Any:
        """Return the first element, or default if the sequence is empty."""
        return self.drive(FirstConsumer(default))

    def tail(self) -> T:
        """
        Return the last element.

        Raises:
            EmptySequenceError: If the sequence is empty
        """
        result = self.try_get_tail(_MISSING)
        if result is _MISSING:
            raise EmptySequenceError()
        return result

    def try_get_tail(self, default: Any = None) -> T | Any:
        """
        Return the last element, or default if the sequence is empty.

        O(1) for a materialized source, otherwise the sequence is drained.
        """
        data = self.indexed()
        if data is not None:
            return data[-1] if len(data) > 0 else default
        return self.drive(LastConsumer(default))

    def get_at(self, index: int) -> T:
        """
        Return the element at a 0-based position.

        Raises:
            IndexOutOfRangeError: If index is negative or past the end
        """
        result = self.try_get_at(index, _MISSING)
        if result is _MISSING:
            raise IndexOutOfRangeError(index)
        return result

    def try_get_at(self, index: int, default: Any = None) -> T | Any:
        """
        Return the element at a 0-based position, or default.

        Negative indexes never count from the end; they always give default.
        """
        if index < 0:
            return default
        data = self.indexed()
        if data is not None:
            return data[index] if index < len(data) else default
        return self.skip(index).try_get_head(default)

    def sum(self, mapper: Callable[[T], Any] | None = None) -> Any:
        """
        Sum the (mapped) elements.

        Returns:
            The total, 0 for an empty sequence
        """
        return self.drive(SumConsumer(mapper))

    def min(self, mapper: Callable[[T], Any] | None = None, default: Any = None) -> Any:
        """
        Find the smallest (mapped) value.

        Returns:
            The minimum, or default if the sequence is empty
        """
        return self.drive(MinConsumer(mapper, default))

    def max(self, mapper: Callable[[T], Any] | None = None, default: Any = None) -> Any:
        """
        Find the largest (mapped) value.

        Returns:
            The maximum, or default if the sequence is empty
        """
        return self.drive(MaxConsumer(mapper, default))

    def count_sum(self, mapper: Callable[[T], Any] | None = None) -> tuple[int, Any]:
        """Count and sum the (mapped) elements in a single pass."""
        return self.drive(CountSumConsumer(mapper))

    def sequence_equals(
        self, other: Iterable[T], eq: Callable[[T, T], bool] | None = None
    ) -> bool:
        """
        Compare with another iterable element by element.

        Args:
            other: Iterable to compare against
            eq: Optional equality function (defaults to ==)

        Returns:
            True if both have the same length and all pairs are equal
        """
        return self.drive(SequenceEqualsConsumer(other, eq))

    def to_list(self) -> list[T]:
        """
        Collect all elements into a new list.

        Returns:
            A list containing all elements, in order
        """
        return self.drive(CollectConsumer())

    def to_tuple(self) -> tuple[T, ...]:
        """Collect all elements into a tuple."""
        return tuple(self.open())

    def to_set(self) -> set[T]:
        """Collect all elements into a set."""
        return set(self.open())

    def to_frozenset(self) -> frozenset[T]:
        """Collect all elements into a frozenset."""
        return frozenset(self.open())

    def to_map(self, key: Callable[[T], K]) -> dict[K, list[T]]:
        """
        Group the elements into a dict of key to list of elements.

        Args:
            key: Function computing the hashable key of an element

        Returns:
            A dict in first-seen key order; each list keeps source order
        """
        return group_items(self.open(), key)

    def to_readonly_map(self, key: Callable[[T], K]) -> MappingProxyType[K, list[T]]:
        """Like to_map, behind a read-only mapping proxy."""
        return MappingProxyType(self.to_map(key))

    def group_by(self, key: Callable[[T], K]) -> Seq[Group[K, T]]:
        """
        Group the elements by key.

        The source is drained immediately; the result is a restartable
        sequence of groups.

        Args:
            key: Function computing the hashable key of an element

        Returns:
            A sequence of Group(key, items) in first-seen key order
        """
        groups = self.to_map(key)
        return _as_seq([Group(group_key, _as_seq(items)) for group_key, items in groups.items()])

    def to_separated_string(
        self,
        separator: str | None = None,
        convert: Callable[[T], str | None] | None = None,
        *,
        skip_none: bool = True,
    ) -> str:
        """
        Join the elements into one string.

        Args:
            separator: Text placed between elements (defaults to the
                configured default separator, ", ")
            convert: Optional function turning an element into text
                (defaults to str); returning None leaves the element out
            skip_none: Leave out None elements

        Returns:
            The joined string
        """
        if separator is None:
            separator = SeqConfig.global_config().default_separator
        return self.drive(SeparatedStringConsumer(separator, convert, skip_none))


# Concrete sequence adapters


class MapSeq[T, U](Seq[U]):
    """Sequence that maps a function over elements."""

    def __init__(self, base: Seq[T], func: Callable[[T], U]):
        self.base = base
        self.func = func

    def open(self) -> Iterator[U]:
        return map(self.func, self.base.open())


class FilterSeq(Seq[T]):
    """Sequence that filters elements by a predicate."""

    def __init__(self, base: Seq[T], predicate: Callable[[T], bool]):
        self.base = base
        self.predicate = predicate

    def open(self) -> Iterator[T]:
        return (item for item in self.base.open() if self.predicate(item))


class MapIndexedSeq[T, U](Seq[U]):
    """Sequence that maps a function over elements and their positions."""

    def __init__(self, base: Seq[T], func: Callable[[T, int], U]):
        self.base = base
        self.func = func

    def open(self) -> Iterator[U]:
        return combinators.map_indexed_iter(self.base.open(), self.func)


class FilterIndexedSeq(Seq[T]):
    """Sequence that filters elements by a predicate on element and position."""

    def __init__(self, base: Seq[T], predicate: Callable[[T, int], bool]):
        self.base = base
        self.predicate = predicate

    def open(self) -> Iterator[T]:
        return combinators.filter_indexed_iter(self.base.open(), self.predicate)


class FlatMapSeq[T, U](Seq[U]):
    """Sequence that flattens the iterables a function returns."""

    def __init__(self, base: Seq[T], func: Callable[[T], Iterable[U]]):
        self.base = base
        self.func = func

    def open(self) -> Iterator[U]:
        return combinators.flat_map_iter(self.base.open(), self.func)


class ConcatSeq(Seq[T]):
    """Sequence that yields one sequence after another."""

    def __init__(self, first: Seq[T], second: Seq[T]):
        self.first = first
        self.second = second

    def open(self) -> Iterator[T]:
        first = self.first.open()

        def chained() -> Iterator[T]:
            yield from first
            yield from self.second.open()

        return chained()


class DistinctSeq(Seq[T]):
    """Sequence that drops repeated keys."""

    def __init__(self, base: Seq[T], key: Callable[[T], Hashable] | None):
        self.base = base
        self.key = key

    def open(self) -> Iterator[T]:
        return combinators.distinct_iter(self.base.open(), self.key)


class SortSeq(Seq[T]):
    """Sequence that buffers and sorts its upstream on every traversal."""

    def __init__(
        self,
        base: Seq[T],
        cmp: Callable[[T, T], int] | None,
        key: Callable[[T], Any] | None,
        reverse: bool,
    ):
        self.base = base
        self.cmp = cmp
        self.key = key
        self.descending = reverse

    def open(self) -> Iterator[T]:
        return combinators.sort_iter(self.base.open(), self.cmp, self.key, self.descending)


class ReverseSeq(Seq[T]):
    """Sequence that yields its upstream back to front."""

    def __init__(self, base: Seq[T]):
        self.base = base

    def open(self) -> Iterator[T]:
        data = self.base.indexed()
        if data is not None:
            return combinators.reverse_indexed(data)
        return combinators.reverse_iter(self.base.open())


class TakeSeq(Seq[T]):
    """Sequence limited to the first count elements."""

    def __init__(self, base: Seq[T], count: int):
        self.base = base
        self.count = count

    def open(self) -> Iterator[T]:
        # Nothing to take: leave upstream unopened
        if self.count <= 0:
            return iter(())
        return combinators.take_iter(self.base.open(), self.count)


class SkipSeq(Seq[T]):
    """Sequence without its first count elements."""

    def __init__(self, base: Seq[T], count: int):
        self.base = base
        self.count = count

    def open(self) -> Iterator[T]:
        data = self.base.indexed()
        if data is not None:
            return combinators.skip_indexed(data, self.count)
        return combinators.skip_iter(self.base.open(), self.count)


class TakeWhileSeq(Seq[T]):
    """Sequence that stops at the first element failing a predicate."""

    def __init__(self, base: Seq[T], predicate: Callable[[T], bool]):
        self.base = base
        self.predicate = predicate

    def open(self) -> Iterator[T]:
        return combinators.take_while_iter(self.base.open(), self.predicate)


class IntersectSeq(Seq[T]):
    """Sequence of elements that have a match in another sequence."""

    def __init__(self, base: Seq[T], other: Seq[T], eq: Callable[[T, T], bool] | None):
        self.base = base
        self.other = other
        self.eq = eq

    def open(self) -> Iterator[T]:
        return combinators.intersect_iter(self.base.open(), self.other, self.eq)


class ExceptSeq(Seq[T]):
    """Sequence of elements that have no match in another sequence."""

    def __init__(self, base: Seq[T], other: Seq[T], eq: Callable[[T, T], bool] | None):
        self.base = base
        self.other = other
        self.eq = eq

    def open(self) -> Iterator[T]:
        return combinators.except_iter(self.base.open(), self.other, self.eq)


class FlattenSeq(Seq[T]):
    """Sequence of all nodes of a nested structure."""

    def __init__(self, base: Seq[T], children: Callable[[T, int], Iterable[T] | None] | None):
        self.base = base
        self.children = children

    def open(self) -> Iterator[T]:
        return combinators.flatten_iter(self.base.open(), self.children)


class FlattenMapSeq[T, U](Seq[U]):
    """Sequence of mapped nodes of a nested structure."""

    def __init__(
        self,
        base: Seq[T],
        children: Callable[[T, int], Iterable[T] | None] | None,
        mapper: Callable[[T, int], U],
    ):
        self.base = base
        self.children = children
        self.mapper = mapper

    def open(self) -> Iterator[U]:
        return combinators.flatten_map_iter(self.base.open(), self.children, self.mapper)


class PeekSeq(Seq[T]):
    """Sequence that calls an action on each element as it passes."""

    def __init__(self, base: Seq[T], action: Callable[[T], Any]):
        self.base = base
        self.action = action

    def open(self) -> Iterator[T]:
        return combinators.peek_iter(self.base.open(), self.action)


class EnumerateSeq(Seq[tuple[int, T]]):
    """Sequence of (position, element) pairs."""

    def __init__(self, base: Seq[T], start: int):
        self.base = base
        self.start = start

    def open(self) -> Iterator[tuple[int, T]]:
        return enumerate(self.base.open(), self.start)
