"""
Pipe-style functional API.

Instead of chaining methods on a Seq, operators are plain functions of one
iterator, and ``pipe`` threads a source through them left to right:

    >>> from lazyiter import fp
    >>> fp.pipe([5, 6, 7, 8], fp.filter(lambda x: x > 6), fp.to_list)
    [7, 8]

A pipe works on a single cursor, so it is always single-shot. Operator
factories (``fp.map(func)``) return the operator; operators that take no
arguments (``fp.to_list``, ``fp.length``, ``fp.is_empty``) are used as is.
"""

import builtins
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from . import combinators
from .consumers import (
    AllConsumer,
    AnyConsumer,
    CollectConsumer,
    ContainsConsumer,
    CountConsumer,
    FindConsumer,
    FindIndexConsumer,
    FirstConsumer,
    ForEachConsumer,
    ForEachIndexedConsumer,
    MaxConsumer,
    MinConsumer,
    ReduceConsumer,
    SumConsumer,
)
from .errors import EmptySequenceError, IndexOutOfRangeError
from .grouping import group_items

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
R = TypeVar("R")

Operator = Callable[[Any], Any]

_MISSING = object()


def pipe(source: Iterable[Any], *ops: Operator) -> Any:
    """
    Thread a source through a series of operators.

    Args:
        source: Any iterable; it is turned into a cursor with iter()
        ops: Operators applied left to right, each receiving the previous
            result

    Returns:
        The result of the last operator (the cursor itself if there is none)
    """
    result: Any = iter(source)
    for operation in ops:
        result = operation(result)
    return result


# Lazy operators


def map(func: Callable[[T], U]) -> Callable[[Iterator[T]], Iterator[U]]:
    def operator(source: Iterator[T]) -> Iterator[U]:
        return builtins.map(func, source)

    return operator


def filter(predicate: Callable[[T], bool]) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return builtins.filter(predicate, source)

    return operator


def map_indexed(func: Callable[[T, int], U]) -> Callable[[Iterator[T]], Iterator[U]]:
    def operator(source: Iterator[T]) -> Iterator[U]:
        return combinators.map_indexed_iter(source, func)

    return operator


def filter_indexed(predicate: Callable[[T, int], bool]) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.filter_indexed_iter(source, predicate)

    return operator


def flat_map(func: Callable[[T], Iterable[U]]) -> Callable[[Iterator[T]], Iterator[U]]:
    def operator(source: Iterator[T]) -> Iterator[U]:
        return combinators.flat_map_iter(source, func)

    return operator


def concat(other: Iterable[T]) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        yield from source
        yield from other

    return operator


def distinct(key: Callable[[T], Hashable] | None = None) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.distinct_iter(source, key)

    return operator


def sort(
    cmp: Callable[[T, T], int] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> Callable[[Iterator[T]], Iterator[T]]:
    """Buffer the cursor and yield it sorted (see Seq.sort)."""

    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.sort_iter(source, cmp, key, reverse)

    return operator


def skip(count: int) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.skip_iter(source, count)

    return operator


def take(count: int) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.take_iter(source, count)

    return operator


def take_while(predicate: Callable[[T], bool]) -> Callable[[Iterator[T]], Iterator[T]]:
    def operator(source: Iterator[T]) -> Iterator[T]:
        return combinators.take_while_iter(source, predicate)

    return operator


# Terminal operators


def to_list(source: Iterator[T]) -> list[T]:
    return CollectConsumer().consume_iter(source)


def length(source: Iterator[T]) -> int:
    return CountConsumer().consume_iter(source)


def is_empty(source: Iterator[T]) -> bool:
    return FirstConsumer(_MISSING).consume_iter(source) is _MISSING


def to_map(key: Callable[[T], K]) -> Callable[[Iterator[T]], dict[K, list[T]]]:
    def operator(source: Iterator[T]) -> dict[K, list[T]]:
        return group_items(source, key)

    return operator


def for_each(action: Callable[[T], Any]) -> Callable[[Iterator[T]], None]:
    return ForEachConsumer(action).consume_iter


def for_each_indexed(action: Callable[[T, int], Any]) -> Callable[[Iterator[T]], None]:
    return ForEachIndexedConsumer(action).consume_iter


def reduce(reduce_op: Callable[[R, T], R], initial: R) -> Callable[[Iterator[T]], R]:
    return ReduceConsumer(reduce_op, initial).consume_iter


def find(predicate: Callable[[T], bool], default: Any = None) -> Callable[[Iterator[T]], Any]:
    return FindConsumer(predicate, default).consume_iter


def find_index(predicate: Callable[[T], bool]) -> Callable[[Iterator[T]], int]:
    return FindIndexConsumer(predicate).consume_iter


def some(predicate: Callable[[T], bool] | None = None) -> Callable[[Iterator[T]], bool]:
    return AnyConsumer(predicate).consume_iter


def every(predicate: Callable[[T], bool] | None = None) -> Callable[[Iterator[T]], bool]:
    return AllConsumer(predicate).consume_iter


def includes(value: T) -> Callable[[Iterator[T]], bool]:
    return ContainsConsumer(value).consume_iter


def sum(mapper: Callable[[T], Any] | None = None) -> Callable[[Iterator[T]], Any]:
    return SumConsumer(mapper).consume_iter


def min(mapper: Callable[[T], Any] | None = None, default: Any = None) -> Callable[[Iterator[T]], Any]:
    return MinConsumer(mapper, default).consume_iter


def max(mapper: Callable[[T], Any] | None = None, default: Any = None) -> Callable[[Iterator[T]], Any]:
    return MaxConsumer(mapper, default).consume_iter


def try_get_head(default: Any = None) -> Callable[[Iterator[T]], Any]:
    return FirstConsumer(default).consume_iter


def head() -> Callable[[Iterator[T]], T]:
    """Operator returning the first item; raises EmptySequenceError if there is none."""

    def operator(source: Iterator[T]) -> T:
        result = next(source, _MISSING)
        if result is _MISSING:
            raise EmptySequenceError()
        return result

    return operator


def try_get_at(index: int, default: Any = None) -> Callable[[Iterator[T]], Any]:
    def operator(source: Iterator[T]) -> Any:
        if index < 0:
            return default
        return next(combinators.skip_iter(source, index), default)

    return operator


def get_at(index: int) -> Callable[[Iterator[T]], T]:
    """Operator returning the item at index; raises IndexOutOfRangeError past the end."""

    def operator(source: Iterator[T]) -> T:
        result = try_get_at(index, _MISSING)(source)
        if result is _MISSING:
            raise IndexOutOfRangeError(index)
        return result

    return operator
