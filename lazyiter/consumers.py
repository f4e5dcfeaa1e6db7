"""
Consumer implementations for terminal operations.

Consumers drain a cursor produced by a sequence and turn it into a concrete
value. Short-circuiting consumers stop pulling as soon as the result is
known, which leaves the rest of the upstream work undone.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")

_END = object()


def _identity(item):
    return item


class CollectConsumer[T]:
    """Consumer that collects all elements into a list."""

    def consume_iter(self, iterator: Iterator[T]) -> list[T]:
        """Collect all elements into a list."""
        return list(iterator)


class ForEachConsumer[T]:
    """Consumer that executes a function on each element."""

    def __init__(self, func: Callable[[T], Any]):
        self.func = func

    def consume_iter(self, iterator: Iterator[T]) -> None:
        """Execute function on each element."""
        for item in iterator:
            self.func(item)
        return None


class ForEachIndexedConsumer[T]:
    """Consumer that executes a function on each element and its position."""

    def __init__(self, func: Callable[[T, int], Any]):
        self.func = func

    def consume_iter(self, iterator: Iterator[T]) -> None:
        for index, item in enumerate(iterator):
            self.func(item, index)


class ReduceConsumer[T, R]:
    """Consumer that folds elements left to right into an accumulator."""

    def __init__(self, reduce_op: Callable[[R, T], R], initial: R):
        self.reduce_op = reduce_op
        self.initial = initial

    def consume_iter(self, iterator: Iterator[T]) -> R:
        """Fold all elements using the reduce operation."""
        accumulator = self.initial
        for item in iterator:
            accumulator = self.reduce_op(accumulator, item)
        return accumulator


class SumConsumer[T]:
    """Consumer that sums (mapped) numeric elements."""

    def __init__(self, mapper: Callable[[T], Any] | None = None):
        self.mapper = mapper

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        """Sum all elements, 0 for an empty cursor."""
        if self.mapper is None:
            return sum(iterator)
        return sum(self.mapper(item) for item in iterator)


class CountConsumer[T]:
    """Consumer that counts elements."""

    def consume_iter(self, iterator: Iterator[T]) -> int:
        """Count all elements."""
        count = 0
        for _ in iterator:
            count += 1
        return count


class CountSumConsumer[T]:
    """Consumer that counts and sums elements in a single pass."""

    def __init__(self, mapper: Callable[[T], Any] | None = None):
        self.mapper = mapper or _identity

    def consume_iter(self, iterator: Iterator[T]) -> tuple[int, Any]:
        count = 0
        total = 0
        for item in iterator:
            count += 1
            total += self.mapper(item)
        return count, total


class MinConsumer[T]:
    """Consumer that finds the smallest mapped value using the builtin min().

    The default is returned for an empty cursor instead of raising.
    """

    def __init__(self, mapper: Callable[[T], Any] | None = None, default: Any = None):
        self.mapper = mapper
        self.default = default

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        values = iterator if self.mapper is None else map(self.mapper, iterator)
        return min(values, default=self.default)


class MaxConsumer[T]:
    """Consumer that finds the largest mapped value using the builtin max()."""

    def __init__(self, mapper: Callable[[T], Any] | None = None, default: Any = None):
        self.mapper = mapper
        self.default = default

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        values = iterator if self.mapper is None else map(self.mapper, iterator)
        return max(values, default=self.default)


class FindConsumer[T]:
    """Consumer that stops at the first element matching a predicate."""

    def __init__(self, predicate: Callable[[T], bool], default: Any = None):
        self.predicate = predicate
        self.default = default

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        for item in iterator:
            if self.predicate(item):
                return item
        return self.default


class FindIndexConsumer[T]:
    """Consumer that returns the 0-based position of the first match, or -1."""

    def __init__(self, predicate: Callable[[T], bool]):
        self.predicate = predicate

    def consume_iter(self, iterator: Iterator[T]) -> int:
        for index, item in enumerate(iterator):
            if self.predicate(item):
                return index
        return -1


class AnyConsumer[T]:
    """Consumer that is true once any element satisfies the predicate."""

    def __init__(self, predicate: Callable[[T], bool] | None = None):
        self.predicate = predicate or bool

    def consume_iter(self, iterator: Iterator[T]) -> bool:
        for item in iterator:
            if self.predicate(item):
                return True
        return False


class AllConsumer[T]:
    """Consumer that is false once any element fails the predicate.

    An empty cursor satisfies every predicate.
    """

    def __init__(self, predicate: Callable[[T], bool] | None = None):
        self.predicate = predicate or bool

    def consume_iter(self, iterator: Iterator[T]) -> bool:
        for item in iterator:
            if not self.predicate(item):
                return False
        return True


class ContainsConsumer[T]:
    """Consumer that tests membership by value equality."""

    def __init__(self, value: T):
        self.value = value

    def consume_iter(self, iterator: Iterator[T]) -> bool:
        for item in iterator:
            if item == self.value:
                return True
        return False


class FirstConsumer[T]:
    """Consumer that pulls a single element."""

    def __init__(self, default: Any = None):
        self.default = default

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        return next(iterator, self.default)


class LastConsumer[T]:
    """Consumer that drains the cursor and keeps the final element."""

    def __init__(self, default: Any = None):
        self.default = default

    def consume_iter(self, iterator: Iterator[T]) -> Any:
        last = self.default
        for item in iterator:
            last = item
        return last


class SequenceEqualsConsumer[T]:
    """
    Consumer that compares its cursor with another iterable in lockstep.

    Equal only if both sides end together and every pair compares equal.
    """

    def __init__(
        self, other: Iterable[T], eq: Callable[[T, T], bool] | None = None
    ):
        self.other = other
        self.eq = eq

    def consume_iter(self, iterator: Iterator[T]) -> bool:
        other_iterator = iter(self.other)
        while True:
            left = next(iterator, _END)
            right = next(other_iterator, _END)
            if left is _END or right is _END:
                return left is _END and right is _END
            if self.eq is None:
                if left != right:
                    return False
            elif not self.eq(left, right):
                return False


class SeparatedStringConsumer[T]:
    """
    Consumer that joins elements into one string.

    ``None`` elements are skipped unless ``skip_none`` is turned off. A
    converter may also return ``None`` to leave an element out.
    """

    def __init__(
        self,
        separator: str,
        convert: Callable[[T], str | None] | None = None,
        skip_none: bool = True,
    ):
        self.separator = separator
        self.convert = convert or str
        self.skip_none = skip_none

    def consume_iter(self, iterator: Iterator[T]) -> str:
        parts = []
        for item in iterator:
            if item is None and self.skip_none:
                continue
            text = self.convert(item)
            if text is not None:
                parts.append(text)
        return self.separator.join(parts)
