"""
Cursor combinators.

Each function takes one traversal cursor and returns another that pulls
from it on demand. They hold no state between calls, so a sequence can
apply them to a fresh upstream cursor every time it is opened.
"""

import functools
import itertools
import logging
from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

_END = object()


def map_indexed_iter(
    iterator: Iterator[T], func: Callable[[T, int], U]
) -> Iterator[U]:
    """Yield func(item, index) for every item, counting from 0."""
    for index, item in enumerate(iterator):
        yield func(item, index)


def filter_indexed_iter(
    iterator: Iterator[T], predicate: Callable[[T, int], bool]
) -> Iterator[T]:
    """Yield the items for which predicate(item, index) is true."""
    for index, item in enumerate(iterator):
        if predicate(item, index):
            yield item


def flat_map_iter(
    iterator: Iterator[T], func: Callable[[T], Iterable[U]]
) -> Iterator[U]:
    """Yield every nested item of func(item), sequence after sequence."""
    for item in iterator:
        yield from func(item)


def distinct_iter(
    iterator: Iterator[T], key: Callable[[T], Hashable] | None = None
) -> Iterator[T]:
    """
    Yield the first occurrence of each key, in source order.

    The seen-set is local to the returned cursor, so every traversal starts
    with nothing seen.
    """
    seen: set[Hashable] = set()
    for item in iterator:
        item_key = item if key is None else key(item)
        if item_key not in seen:
            seen.add(item_key)
            yield item


def sort_iter(
    iterator: Iterator[T],
    cmp: Callable[[T, T], int] | None = None,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> Iterator[T]:
    """
    Drain the cursor into a temporary list, sort it, and yield from it.

    Args:
        iterator: Upstream cursor
        cmp: Optional 3-way comparator (negative, zero or positive)
        key: Optional key function, exclusive with cmp
        reverse: Sort descending

    Raises:
        ValueError: If both cmp and key are given
    """
    if cmp is not None and key is not None:
        raise ValueError("Pass either a comparator or a key function, not both")
    if cmp is not None:
        key = functools.cmp_to_key(cmp)

    def sorted_items() -> Iterator[T]:
        items = list(iterator)
        logger.debug("Buffered %d items for sorting", len(items))
        items.sort(key=key, reverse=reverse)
        yield from items

    return sorted_items()


def reverse_iter(iterator: Iterator[T]) -> Iterator[T]:
    """Drain the cursor into a temporary list and yield it back to front."""
    items = list(iterator)
    logger.debug("Buffered %d items for reversing", len(items))
    yield from reversed(items)


def reverse_indexed(data: Sequence[T]) -> Iterator[T]:
    """Yield a materialized sequence back to front by index, without copying."""
    for index in range(len(data) - 1, -1, -1):
        yield data[index]


def skip_iter(iterator: Iterator[T], count: int) -> Iterator[T]:
    """Discard the first count items."""
    return itertools.islice(iterator, max(count, 0), None)


def skip_indexed(data: Sequence[T], count: int) -> Iterator[T]:
    """Yield a materialized sequence from position count onward, by index."""
    for index in range(max(count, 0), len(data)):
        yield data[index]


def take_iter(iterator: Iterator[T], count: int) -> Iterator[T]:
    """
    Yield at most count items.

    ``islice`` stops after the count-th item without pulling another one,
    so upstream work past that point never happens.
    """
    return itertools.islice(iterator, max(count, 0))


def take_while_iter(
    iterator: Iterator[T], predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Yield items until the first one failing the predicate, then stop for good."""
    return itertools.takewhile(predicate, iterator)


def contains_matching(
    candidates: list[T], item: T, eq: Callable[[T, T], bool] | None = None
) -> bool:
    """True if any candidate equals item (with == unless eq is given)."""
    if eq is None:
        return item in candidates
    return any(eq(candidate, item) for candidate in candidates)


def intersect_iter(
    iterator: Iterator[T],
    other: Iterable[T],
    eq: Callable[[T, T], bool] | None = None,
) -> Iterator[T]:
    """
    Yield items that match at least one item of other.

    other is materialized into a list on the first pull. Order and
    duplicates of the cursor are preserved.
    """
    candidates = list(other)
    logger.debug("Buffered %d items for intersect", len(candidates))
    for item in iterator:
        if contains_matching(candidates, item, eq):
            yield item


def except_iter(
    iterator: Iterator[T],
    other: Iterable[T],
    eq: Callable[[T, T], bool] | None = None,
) -> Iterator[T]:
    """Yield items that match no item of other."""
    candidates = list(other)
    logger.debug("Buffered %d items for except", len(candidates))
    for item in iterator:
        if not contains_matching(candidates, item, eq):
            yield item


def peek_iter(iterator: Iterator[T], action: Callable[[T], Any]) -> Iterator[T]:
    """Call action on each item as it is pulled and yield it unchanged."""
    for item in iterator:
        action(item)
        yield item


def default_children(item: Any, level: int) -> Iterable[Any] | None:
    """Descend into lists and tuples; everything else is a leaf."""
    if isinstance(item, (list, tuple)):
        return item
    return None


def walk_tree(
    iterator: Iterator[T], children: Callable[[T, int], Iterable[T] | None]
) -> Iterator[tuple[T, int, bool]]:
    """
    Depth-first, pre-order walk over a nested structure.

    Uses an explicit stack of cursors instead of recursion, so depth is
    bounded by memory rather than the interpreter's recursion limit.

    Yields:
        ``(item, level, is_container)`` triples. ``is_container`` is true when
        children(item, level) returned the item itself (a bare list or tuple).
    """
    stack: list[Iterator[T]] = [iterator]
    while stack:
        item = next(stack[-1], _END)
        if item is _END:
            stack.pop()
            continue

        level = len(stack) - 1
        subitems = children(item, level)
        yield item, level, subitems is item
        if subitems is not None:
            stack.append(iter(subitems))


def flatten_iter(
    iterator: Iterator[T],
    children: Callable[[T, int], Iterable[T] | None] | None = None,
) -> Iterator[T]:
    """
    Yield every node of a nested structure in depth-first pre-order.

    Bare containers (children returned the item itself) are not yielded,
    only their contents.
    """
    for item, _level, is_container in walk_tree(iterator, children or default_children):
        if not is_container:
            yield item


def flatten_map_iter(
    iterator: Iterator[T],
    children: Callable[[T, int], Iterable[T] | None] | None,
    mapper: Callable[[T, int], U],
) -> Iterator[U]:
    """Yield mapper(node, level) for every node of a nested structure."""
    for item, level, _is_container in walk_tree(iterator, children or default_children):
        yield mapper(item, level)
