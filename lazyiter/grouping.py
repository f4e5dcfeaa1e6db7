"""
Grouping helpers.

Grouping is eager: the whole source is drained once into a key-to-items
mapping. Keys keep first-seen order and items keep source order.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import TYPE_CHECKING, Generic, NamedTuple, TypeVar

if TYPE_CHECKING:
    from .core import Seq

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class Group(NamedTuple, Generic[K, T]):
    """A key together with the items that produced it."""

    key: K
    items: Seq[T]


def group_items(iterator: Iterator[T], key: Callable[[T], K]) -> dict[K, list[T]]:
    """
    Drain an iterator into a mapping of key to the list of items with that key.

    Args:
        iterator: Cursor to drain
        key: Function computing the (hashable) key of an item

    Returns:
        A dict in first-seen key order
    """
    groups: dict[K, list[T]] = {}
    for item in iterator:
        group_key = key(item)
        group = groups.get(group_key)
        if group is None:
            groups[group_key] = [item]
        else:
            group.append(item)
    return groups
