"""
Core protocol definitions for lazy sequences.

A producer is the source opener of a sequence: every call to ``into_iter``
hands out a traversal cursor. A consumer drains one such cursor into a
concrete result.
"""

from abc import abstractmethod
from collections.abc import Iterator, Sequence
from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)  # Covariant for Producer (output only)
T_contra = TypeVar(
    "T_contra", contravariant=True
)  # Contravariant for Consumer (input only)
U = TypeVar("U")
K = TypeVar("K")
R = TypeVar("R")


class Consumer(Protocol[T_contra, R]):
    """
    A consumer drains a cursor and produces a result.

    Consumers are the terminal end of a chain: they are the only place where
    pulling actually happens.
    """

    @abstractmethod
    def consume_iter(self, iterator: Iterator[T_contra]) -> R:
        """
        Consume elements from the iterator and produce a result.

        Consumers may stop pulling early (short-circuit) once the result
        is known.

        Args:
            iterator: An iterator producing elements to consume

        Returns:
            The result of consuming the elements
        """
        ...


@runtime_checkable
class Producer(Protocol[T_co]):
    """
    A producer opens traversal cursors over some underlying data.

    Restartable producers return a fresh cursor on every call; single-shot
    producers hand out their one cursor once.
    """

    @abstractmethod
    def into_iter(self) -> Iterator[T_co]:
        """
        Open a cursor over the data.

        Returns:
            An iterator that yields the elements in source order
        """
        ...


@runtime_checkable
class IndexedProducer(Producer[T_co], Protocol[T_co]):
    """
    A producer backed by a materialized, indexable sequence.

    Indexed producers allow O(1) length, random access and back-to-front
    traversal without an intermediate copy.
    """

    @property
    @abstractmethod
    def data(self) -> Sequence[T_co]:
        """The wrapped sequence. Never copied, never mutated."""
        ...

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of elements in the wrapped sequence."""
        ...
