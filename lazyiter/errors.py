"""
Errors raised by lazy sequences.

Strict accessors raise these; each strict accessor has a tolerant sibling
that returns a default instead.
"""


class SeqError(Exception):
    """Base exception for lazyiter errors."""

    pass


class EmptySequenceError(SeqError, LookupError):
    """Raised when a strict accessor finds no element."""

    def __init__(self, message: str = "The iterable sequence is empty") -> None:
        super().__init__(message)


class IndexOutOfRangeError(EmptySequenceError, IndexError):
    """Raised by get_at for a negative or overflowing index."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Index {index} out of range")


class SourceConsumedError(SeqError, RuntimeError):
    """Raised when a single-shot source is opened a second time."""

    def __init__(self, source: object) -> None:
        self.source = source
        super().__init__(
            f"Single-shot source {type(source).__name__} has already been "
            "consumed; wrap a list or use from_opener() for a restartable "
            "sequence"
        )
