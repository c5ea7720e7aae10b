"""Exceptions raised by guarded sequences and their cursors."""


class FailFastError(Exception):
    """Base class for all failfast errors."""


class ConcurrentMutationError(FailFastError, RuntimeError):
    """Raised when a sequence was structurally modified behind a cursor's back."""

    def __init__(self, expected_version: int, actual_version: int) -> None:
        self.expected_version = expected_version
        self.actual_version = actual_version
        super().__init__(
            f"sequence modified during iteration "
            f"(cursor bound to version {expected_version}, sequence at {actual_version})"
        )


class IndexOutOfRangeError(FailFastError, IndexError):
    """Raised when an index falls outside the valid range for an operation."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index} out of range for size {size}")


class CursorStateError(FailFastError, RuntimeError):
    """Raised when a cursor has no current element to remove."""
