from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Iterator, Optional, TypeVar

from ..errors import ConcurrentMutationError, CursorStateError
from ..logging import get_logger

if TYPE_CHECKING:
    from .sequence import GuardedSequence

logger = get_logger(__name__)

T = TypeVar("T")


class CursorState(Enum):
    ACTIVE = "active"
    FAULTED = "faulted"


class Cursor(Iterator[T], Generic[T]):
    """
    Fail-fast iterator over a GuardedSequence.

    The cursor remembers the sequence version it was created against. Any
    structural change made through another handle makes the next ``advance``
    raise ConcurrentMutationError; from then on the cursor stays faulted.
    Removing through ``remove_current_and_continue`` is the one mutation the
    cursor absorbs.
    """

    def __init__(self, sequence: GuardedSequence[T]) -> None:
        self._sequence = sequence
        self._position = 0
        self._bound_version = sequence.version
        self._last_index: Optional[int] = None
        self._state = CursorState.ACTIVE

    @property
    def position(self) -> int:
        return self._position

    @property
    def bound_version(self) -> int:
        return self._bound_version

    @property
    def state(self) -> CursorState:
        return self._state

    def has_next(self) -> bool:
        return self._position < len(self._sequence)

    def _check_version(self) -> None:
        actual = self._sequence.version
        if self._state is CursorState.FAULTED or actual != self._bound_version:
            if self._state is CursorState.ACTIVE:
                logger.debug(
                    f"Cursor faulted at position {self._position}: "
                    f"bound to version {self._bound_version}, sequence at {actual}"
                )
            self._state = CursorState.FAULTED
            raise ConcurrentMutationError(self._bound_version, actual)

    def advance(self) -> T:
        """
        Yield the next element.

        Raises:
            ConcurrentMutationError: If the sequence changed since this cursor
                was bound (checked before exhaustion).
            StopIteration: If every element has been yielded.
        """
        self._check_version()
        if not self.has_next():
            raise StopIteration
        value = self._sequence[self._position]
        self._last_index = self._position
        self._position += 1
        return value

    def __next__(self) -> T:
        return self.advance()

    def __iter__(self) -> Cursor[T]:
        return self

    def remove_current_and_continue(self) -> T:
        """
        Remove the element most recently yielded and keep iterating.

        The element that shifts into the vacated slot is yielded by the next
        ``advance``. Returns the removed element.
        """
        self._check_version()
        if self._last_index is None:
            raise CursorStateError("no current element: call advance() first")
        removed = self._sequence.remove_at(self._last_index)
        self._position -= 1
        self._bound_version = self._sequence.version
        self._last_index = None
        return removed

    def __repr__(self) -> str:
        return (
            f"Cursor(position={self._position}, bound_version={self._bound_version}, "
            f"state={self._state.value})"
        )
