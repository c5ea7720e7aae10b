"""
FAILFAST

A growable sequence whose iterators fail fast when the sequence is
structurally modified behind their back, plus the removal strategies that
avoid it.
"""

from .errors import ConcurrentMutationError, CursorStateError, FailFastError, IndexOutOfRangeError
from .guarded import Cursor, CursorState, GuardedSequence, render

__all__ = [
    "ConcurrentMutationError",
    "CursorStateError",
    "FailFastError",
    "IndexOutOfRangeError",
    "Cursor",
    "CursorState",
    "GuardedSequence",
    "render",
]
