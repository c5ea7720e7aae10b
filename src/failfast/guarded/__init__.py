"""Fail-fast guarded sequence and its cursor."""

from .cursor import Cursor, CursorState
from .sequence import GuardedSequence, render

__all__ = [
    "Cursor",
    "CursorState",
    "GuardedSequence",
    "render",
]
