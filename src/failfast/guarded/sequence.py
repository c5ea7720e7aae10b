"""
Growable sequence with a modification counter.

Every structural change (anything that alters the element count or the
ordering) bumps ``version`` by exactly one. Cursors snapshot ``version`` when
they are created and refuse to advance once it has moved, which turns a
mutation nested inside a ``for`` loop into an immediate error instead of a
silently skipped or repeated element.
"""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar, overload

from ..errors import IndexOutOfRangeError
from ..logging import get_logger
from .cursor import Cursor

logger = get_logger(__name__)

T = TypeVar("T")


class GuardedSequence(MutableSequence[T], Generic[T]):
    """
    Ordered, growable container whose iterators fail fast on foreign mutation.

    Indices are strictly non-negative: ``insert`` accepts ``[0, size]`` and
    every other index-based operation accepts ``[0, size)``. Replacing an
    element in place is not a structural change and leaves ``version`` alone.
    """

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._elements: List[T] = list(values) if values is not None else []
        self._version = 0

    @property
    def version(self) -> int:
        """Number of structural mutation calls made so far."""
        return self._version

    def _mutated(self) -> None:
        self._version += 1

    def _check_index(self, index: Any, upper: int) -> int:
        if isinstance(index, bool):
            raise TypeError("indices must be integers, not bool")
        index = operator.index(index)
        if index < 0 or index >= upper:
            raise IndexOutOfRangeError(index, len(self._elements))
        return index

    # -- read access -----------------------------------------------------

    def size(self) -> int:
        return len(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def get(self, index: int) -> T:
        return self._elements[self._check_index(index, len(self._elements))]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> GuardedSequence[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return GuardedSequence(self._elements[index])
        return self.get(index)

    def iterate(self) -> Cursor[T]:
        """Return a new cursor bound to the current version."""
        return Cursor(self)

    def __iter__(self) -> Cursor[T]:
        return self.iterate()

    def to_list(self) -> List[T]:
        return list(self._elements)

    def copy(self) -> GuardedSequence[T]:
        return GuardedSequence(self._elements)

    # -- in-place replacement (not structural) ---------------------------

    def set(self, index: int, value: T) -> T:
        """Replace the element at ``index`` and return the previous one."""
        index = self._check_index(index, len(self._elements))
        previous = self._elements[index]
        self._elements[index] = value
        return previous

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._elements[index] = list(value)
            self._mutated()
            return
        self.set(index, value)

    # -- structural mutation ---------------------------------------------

    def append(self, value: T) -> None:
        self._elements.append(value)
        self._mutated()

    def insert(self, index: int, value: T) -> None:
        index = self._check_index(index, len(self._elements) + 1)
        self._elements.insert(index, value)
        self._mutated()

    insert_at = insert

    def remove_at(self, index: int) -> T:
        index = self._check_index(index, len(self._elements))
        value = self._elements.pop(index)
        self._mutated()
        return value

    def __delitem__(self, index) -> None:
        if isinstance(index, slice):
            del self._elements[index]
            self._mutated()
            return
        self.remove_at(index)

    def pop(self, index: Optional[int] = None) -> T:
        if index is None:
            if not self._elements:
                raise IndexOutOfRangeError(0, 0)
            index = len(self._elements) - 1
        return self.remove_at(index)

    def remove_value(self, value: T) -> bool:
        """
        Remove the first element that is, or equals, ``value``.

        Returns:
            True if an element was removed, False if none matched. The call
            counts as a mutation either way.
        """
        removed = False
        for i, element in enumerate(self._elements):
            if element is value or element == value:
                del self._elements[i]
                removed = True
                break
        self._mutated()
        return removed

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        """
        Remove every element matching ``predicate`` in a single mutation.

        Survivors keep their relative order. Returns the number removed.
        """
        survivors = [element for element in self._elements if not predicate(element)]
        removed = len(self._elements) - len(survivors)
        self._elements = survivors
        self._mutated()
        logger.debug(f"remove_where removed {removed} elements, version now {self._version}")
        return removed

    def clear(self) -> None:
        self._elements.clear()
        self._mutated()

    def extend(self, values: Iterable[T]) -> None:
        # Materialise first so extending with ourselves does not trip our own cursor.
        self._elements.extend(list(values))
        self._mutated()

    def __iadd__(self, values: Iterable[T]) -> GuardedSequence[T]:
        self.extend(values)
        return self

    def sort(self, *, key: Optional[Callable[[T], Any]] = None, reverse: bool = False) -> None:
        self._elements.sort(key=key, reverse=reverse)
        self._mutated()

    # -- comparison and rendering ----------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GuardedSequence):
            return self._elements == other._elements
        if isinstance(other, list):
            return self._elements == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GuardedSequence({self._elements!r})"

    def __str__(self) -> str:
        return render(self)


def render(values: Iterable[Any]) -> str:
    """Render values as ``[A, B, C]`` using ``str`` on each element."""
    if isinstance(values, GuardedSequence):
        values = values.to_list()
    return "[" + ", ".join(str(value) for value in values) + "]"
