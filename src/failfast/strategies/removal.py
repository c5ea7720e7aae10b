"""
Five ways to drop matching elements from a GuardedSequence without tripping
its fail-fast cursor.

Every strategy takes ``(sequence, predicate)`` and returns the surviving
sequence. The first four mutate ``sequence`` in place and return it; the
last one builds a new sequence and leaves the source untouched.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Union

from ..guarded import GuardedSequence
from ..logging import get_logger
from ..predicates import Predicate

logger = get_logger(__name__)

RemovalStrategy = Callable[[GuardedSequence, Predicate], GuardedSequence]


class Strategy(Enum):
    CURSOR = "cursor"
    REMOVE_WHERE = "remove-where"
    COLLECT_THEN_REMOVE = "collect-then-remove"
    REVERSE_INDEX = "reverse-index"
    FILTER_COPY = "filter-copy"


def cursor_removal(sequence: GuardedSequence, predicate: Predicate) -> GuardedSequence:
    """Remove matches through the cursor that is iterating the sequence."""
    cursor = sequence.iterate()
    removed = 0
    while cursor.has_next():
        value = cursor.advance()
        if predicate(value):
            cursor.remove_current_and_continue()
            removed += 1
    logger.debug(f"cursor_removal removed {removed} elements")
    return sequence


def bulk_removal(sequence: GuardedSequence, predicate: Predicate) -> GuardedSequence:
    """Remove all matches with a single ``remove_where`` call."""
    sequence.remove_where(predicate)
    return sequence


def collect_then_remove(
    sequence: GuardedSequence,
    predicate: Predicate,
    by: str = "index",
) -> GuardedSequence:
    """
    Collect matches in a read-only pass, then remove them in a second pass.

    Args:
        sequence: Sequence to filter in place
        predicate: Elements for which this returns True are removed
        by: ``"index"`` removes collected positions in descending order,
            ``"value"`` removes each collected value by first match

    Raises:
        ValueError: If ``by`` is not a known mode
    """
    if by not in ("index", "value"):
        raise ValueError(f"Unknown removal mode: {by!r}. Must be 'index' or 'value'")

    matches: List[Any] = []
    for index, value in enumerate(sequence):
        if predicate(value):
            matches.append(index if by == "index" else value)

    if by == "index":
        for index in sorted(matches, reverse=True):
            sequence.remove_at(index)
    else:
        for value in matches:
            sequence.remove_value(value)

    logger.debug(f"collect_then_remove removed {len(matches)} elements by {by}")
    return sequence


def reverse_index_removal(sequence: GuardedSequence, predicate: Predicate) -> GuardedSequence:
    """Walk indices from the end so removals never shift unvisited slots."""
    for index in range(sequence.size() - 1, -1, -1):
        if predicate(sequence.get(index)):
            sequence.remove_at(index)
    return sequence


def filter_to_new(sequence: GuardedSequence, predicate: Predicate) -> GuardedSequence:
    """Return a new sequence of the non-matching elements."""
    return GuardedSequence(value for value in sequence if not predicate(value))


STRATEGIES: Dict[Strategy, RemovalStrategy] = {
    Strategy.CURSOR: cursor_removal,
    Strategy.REMOVE_WHERE: bulk_removal,
    Strategy.COLLECT_THEN_REMOVE: collect_then_remove,
    Strategy.REVERSE_INDEX: reverse_index_removal,
    Strategy.FILTER_COPY: filter_to_new,
}

IN_PLACE = frozenset(
    {
        Strategy.CURSOR,
        Strategy.REMOVE_WHERE,
        Strategy.COLLECT_THEN_REMOVE,
        Strategy.REVERSE_INDEX,
    }
)


def resolve_strategy(strategy: Union[Strategy, str]) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(strategy)
    except ValueError:
        valid = ", ".join(s.value for s in Strategy)
        raise ValueError(f"Unknown strategy: {strategy!r}. Must be one of: {valid}") from None


def apply_strategy(
    strategy: Union[Strategy, str],
    sequence: GuardedSequence,
    predicate: Predicate,
) -> GuardedSequence:
    """Run the named strategy and return the surviving sequence."""
    return STRATEGIES[resolve_strategy(strategy)](sequence, predicate)
