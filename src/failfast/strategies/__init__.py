"""Removal strategies that avoid tripping the fail-fast cursor."""

from .removal import (
    Strategy,
    STRATEGIES,
    IN_PLACE,
    apply_strategy,
    bulk_removal,
    collect_then_remove,
    cursor_removal,
    filter_to_new,
    resolve_strategy,
    reverse_index_removal,
)
from .compare import StrategyComparison, StrategyOutcome, compare_strategies

__all__ = [
    "Strategy",
    "STRATEGIES",
    "IN_PLACE",
    "apply_strategy",
    "bulk_removal",
    "collect_then_remove",
    "cursor_removal",
    "filter_to_new",
    "resolve_strategy",
    "reverse_index_removal",
    "StrategyComparison",
    "StrategyOutcome",
    "compare_strategies",
]
