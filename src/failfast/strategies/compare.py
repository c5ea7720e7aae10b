"""Run every removal strategy on fresh copies and check that they agree."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from ..guarded import GuardedSequence
from ..logging import get_logger
from ..predicates import Predicate
from .removal import Strategy, apply_strategy

logger = get_logger(__name__)


@dataclass(frozen=True)
class StrategyOutcome:
    """Result of applying one strategy to a fresh sequence."""
    strategy: Strategy
    survivors: List[Any]
    version_delta: int   # change in the source sequence's version
    in_place: bool       # whether the returned sequence is the source itself


@dataclass(frozen=True)
class StrategyComparison:
    values: List[Any]
    outcomes: List[StrategyOutcome]

    @property
    def consistent(self) -> bool:
        """True if every strategy left the same survivors in the same order."""
        if not self.outcomes:
            return True
        first = self.outcomes[0].survivors
        return all(outcome.survivors == first for outcome in self.outcomes)

    @property
    def survivors(self) -> List[Any]:
        if not self.consistent:
            raise ValueError("strategies disagree on the surviving elements")
        return list(self.outcomes[0].survivors) if self.outcomes else list(self.values)

    def outcome_for(self, strategy: Strategy) -> StrategyOutcome:
        for outcome in self.outcomes:
            if outcome.strategy is strategy:
                return outcome
        raise KeyError(strategy)


def compare_strategies(
    values: Iterable[Any],
    predicate: Predicate,
    strategies: Optional[Sequence[Strategy]] = None,
) -> StrategyComparison:
    """
    Apply each strategy to its own fresh GuardedSequence built from ``values``.

    Args:
        values: Input elements, in order
        predicate: Elements for which this returns True are removed
        strategies: Strategies to run (defaults to all of them)

    Returns:
        StrategyComparison with one outcome per strategy
    """
    values = list(values)
    selected = list(strategies) if strategies is not None else list(Strategy)

    outcomes = []
    for strategy in selected:
        source = GuardedSequence(values)
        result = apply_strategy(strategy, source, predicate)
        outcomes.append(StrategyOutcome(
            strategy=strategy,
            survivors=result.to_list(),
            version_delta=source.version,
            in_place=result is source,
        ))

    comparison = StrategyComparison(values=values, outcomes=outcomes)
    if not comparison.consistent:
        logger.warning(f"Removal strategies disagree for input {values}")
    return comparison
