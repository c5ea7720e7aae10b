"""
Demonstration driver: remove an element while iterating, first the wrong way
(directly on the sequence inside a ``for`` loop) and then with each of the
removal strategies.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from .config import Settings
from .errors import ConcurrentMutationError
from .guarded import GuardedSequence, render
from .logging import get_logger
from .predicates import equals
from .strategies import StrategyComparison, compare_strategies

logger = get_logger(__name__)


@dataclass(frozen=True)
class DirectRemovalOutcome:
    """What happened when the sequence was mutated under its own iterator."""
    raised: bool
    error: Optional[str]
    visited: List[Any] = field(default_factory=list)
    remaining: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class DemoReport:
    settings: Settings
    initial: List[Any]
    direct: DirectRemovalOutcome
    comparison: StrategyComparison


def attempt_direct_removal(values: Sequence[Any], target: Any) -> DirectRemovalOutcome:
    """
    Iterate ``values`` and remove ``target`` through the sequence itself.

    The removal succeeds but the loop's cursor refuses to advance afterwards.
    The removal is not rolled back.
    """
    sequence = GuardedSequence(values)
    visited = []
    try:
        for value in sequence:
            visited.append(value)
            if value == target:
                sequence.remove_value(value)
    except ConcurrentMutationError as exc:
        logger.info(f"Direct removal of {target!r} aborted iteration: {exc}")
        return DirectRemovalOutcome(
            raised=True,
            error=str(exc),
            visited=visited,
            remaining=sequence.to_list(),
        )
    return DirectRemovalOutcome(
        raised=False,
        error=None,
        visited=visited,
        remaining=sequence.to_list(),
    )


def run_demo(settings: Optional[Settings] = None) -> DemoReport:
    settings = settings or Settings()
    values = list(settings.values)
    logger.info(f"Running demo on {render(values)} with target {settings.target!r}")
    return DemoReport(
        settings=settings,
        initial=values,
        direct=attempt_direct_removal(values, settings.target),
        comparison=compare_strategies(values, equals(settings.target)),
    )


def format_report(report: DemoReport) -> List[str]:
    lines = [f"Initial: {render(report.initial)}", ""]

    direct = report.direct
    lines.append(f"Removing {report.settings.target} directly inside a for loop:")
    if direct.raised:
        lines.append(f"  ConcurrentMutationError: {direct.error}")
    else:
        lines.append("  no error raised")
    lines.append(f"  visited:   {render(direct.visited)}")
    lines.append(f"  remaining: {render(direct.remaining)}")
    lines.append("")

    lines.append("Removal strategies:")
    width = max((len(o.strategy.value) for o in report.comparison.outcomes), default=0)
    for outcome in report.comparison.outcomes:
        note = "in place" if outcome.in_place else "new sequence"
        lines.append(
            f"  {outcome.strategy.value:<{width}}  {render(outcome.survivors)}  ({note})"
        )
    agreement = "agree" if report.comparison.consistent else "DISAGREE"
    lines.append(f"All strategies {agreement}.")
    return lines
