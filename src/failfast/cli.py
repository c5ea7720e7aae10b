from typing import List, Optional

import typer

from .config import Settings
from .demo import format_report, run_demo
from .guarded import render
from .logging import get_logger
from .predicates import parse_predicate
from .strategies import compare_strategies, resolve_strategy

app = typer.Typer(help="FAILFAST – remove-while-iterating demonstrations", no_args_is_help=True)


@app.command()
def demo(
    values: Optional[List[str]] = typer.Option(None, "--value", "-v", help="Element of the demo sequence (repeatable)"),
    target: str = typer.Option("D", "--target", "-t", help="Element to remove"),
) -> None:
    """
    Remove an element directly while iterating, then with every safe strategy.
    """
    logger = get_logger(__name__)

    try:
        settings = Settings(values=tuple(values), target=target) if values else Settings(target=target)
    except ValueError as exc:
        logger.error(f"Invalid settings: {exc}")
        raise typer.Exit(code=2) from exc

    report = run_demo(settings)
    for line in format_report(report):
        typer.echo(line)

    if not report.comparison.consistent:
        raise typer.Exit(code=1)


@app.command()
def compare(
    values: List[str] = typer.Argument(..., help="Elements of the sequence, in order"),
    target: Optional[str] = typer.Option(None, "--target", "-t", help="Remove elements equal to this value"),
    vowels: bool = typer.Option(False, "--vowels", help="Remove elements starting with a vowel"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Run only this strategy"),
) -> None:
    """
    Apply the removal strategies to VALUES and print what survives.
    """
    logger = get_logger(__name__)

    try:
        predicate = parse_predicate(target=target, vowels=vowels)
        selected = [resolve_strategy(strategy)] if strategy is not None else None
    except ValueError as exc:
        logger.error(str(exc))
        raise typer.Exit(code=2) from exc

    comparison = compare_strategies(values, predicate, strategies=selected)

    typer.echo(f"Input: {render(values)}")
    for outcome in comparison.outcomes:
        typer.echo(f"{outcome.strategy.value}: {render(outcome.survivors)}")

    if not comparison.consistent:
        logger.error("Strategies produced different results")
        raise typer.Exit(code=1)

    logger.info(f"{len(comparison.outcomes)} strategies agree on {render(comparison.survivors)}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
