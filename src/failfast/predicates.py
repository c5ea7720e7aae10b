"""Predicates used by the removal strategies and the CLI."""

from typing import Any, Callable, Optional

Predicate = Callable[[Any], bool]

VOWELS = "AEIOU"


def equals(target: Any) -> Predicate:
    """Return a predicate matching values equal to ``target``."""

    def _matches(value: Any) -> bool:
        return value == target

    _matches.__name__ = f"equals({target!r})"
    return _matches


def is_vowel_initial(value: Any) -> bool:
    text = str(value)
    return bool(text) and text[0].upper() in VOWELS


def parse_predicate(target: Optional[str] = None, vowels: bool = False) -> Predicate:
    """
    Build a predicate from command-line style options.

    Exactly one of ``target`` and ``vowels`` must be given.

    Raises:
        ValueError: If neither or both are given.
    """
    if target is not None and vowels:
        raise ValueError("use either a target value or --vowels, not both")
    if target is not None:
        return equals(target)
    if vowels:
        return is_vowel_initial
    raise ValueError("a target value or --vowels is required")
