"""String predicates

Common string tests as Pred values. Length tests never match None;
containment and matching tests match None only against a None argument."""

from __future__ import annotations

import re

from .base import Pred


def is_empty() -> Pred[str]:
    """Empty string. Raises on None, like len(None)."""
    return Pred(lambda s: len(s) == 0)


def is_null() -> Pred[str | None]:
    return Pred(lambda s: s is None)


def non_null() -> Pred[str | None]:
    return Pred(lambda s: s is not None)


def non_empty() -> Pred[str]:
    return is_empty().negate()


def longer_than(length: int) -> Pred[str | None]:
    if length < 0:
        raise ValueError(f"longer_than(): length must be >= 0, got {length}")
    return Pred(lambda s: s is not None and len(s) > length)


def shorter_than(length: int) -> Pred[str | None]:
    if length < 0:
        raise ValueError(f"shorter_than(): length must be >= 0, got {length}")
    return Pred(lambda s: s is not None and len(s) < length)


def with_maximum_length(length: int) -> Pred[str | None]:
    if length < 0:
        raise ValueError(f"with_maximum_length(): length must be >= 0, got {length}")
    return shorter_than(length + 1)


def with_minimum_length(length: int) -> Pred[str | None]:
    if length < 0:
        raise ValueError(f"with_minimum_length(): length must be >= 0, got {length}")
    if length == 0:
        # any string qualifies
        return non_null()
    return longer_than(length - 1)


def equaling(match: str | None) -> Pred[str | None]:
    return Pred(lambda s: s == match)


def containing(sub: str | None) -> Pred[str | None]:
    if sub is None:
        return is_null()
    return Pred(lambda s: s is not None and sub in s)


def matches(regex: str | re.Pattern[str] | None) -> Pred[str | None]:
    """Whole-string regex match."""
    if regex is None:
        return is_null()
    pattern = re.compile(regex)
    return Pred(lambda s: s is not None and pattern.fullmatch(s) is not None)


def equals_ignore_case(match: str | None) -> Pred[str | None]:
    if match is None:
        return is_null()
    folded = match.casefold()
    return Pred(lambda s: s is not None and s.casefold() == folded)


def containing_ignore_case(sub: str | None) -> Pred[str | None]:
    if sub is None:
        return is_null()
    folded = sub.casefold()
    return Pred(lambda s: s is not None and folded in s.casefold())


__all__ = (
    "is_empty",
    "is_null",
    "non_null",
    "non_empty",
    "longer_than",
    "shorter_than",
    "with_maximum_length",
    "with_minimum_length",
    "equaling",
    "containing",
    "matches",
    "equals_ignore_case",
    "containing_ignore_case",
)
