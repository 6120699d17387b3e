"""Internal helpers for mill.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import typing

from ._errors import InvalidRangeError
from ._types import Comparator, Selector


def is_none(x: object) -> bool:
    return x is None


def is_not_none(x: object) -> bool:
    return x is not None


def natural_compare(a: typing.Any, b: typing.Any) -> int:
    """
    3-way comparison by natural ordering.

    Only `<` and `>` are used, so any type with rich comparisons works.
    """
    return (a > b) - (a < b)


def compare_by[T, K](key: Selector[T, K]) -> Comparator[T]:
    """Build a 3-way comparator from a sort key (like sorted(key=...))."""
    def comparator(a: T, b: T) -> int:
        return natural_compare(key(a), key(b))
    return comparator


def validate_range[T](low: T, high: T, compare: Comparator[T] = natural_compare) -> None:
    """Raise InvalidRangeError if low sorts after high."""
    if compare(low, high) > 0:
        raise InvalidRangeError(low, high)


__all__ = (
    "is_none",
    "is_not_none",
    "natural_compare",
    "compare_by",
    "validate_range",
)
