"""
Natural-order predicates
========================

Sugar over values that support `<` / `>` directly (numbers, strings, dates, ...).

A None element never matches. Bounds are assumed present.

Example:
    letters = ["R", "A", "I", "N", "E", "T", "M"]
    sorted(set(filter(is_in_range_closed("D", "N"), letters)))  # ['E', 'I', 'M', 'N']
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .._helpers import validate_range
from .base import Pred
from .rangepredicate import RangePredicate


@dataclass(frozen=True, slots=True)
class NaturalPredicates[T](RangePredicate[T, T]):
    """Predicates using the elements' own ordering."""

    def is_greater_than(self, value: T) -> Pred[T]:
        return Pred(lambda t: t is not None and t > value)

    def is_less_than(self, value: T) -> Pred[T]:
        return Pred(lambda t: t is not None and t < value)

    def is_greater_than_or_equal_to(self, value: T) -> Pred[T]:
        return Pred(lambda t: t is not None and t >= value)

    def is_less_than_or_equal_to(self, value: T) -> Pred[T]:
        return Pred(lambda t: t is not None and t <= value)

    def is_in_range_open(self, low: T, high: T) -> Pred[T]:
        validate_range(low, high)
        return Pred(lambda t: t is not None and low < t < high)

    def is_in_range_closed(self, low: T, high: T) -> Pred[T]:
        validate_range(low, high)
        return Pred(lambda t: t is not None and low <= t <= high)


natural: NaturalPredicates[typing.Any] = NaturalPredicates()


def is_less_than[T](value: T) -> Pred[T]:
    return natural.is_less_than(value)


def is_greater_than[T](value: T) -> Pred[T]:
    return natural.is_greater_than(value)


def is_less_than_or_equal_to[T](value: T) -> Pred[T]:
    return natural.is_less_than_or_equal_to(value)


def is_greater_than_or_equal_to[T](value: T) -> Pred[T]:
    return natural.is_greater_than_or_equal_to(value)


def is_in_range_open[T](low: T, high: T) -> Pred[T]:
    """low < x < high."""
    return natural.is_in_range_open(low, high)


def is_in_range_closed[T](low: T, high: T) -> Pred[T]:
    """low <= x <= high."""
    return natural.is_in_range_closed(low, high)


def is_between[T](low: T, high: T) -> Pred[T]:
    """Alias for is_in_range_open()."""
    return natural.is_between(low, high)


__all__ = (
    "NaturalPredicates",
    "natural",
    "is_less_than",
    "is_greater_than",
    "is_less_than_or_equal_to",
    "is_greater_than_or_equal_to",
    "is_in_range_open",
    "is_in_range_closed",
    "is_between",
)
