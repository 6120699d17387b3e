"""
Keyed comparison predicates
===========================

Three ways to say what "less than" means:

- by_ordering(cmp)      — explicit 3-way comparator over the elements
- by_key(key)           — comparator derived from a sort key; bounds are elements
- by_accessor(accessor) — project each element to a field, compare the field
                          against bounds of the field's type

Example:
    from mill import by_accessor, by_key

    adults = filter(by_accessor(lambda p: p.age).is_greater_than_or_equal_to(18), people)
    after_alice = filter(by_key(lambda b: b.birthday).is_greater_than(alice), birthdays)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import compare_by, natural_compare, validate_range
from .._types import Comparator, Selector
from .base import Pred
from .rangepredicate import RangePredicate


# ============================================================================
# Comparator-keyed
# ============================================================================


@dataclass(frozen=True, slots=True)
class OrderingPredicates[T](RangePredicate[T, T]):
    """
    Predicates delegating to a 3-way comparator.

    NOTE: elements are handed to the comparator as-is. None elements are
          the comparator's business, nothing is filtered here.
    """

    compare: Comparator[T]

    def is_greater_than(self, value: T) -> Pred[T]:
        return Pred(lambda t: self.compare(t, value) > 0)

    def is_less_than(self, value: T) -> Pred[T]:
        return Pred(lambda t: self.compare(t, value) < 0)

    def is_greater_than_or_equal_to(self, value: T) -> Pred[T]:
        return Pred(lambda t: self.compare(t, value) >= 0)

    def is_less_than_or_equal_to(self, value: T) -> Pred[T]:
        return Pred(lambda t: self.compare(t, value) <= 0)

    def is_in_range_open(self, low: T, high: T) -> Pred[T]:
        validate_range(low, high, self.compare)
        return self.is_greater_than(low) & self.is_less_than(high)

    def is_in_range_closed(self, low: T, high: T) -> Pred[T]:
        validate_range(low, high, self.compare)
        return self.is_greater_than_or_equal_to(low) & self.is_less_than_or_equal_to(high)


# ============================================================================
# Accessor-keyed
# ============================================================================


@dataclass(frozen=True, slots=True)
class AccessorPredicates[S, T](RangePredicate[S, T]):
    """
    Predicates over a projected field.

    A None projection fails every relational test. Accessor errors propagate.
    """

    accessor: Selector[S, T | None]

    def _holds(self, check: Callable[[int], bool], bound: T) -> Pred[S]:
        def test(s: S) -> bool:
            data = self.accessor(s)
            return data is not None and check(natural_compare(data, bound))
        return Pred(test)

    def is_greater_than(self, value: T) -> Pred[S]:
        return self._holds(lambda c: c > 0, value)

    def is_less_than(self, value: T) -> Pred[S]:
        return self._holds(lambda c: c < 0, value)

    def is_greater_than_or_equal_to(self, value: T) -> Pred[S]:
        return self._holds(lambda c: c >= 0, value)

    def is_less_than_or_equal_to(self, value: T) -> Pred[S]:
        return self._holds(lambda c: c <= 0, value)

    def is_in_range_open(self, low: T, high: T) -> Pred[S]:
        validate_range(low, high)

        def test(s: S) -> bool:
            data = self.accessor(s)
            return data is not None and natural_compare(data, low) > 0 and natural_compare(data, high) < 0

        return Pred(test)

    def is_in_range_closed(self, low: T, high: T) -> Pred[S]:
        validate_range(low, high)

        def test(s: S) -> bool:
            data = self.accessor(s)
            return data is not None and natural_compare(data, low) >= 0 and natural_compare(data, high) <= 0

        return Pred(test)

    def equaling(self, value: T | None) -> Pred[S]:
        """Projection equals value. None equals None."""
        return Pred(lambda s: self.accessor(s) == value)


# ============================================================================
# Constructors
# ============================================================================


def by_ordering[T](compare: Comparator[T]) -> OrderingPredicates[T]:
    """Compare elements with an explicit 3-way comparator."""
    return OrderingPredicates(compare)


def by_key[T, K](key: Selector[T, K]) -> OrderingPredicates[T]:
    """
    Compare elements by a sort key.

    Bounds are whole elements, not keys:
        by_key(lambda h: h.date).is_less_than(independence_day)
    """
    return OrderingPredicates(compare_by(key))


def by_accessor[S, T](accessor: Selector[S, T | None]) -> AccessorPredicates[S, T]:
    """Compare a projected field against bounds of the field's type."""
    return AccessorPredicates(accessor)


__all__ = (
    "OrderingPredicates",
    "AccessorPredicates",
    "by_ordering",
    "by_key",
    "by_accessor",
)
