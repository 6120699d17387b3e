"""
RangePredicate
==============

Common contract for every keyed family of comparison predicates.
"""

from __future__ import annotations

import abc

from .base import Pred


class RangePredicate[S, T](abc.ABC):
    """
    Builds predicates over elements of type S, compared against bounds of type T.

    Open ranges exclude both endpoints, closed ranges include both.
    Range builders validate `low <= high` eagerly and raise InvalidRangeError.
    """

    __slots__ = ()

    @abc.abstractmethod
    def is_greater_than(self, value: T) -> Pred[S]: ...

    @abc.abstractmethod
    def is_less_than(self, value: T) -> Pred[S]: ...

    @abc.abstractmethod
    def is_greater_than_or_equal_to(self, value: T) -> Pred[S]: ...

    @abc.abstractmethod
    def is_less_than_or_equal_to(self, value: T) -> Pred[S]: ...

    @abc.abstractmethod
    def is_in_range_open(self, low: T, high: T) -> Pred[S]: ...

    @abc.abstractmethod
    def is_in_range_closed(self, low: T, high: T) -> Pred[S]: ...

    def is_between(self, low: T, high: T) -> Pred[S]:
        """Alias for is_in_range_open()."""
        return self.is_in_range_open(low, high)


__all__ = ("RangePredicate",)
