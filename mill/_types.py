"""
Callable shapes shared by predicates, comparators and collectors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = element -> bool, the input every Pred wraps
type Predicate[T] = Callable[[T], bool]

# Selector = element -> field, used as sort key or accessor
type Selector[T, K] = Callable[[T], K]

# Comparator = 3-way ordering: negative, zero or positive
type Comparator[T] = Callable[[T, T], int]

# Collector = terminal aggregation over an iterable
type Collector[T, R] = Callable[[Iterable[T]], R]

__all__ = (
    "Predicate",
    "Selector",
    "Comparator",
    "Collector",
)
