"""
mill - small utilities for everyday Python pipelines.

Building blocks that remove boilerplate around filtering and chaining:
composable comparison/range predicates, N-ary set algebra over iterables,
collectors, and null-safe call chaining.

Architecture:
- predicate: Pred values keyed by natural order, comparator, sort key or accessor
- sequence: lazy concat / distinct / intersection / difference over iterables
- collect: terminal aggregations (Iterable[T] -> R)
- NullSafe: fluent None-absorbing call chain
"""

# Core types
from ._types import Collector, Comparator, Predicate, Selector

# Predicates
from . import predicate
from .predicate import (
    AccessorPredicates,
    NaturalPredicates,
    OrderingPredicates,
    Pred,
    RangePredicate,
    all_of,
    any_of,
    by_accessor,
    by_key,
    by_ordering,
    is_between,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range_closed,
    is_in_range_open,
    is_less_than,
    is_less_than_or_equal_to,
    not_,
    pred,
    strings,
)

# Sequences
from . import sequence
from .sequence import (
    concat,
    difference,
    distinct_values,
    intersection,
    mapped_non_null,
    non_null,
)

# Collectors
from . import collect
from .collect import excluding, excluding_null, including, joining, typed

# Null-safe chaining
from .nullsafe import NullSafe

# Errors
from ._errors import InvalidRangeError

__all__ = (
    # Types
    "Collector",
    "Comparator",
    "Predicate",
    "Selector",
    # Predicate module (namespace import)
    "predicate",
    "strings",
    # Predicate - composition
    "Pred",
    "pred",
    "all_of",
    "any_of",
    "not_",
    # Predicate - natural order
    "RangePredicate",
    "NaturalPredicates",
    "is_between",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in_range_closed",
    "is_in_range_open",
    "is_less_than",
    "is_less_than_or_equal_to",
    # Predicate - keyed
    "AccessorPredicates",
    "OrderingPredicates",
    "by_accessor",
    "by_key",
    "by_ordering",
    # Sequence module
    "sequence",
    "concat",
    "difference",
    "distinct_values",
    "intersection",
    "mapped_non_null",
    "non_null",
    # Collect module
    "collect",
    "excluding",
    "excluding_null",
    "including",
    "joining",
    "typed",
    # Null-safe
    "NullSafe",
    # Errors
    "InvalidRangeError",
)
