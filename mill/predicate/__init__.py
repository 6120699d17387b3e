from . import strings
from .base import Pred, all_of, any_of, not_, pred
from .comparable import (
    NaturalPredicates,
    is_between,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range_closed,
    is_in_range_open,
    is_less_than,
    is_less_than_or_equal_to,
    natural,
)
from .ordering import AccessorPredicates, OrderingPredicates, by_accessor, by_key, by_ordering
from .rangepredicate import RangePredicate

__all__ = (
    # Composition
    "Pred",
    "pred",
    "all_of",
    "any_of",
    "not_",
    # Contract
    "RangePredicate",
    # Natural order
    "NaturalPredicates",
    "natural",
    "is_between",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in_range_closed",
    "is_in_range_open",
    "is_less_than",
    "is_less_than_or_equal_to",
    # Keyed
    "AccessorPredicates",
    "OrderingPredicates",
    "by_accessor",
    "by_key",
    "by_ordering",
    # Strings (namespace)
    "strings",
)
