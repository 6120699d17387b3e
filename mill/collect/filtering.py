"""
Filtering collectors
====================

Wrap another collector so it only sees some elements:

    including(lambda s: len(s) > 1, list)(words)
    excluding_null(joining(", "))(names)
"""

from __future__ import annotations

from collections.abc import Iterable

from .._helpers import is_none
from .._types import Collector, Predicate


def including[T, R](predicate: Predicate[T], collector: Collector[T, R]) -> Collector[T, R]:
    """Hand only elements matching predicate to collector."""
    def collect(items: Iterable[T]) -> R:
        return collector(item for item in items if predicate(item))
    return collect


def excluding[T, R](predicate: Predicate[T], collector: Collector[T, R]) -> Collector[T, R]:
    """Hand only elements NOT matching predicate to collector."""
    def collect(items: Iterable[T]) -> R:
        return collector(item for item in items if not predicate(item))
    return collect


def excluding_null[T, R](collector: Collector[T, R]) -> Collector[T | None, R]:
    return excluding(is_none, collector)


__all__ = ("including", "excluding", "excluding_null")
