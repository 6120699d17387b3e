"""Concat combinators

Ordered concatenation of any number of iterables."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator


def concat[T](*sources: Iterable[T]) -> Iterator[T]:
    """
    First source fully, then the second, and so on. Duplicates kept.

    Sources can be iterators, generators, lists, tuples, sets — anything iterable.
    Lazy: nothing is pulled until the result is iterated.
    """
    return itertools.chain.from_iterable(sources)


def distinct_values[T](*sources: Iterable[T]) -> Iterator[T]:
    """Concat, then drop repeats keeping the first occurrence. Elements must be hashable."""
    seen: set[T] = set()
    for item in concat(*sources):
        if item not in seen:
            seen.add(item)
            yield item


__all__ = ("concat", "distinct_values")
