"""Null-dropping helpers"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .._helpers import is_not_none


def non_null[T](items: Iterable[T | None]) -> Iterator[T]:
    """Drop None elements."""
    return filter(is_not_none, items)


def mapped_non_null[T, U](items: Iterable[T | None], fn: Callable[[T], U | None]) -> Iterator[U]:
    """Drop None, apply fn, drop None results."""
    return filter(is_not_none, map(fn, non_null(items)))


__all__ = ("non_null", "mapped_non_null")
