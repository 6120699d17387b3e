"""
Set-algebra combinators
=======================

Intersection and difference over N iterables.

Both are lazy and built from one pairwise step: materialize the right
operand into a membership set, then filter the left operand (left is not
deduplicated). Intersection folds that step left to right, so output
multiplicity follows the FIRST source only:

    list(intersection([1, 1, 2], [1, 2, 2]))  # [1, 1, 2]
    list(intersection([1, 2, 3], [1], [1, 2, 3]))  # [1]

Множества строятся при первой итерации результата, не при вызове.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable, Iterator

from .concat import concat


def _keep_members[T](left: Iterable[T], right: Iterable[T]) -> Iterator[T]:
    members = set(right)
    for item in left:
        if item in members:
            yield item


def _drop_members[T](left: Iterable[T], right: Iterable[T]) -> Iterator[T]:
    members = set(right)
    for item in left:
        if item not in members:
            yield item


def intersection[T](*sources: Iterable[T]) -> Iterator[T]:
    """
    Elements of the first source present in every other source.

    Zero sources -> empty. One source -> that source unchanged.
    """
    if not sources:
        return iter(())
    return iter(functools.reduce(_keep_members, sources))


def difference[T](*sources: Iterable[T]) -> Iterator[T]:
    """
    Elements of the first source absent from all the others.

    Zero sources -> empty. One source -> that source unchanged.
    """
    if not sources:
        return iter(())
    first, *rest = sources
    if not rest:
        return iter(first)
    return _drop_members(first, concat(*rest))


__all__ = ("intersection", "difference")
