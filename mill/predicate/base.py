"""
Composable predicates
=====================

Pred wraps a plain `T -> bool` function and adds boolean combinators.
Every predicate builder in mill returns a Pred, so results compose:

    young_or_old = is_less_than(18) | is_greater_than(65)
    filter(young_or_old & non_null_age, people)
"""

from __future__ import annotations

from dataclasses import dataclass

from .._types import Predicate


@dataclass(frozen=True, slots=True)
class Pred[T]:
    """
    Immutable predicate value.

    Callable like the wrapped function, so it can be handed straight to
    `filter()`, comprehensions or any `key`-style parameter expecting a bool.
    Composition short-circuits left to right, like `and` / `or`.
    """

    test: Predicate[T]

    def __call__(self, value: T) -> bool:
        return bool(self.test(value))

    def and_(self, other: Predicate[T], /) -> Pred[T]:
        """Both must hold."""
        return Pred(lambda value: self(value) and bool(other(value)))

    def or_(self, other: Predicate[T], /) -> Pred[T]:
        """Either may hold."""
        return Pred(lambda value: self(value) or bool(other(value)))

    def negate(self) -> Pred[T]:
        return Pred(lambda value: not self(value))

    def __and__(self, other: Predicate[T]) -> Pred[T]:
        return self.and_(other)

    def __or__(self, other: Predicate[T]) -> Pred[T]:
        return self.or_(other)

    def __invert__(self) -> Pred[T]:
        return self.negate()


def pred[T](test: Predicate[T]) -> Pred[T]:
    """Lift a plain function into Pred (no-op for Pred)."""
    if isinstance(test, Pred):
        return test
    return Pred(test)


def all_of[T](*predicates: Predicate[T]) -> Pred[T]:
    """True when every predicate holds. Empty -> always True."""
    return Pred(lambda value: all(p(value) for p in predicates))


def any_of[T](*predicates: Predicate[T]) -> Pred[T]:
    """True when at least one predicate holds. Empty -> always False."""
    return Pred(lambda value: any(p(value) for p in predicates))


def not_[T](predicate: Predicate[T]) -> Pred[T]:
    return pred(predicate).negate()


__all__ = ("Pred", "pred", "all_of", "any_of", "not_")
