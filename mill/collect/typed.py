"""Typed collector"""

from __future__ import annotations

from collections.abc import Callable, Iterable


def typed[S, R](cls: type[S], factory: Callable[[Iterable[S]], R] = list) -> Callable[[Iterable[object]], R]:
    """
    Keep instances of cls (subclasses included), build the result with factory.

    Example:
        typed(RcsMessage)(messages)  # [RcsMessage(1)]
        typed(int, set)([1, "a", 1, 2.0])  # {1}
    """
    def collect(items: Iterable[object]) -> R:
        return factory(item for item in items if isinstance(item, cls))
    return collect


__all__ = ("typed",)
