"""Joining collector"""

from __future__ import annotations

from collections.abc import Iterable

from .._types import Collector


def joining(delimiter: str, prefix: str = "", suffix: str = "") -> Collector[object, str]:
    """
    Join str() of every element. No need to map to str first.

    Example:
        joining(", ")([date(2018, 1, 1), None, 3])  # '2018-01-01, None, 3'
        joining("|", "[", "]")(["a", "b"])  # '[a|b]'
    """
    def collect(items: Iterable[object]) -> str:
        return prefix + delimiter.join(str(item) for item in items) + suffix
    return collect


__all__ = ("joining",)
