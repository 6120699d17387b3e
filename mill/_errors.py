from __future__ import annotations

import typing


class InvalidRangeError(ValueError):
    """Range low bound is greater than its high bound."""

    low: typing.Any
    high: typing.Any

    def __init__(self, low: typing.Any, high: typing.Any) -> None:
        self.low = low
        self.high = high
        super().__init__(
            f"Please pass a valid range to the range predicate. Your range ({low!r}, {high!r}) is invalid."
        )


__all__ = ("InvalidRangeError",)
