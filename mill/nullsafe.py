"""
NullSafe - null-conditional call chaining
=========================================

Replaces nested `is not None` checks:

    length = (
        NullSafe.of(user)
        .call(lambda u: u.email)
        .call(lambda e: e.domain)
        .call(len)
        .get_or_default(0)
    )

instead of

    length = 0
    if user is not None:
        email = user.email
        if email is not None:
            domain = email.domain
            if domain is not None:
                length = len(domain)

States: Present(value) and Absent (value is None). Once Absent, every later
`call` is skipped and the function is never invoked.

NOTE: Only None is absorbed. An exception raised by a step propagates
      immediately and aborts the rest of the chain.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result


class NullSafe[T]:
    """Single immutable slot holding a value or None."""

    __slots__ = ("_value",)

    def __init__(self, value: T | None, /) -> None:
        """Prefer NullSafe.of()."""
        self._value = value

    @staticmethod
    def of[V](value: V | None) -> NullSafe[V]:
        """Start a chain."""
        return NullSafe(value)

    @staticmethod
    def from_result[V, E](result: Result[V, E]) -> NullSafe[V]:
        """
        Start a chain from a Result. Error becomes Absent.

        Example:
            NullSafe.from_result(lookup(user_id)).call(lambda u: u.email).get()
        """
        match result:
            case Ok(value):
                return NullSafe(value)
            case Error(_):
                return NullSafe(None)
            case _:
                typing.assert_never(result)

    @property
    def is_present(self) -> bool:
        return self._value is not None

    def call[U](self, fn: Callable[[T], U | None]) -> NullSafe[U]:
        """Apply fn to the value if present. Absent stays Absent."""
        return NullSafe(self.get(fn))

    @typing.overload
    def get(self) -> T | None: ...

    @typing.overload
    def get[U](self, fn: Callable[[T], U | None]) -> U | None: ...

    def get(self, fn: Callable[[T], typing.Any] | None = None) -> typing.Any:
        """
        Raw value, or fn applied to it.

        With fn: returns None without invoking fn when Absent.
        """
        if fn is None:
            return self._value
        if self._value is None:
            return None
        return fn(self._value)

    def get_or_default(self, fallback: T) -> T:
        return fallback if self._value is None else self._value

    def get_or_throw(self, error: BaseException) -> T:
        """Return the value, or raise `error` itself (not a copy) when Absent."""
        if self._value is None:
            raise error
        return self._value

    def to_result[E](self, error: E) -> Result[T, E]:
        """Ok(value) when present, Error(error) when Absent."""
        if self._value is None:
            return Error(error)
        return Ok(self._value)

    def __repr__(self) -> str:
        return f"NullSafe({self._value!r})"


__all__ = ("NullSafe",)
