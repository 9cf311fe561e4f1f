"""Outcome values for fallible builder operations.

``try_append_bytes()`` returns ``Ok(builder)`` or ``Err(decode_error)``.
Both are frozen dataclasses, so they work with ``match``:

    >>> match StringBuilder().try_append_bytes(b"abc"):
    ...     case Ok(builder):
    ...         builder.to_string()
    ...     case Err(error):
    ...         ...
    'abc'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, NoReturn


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"unwrap_err() called on Ok({self.value!r})")

    def unwrap_or[D](self, default: D) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed outcome carrying an error."""

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        Exceptions are raised as-is; any other error value is wrapped in
        ValueError.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"unwrap() called on Err({self.error!r})")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E] = Ok[T] | Err[E]


__all__ = ["Err", "Ok", "Result"]
