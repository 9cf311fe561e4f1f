"""Exception classes for string_builder.

Two failure policies exist side by side:

- ``DecodeError`` is an ordinary exception value. ``try_append_bytes()``
  returns it wrapped in ``Err`` rather than raising it.
- ``DecodePanic`` is the fatal abort raised by ``append_bytes()``. It derives
  from ``BaseException`` (like ``SystemExit``) so that ``except Exception``
  handlers do not swallow it.
"""

from __future__ import annotations

from enum import Enum


class StringBuilderError(Exception):
    """Base exception for all string_builder errors."""

    pass


class DecodeErrorKind(Enum):
    """Why a byte slice failed to decode."""

    INCOMPLETE = "incomplete"
    INVALID = "invalid"


class DecodeError(StringBuilderError):
    """A byte slice is not complete, well-formed UTF-8.

    Offsets are relative to the slice handed to the failing call, not to the
    builder's accumulated content.
    """

    def __init__(
        self,
        valid_up_to: int,
        error_len: int | None,
        reason: str = "",
    ) -> None:
        """Initialize decode error.

        Args:
            valid_up_to: Length of the longest valid UTF-8 prefix of the slice
            error_len: Length of the invalid sequence, or None when the slice
                ends inside a multi-byte character
            reason: Decoder reason string (informational)
        """
        self.valid_up_to = valid_up_to
        self.error_len = error_len
        self.reason = reason

        if error_len is None:
            message = f"incomplete utf-8 byte sequence from index {valid_up_to}"
        else:
            message = f"invalid utf-8 sequence of {error_len} bytes from index {valid_up_to}"
        super().__init__(message)

    def __reduce__(self) -> tuple[type[DecodeError], tuple[int, int | None, str]]:
        return (type(self), (self.valid_up_to, self.error_len, self.reason))

    @property
    def kind(self) -> DecodeErrorKind:
        if self.error_len is None:
            return DecodeErrorKind.INCOMPLETE
        return DecodeErrorKind.INVALID

    @property
    def message(self) -> str:
        return str(self)


class BuilderConsumedError(StringBuilderError):
    """A builder was used after it gave up ownership of its content.

    Raised when any operation is attempted after ``to_string()``, after a
    failed ``try_append_bytes()``, or after ``append_bytes()`` aborted.
    """

    def __init__(self, operation: str, consumed_by: str) -> None:
        """Initialize consumed-builder error.

        Args:
            operation: The operation that was attempted
            consumed_by: The operation that consumed the builder
        """
        self.operation = operation
        self.consumed_by = consumed_by
        super().__init__(f"Cannot call {operation}(): builder was consumed by {consumed_by}()")

    def __reduce__(self) -> tuple[type[BuilderConsumedError], tuple[str, str]]:
        return (type(self), (self.operation, self.consumed_by))


class DecodePanic(BaseException):
    """Fatal abort for bytes the caller promised were valid UTF-8.

    Not a subclass of ``Exception``. The decode failure is available as
    ``error`` and as ``__cause__``.
    """

    def __init__(self, error: DecodeError) -> None:
        self.error = error
        super().__init__(f"append_bytes() called with malformed UTF-8: {error}")

    def __reduce__(self) -> tuple[type[DecodePanic], tuple[DecodeError]]:
        return (type(self), (self.error,))
