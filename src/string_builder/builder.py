"""StringBuilder for chained text construction.

Text fragments and UTF-8 byte slices are appended in a chain, then the
finished string is taken out once with ``to_string()``. Parts go into a
list and are joined at the end: O(n) total vs O(n²) for repeated string
concatenation.

Byte input comes in two flavors:
- ``append_bytes()`` trusts its input. Malformed or truncated UTF-8 raises
  ``DecodePanic``, which ordinary ``except Exception`` handlers do not catch.
- ``try_append_bytes()`` returns ``Ok(builder)`` or ``Err(DecodeError)``.

Ownership:
Every mutating call returns the same instance. ``to_string()`` and any
failed byte append consume the builder; using it afterwards raises
``BuilderConsumedError``. The buffer only ever holds fully decoded text.

Thread Safety:
Instances are not shared. One chain owns one builder.

"""

from __future__ import annotations

from collections.abc import Iterable

from string_builder.config import check_capacity, get_builder_config
from string_builder.errors import BuilderConsumedError, DecodeError, DecodePanic
from string_builder.result import Err, Ok, Result
from string_builder.utf8 import BytesLike, decode_utf8
from string_builder.utils.logger import get_logger

logger = get_logger(__name__)


class StringBuilder:
    """Chainable text accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("abc").append("def").append_bytes("ghé".encode()).to_string()
            'abcdefghé'

            >>> match StringBuilder.from_str("Pel").try_append_bytes(b"\\xc3"):
            ...     case Ok(sb):
            ...         print(sb.to_string())
            ...     case Err(error):
            ...         print(error)
            incomplete utf-8 byte sequence from index 0

    Construction:
        StringBuilder.new()               # empty, default capacity hint
        StringBuilder.with_capacity(1000) # empty, expected final size
        StringBuilder.from_str("abc")     # seeded with a copy of "abc"

    """

    __slots__ = ("_parts", "_length", "_capacity", "_consumed_by")

    def __init__(self, initial: str = "", *, capacity: int | None = None) -> None:
        """Initialize builder.

        Args:
            initial: Text to seed the buffer with (copied)
            capacity: Expected final length in characters. None uses the
                configured default. Only a hint; content is never affected.
        """
        if capacity is None:
            capacity = get_builder_config().default_capacity
        check_capacity(capacity)
        _check_fragment(initial)
        self._parts: list[str] = []
        self._length = 0
        self._capacity = capacity
        self._consumed_by: str | None = None
        if initial:
            self._push(initial)

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls) -> StringBuilder:
        """Empty builder with the default capacity hint."""
        return cls()

    @classmethod
    def with_capacity(cls, size: int) -> StringBuilder:
        """Empty builder sized for roughly ``size`` characters.

        A good guess avoids intermediate regrowth. ``size == 0`` behaves
        like ``new()``.

        Raises:
            ValueError: If size is negative
        """
        return cls(capacity=size)

    @classmethod
    def from_str(cls, initial: str) -> StringBuilder:
        """Builder whose buffer starts as a copy of ``initial``."""
        return cls(initial)

    # =========================================================================
    # Appending
    # =========================================================================

    def append(self, fragment: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            fragment: String to append (empty strings are a no-op)

        Returns:
            self for method chaining
        """
        self._ensure_live("append")
        _check_fragment(fragment)
        if fragment:
            self._push(fragment)
        return self

    def append_line(self, fragment: str = "") -> StringBuilder:
        """Append a string followed by newline.

        Args:
            fragment: String to append (empty = just newline)

        Returns:
            self for method chaining
        """
        self._ensure_live("append_line")
        _check_fragment(fragment)
        if fragment:
            self._push(fragment)
        self._push("\n")
        return self

    def extend(self, fragments: Iterable[str]) -> StringBuilder:
        """Append multiple strings in order.

        All fragments are type-checked before any is appended.

        Returns:
            self for method chaining
        """
        self._ensure_live("extend")
        pending = list(fragments)
        for fragment in pending:
            _check_fragment(fragment)
        for fragment in pending:
            if fragment:
                self._push(fragment)
        return self

    def append_bytes(self, data: BytesLike) -> StringBuilder:
        """Append UTF-8 bytes the caller guarantees are well-formed.

        ``data`` must decode on its own: a multi-byte character split across
        two calls is a usage error on both calls.

        Returns:
            self for method chaining

        Raises:
            DecodePanic: If data is truncated or malformed. The builder is
                consumed and nothing is appended.
        """
        self._ensure_live("append_bytes")
        try:
            text = decode_utf8(data)
        except DecodeError as exc:
            self._consumed_by = "append_bytes"
            if get_builder_config().log_decode_failures:
                logger.error("append_bytes() aborted on malformed UTF-8: %s", exc)
            raise DecodePanic(exc) from exc
        if text:
            self._push(text)
        return self

    def try_append_bytes(self, data: BytesLike) -> Result[StringBuilder, DecodeError]:
        """Append UTF-8 bytes that may be malformed.

        Same decoding rule as ``append_bytes()``.

        Returns:
            Ok(self) on success. Err(DecodeError) if data is truncated or
            malformed; the builder is then consumed and must not be reused.
        """
        self._ensure_live("try_append_bytes")
        try:
            text = decode_utf8(data)
        except DecodeError as exc:
            self._consumed_by = "try_append_bytes"
            if get_builder_config().log_decode_failures:
                logger.debug("try_append_bytes() rejected input: %s", exc)
            return Err(exc)
        if text:
            self._push(text)
        return Ok(self)

    # =========================================================================
    # Extraction
    # =========================================================================

    def to_string(self) -> str:
        """Consume the builder and return the built string."""
        self._ensure_live("to_string")
        result = "".join(self._parts)
        self._parts = []
        self._length = 0
        self._consumed_by = "to_string"
        return result

    build = to_string

    @property
    def value(self) -> str:
        """Current content, without consuming the builder."""
        self._ensure_live("value")
        if len(self._parts) > 1:
            # Collapse so repeated peeks stay linear
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    @property
    def capacity(self) -> int:
        """Capacity hint, never less than the current length."""
        self._ensure_live("capacity")
        return max(self._capacity, self._length)

    @property
    def consumed(self) -> bool:
        """True once to_string() or a failed byte append has taken the content."""
        return self._consumed_by is not None

    def __len__(self) -> int:
        """Return number of characters built so far."""
        self._ensure_live("__len__")
        return self._length

    def __bool__(self) -> bool:
        """Return True if the buffer is non-empty."""
        self._ensure_live("__bool__")
        return self._length > 0

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        if self._consumed_by is not None:
            return f"<StringBuilder consumed by {self._consumed_by}()>"
        return f"<StringBuilder len={self._length} capacity={max(self._capacity, self._length)}>"

    # =========================================================================
    # Internals
    # =========================================================================

    def _push(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def _ensure_live(self, operation: str) -> None:
        if self._consumed_by is not None:
            raise BuilderConsumedError(operation, self._consumed_by)


def _check_fragment(fragment: object) -> None:
    if not isinstance(fragment, str):
        raise TypeError(f"expected str fragment, got {type(fragment).__name__}")

