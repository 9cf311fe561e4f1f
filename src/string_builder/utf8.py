"""Strict UTF-8 decoding of self-contained byte slices.

Each slice must hold whole characters. No decoder state survives between
calls, so a character split across two slices fails on both halves: the
first ends early (incomplete), the second starts with a continuation byte
(invalid).

Example:
    >>> decode_utf8("Pelé".encode())
    'Pelé'
    >>> decode_utf8(b"Pel\\xc3")
    Traceback (most recent call last):
    ...
    string_builder.errors.DecodeError: incomplete utf-8 byte sequence from index 3
"""

from __future__ import annotations

from string_builder.errors import DecodeError

type BytesLike = bytes | bytearray | memoryview

# CPython's strict UTF-8 decoder reports truncated input with this reason
_END_OF_DATA = "unexpected end of data"


def decode_utf8(data: BytesLike) -> str:
    """Decode a complete UTF-8 slice.

    Args:
        data: Bytes holding only whole characters

    Returns:
        The decoded text

    Raises:
        TypeError: If data is not bytes-like
        DecodeError: If data is truncated or malformed. ``valid_up_to`` is
            the offset of the first bad byte; ``error_len`` is None when the
            slice ends inside an otherwise-valid multi-byte prefix.
    """
    if isinstance(data, bytes):
        raw = data
    elif isinstance(data, (bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        if exc.reason == _END_OF_DATA:
            raise DecodeError(exc.start, None, exc.reason) from exc
        raise DecodeError(exc.start, exc.end - exc.start, exc.reason) from exc


__all__ = ["BytesLike", "decode_utf8"]
