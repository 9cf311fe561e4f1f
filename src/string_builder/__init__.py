"""
string_builder: chained text construction from strings and UTF-8 bytes

Quick Start:
    >>> from string_builder import StringBuilder
    >>> StringBuilder.new().append("abc").append("def").to_string()
    'abcdef'

    >>> # Bytes must hold whole characters
    >>> data = "„Pelé hat alles verändert.".encode()
    >>> (
    ...     StringBuilder.with_capacity(len(data))
    ...     .append_bytes(data[:9])
    ...     .append_bytes(data[9:18])
    ...     .append_bytes(data[18:])
    ...     .to_string()
    ... )
    '„Pelé hat alles verändert.'

    >>> # Recoverable form for untrusted input
    >>> from string_builder import Err
    >>> outcome = StringBuilder().try_append_bytes(data[:7])
    >>> isinstance(outcome, Err), outcome.error.kind.value
    (True, 'incomplete')

Installation:
    pip install string-builder       # zero runtime dependencies
"""

from string_builder.builder import StringBuilder
from string_builder.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from string_builder.errors import (
    BuilderConsumedError,
    DecodeError,
    DecodeErrorKind,
    DecodePanic,
    StringBuilderError,
)
from string_builder.result import Err, Ok, Result
from string_builder.utf8 import decode_utf8

__version__ = "0.1.0"

__all__ = [
    "BuilderConfig",
    "BuilderConsumedError",
    "DecodeError",
    "DecodeErrorKind",
    "DecodePanic",
    "Err",
    "Ok",
    "Result",
    "StringBuilder",
    "StringBuilderError",
    "__version__",
    "builder_config_context",
    "decode_utf8",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
