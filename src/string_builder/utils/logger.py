"""Logger lookup for string_builder.

Every record the package emits goes through a logger below the
``string_builder`` root, so one ``logging.getLogger("string_builder")``
call is enough to tune or silence all of it. Handlers are left to the
application.
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "string_builder"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the package root.

    Module names already inside the package (``__name__`` of any
    ``string_builder`` module) are used unchanged; anything else is
    nested below the root.

    Example:
        >>> get_logger("string_builder.builder").name
        'string_builder.builder'
        >>> get_logger("app").name
        'string_builder.app'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
