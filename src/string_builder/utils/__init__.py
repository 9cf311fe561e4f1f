"""Utility modules for string_builder.

Provides:
- logger: get_logger and the package's root logger name
"""

from string_builder.utils.logger import ROOT_LOGGER_NAME, get_logger

__all__ = [
    "ROOT_LOGGER_NAME",
    "get_logger",
]
