"""ContextVar-based builder configuration.

Provides context-local configuration using Python's ContextVars (PEP 567).
Builders read the active config when they are created and when a decode
failure needs reporting.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from string_builder.config import BuilderConfig, builder_config_context

    with builder_config_context(BuilderConfig(default_capacity=4096)):
        sb = StringBuilder()
        ...

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable builder configuration.

    Attributes:
        default_capacity: Capacity hint for builders created without one
        log_decode_failures: Log malformed byte input before reporting it

    """

    default_capacity: int = 0
    log_decode_failures: bool = True

    def __post_init__(self) -> None:
        check_capacity(self.default_capacity, "default_capacity")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "BuilderConfig":
        """Create BuilderConfig from dictionary.

        Only includes keys that are valid BuilderConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                BuilderConfig attribute names.

        Returns:
            New BuilderConfig instance with values from dict.

        Example:
            >>> BuilderConfig.from_dict({"default_capacity": 256, "x": 1})
            BuilderConfig(default_capacity=256, log_decode_failures=True)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


def check_capacity(size: object, name: str = "capacity") -> None:
    """Reject capacity hints that are not non-negative ints.

    Raises:
        TypeError: If size is not an int (bools are rejected too)
        ValueError: If size is negative
    """
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError(f"{name} must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"{name} must be >= 0, got {size}")


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: BuilderConfig = BuilderConfig()

_builder_config: ContextVar[BuilderConfig] = ContextVar(
    "builder_config",
    default=_DEFAULT_CONFIG,
)


def get_builder_config() -> BuilderConfig:
    """Get the active builder configuration for this context."""
    return _builder_config.get()


def set_builder_config(config: BuilderConfig) -> None:
    """Set builder configuration for the current context.

    Other threads are unaffected.

    """
    _builder_config.set(config)


def reset_builder_config() -> None:
    """Reset to the default configuration."""
    _builder_config.set(_DEFAULT_CONFIG)


@contextmanager
def builder_config_context(config: BuilderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with builder_config_context(BuilderConfig(log_decode_failures=False)):
        ...     StringBuilder().try_append_bytes(b"\\xff").is_err()
        True

    """
    previous = _builder_config.get()
    _builder_config.set(config)
    try:
        yield
    finally:
        _builder_config.set(previous)


__all__ = [
    "BuilderConfig",
    "check_capacity",
    "builder_config_context",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
