"""ContextVar-based buffer configuration for chesscli.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Every StrBuf operation reads the active config to decide whether to run its
invariant checks and how large an allocation may grow.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from chesscli.config import StrConfig, str_config_context

    with str_config_context(StrConfig(max_capacity=4096)):
        buf = StrBuf()
        buf.append(data)  # AllocationError past 4096 bytes

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class StrConfig:
    """Immutable buffer configuration.

    Attributes:
        debug_checks: Verify buffer invariants on entry and exit of every
            public operation (raises InvariantError on violation)
        max_capacity: Largest storage any single buffer may allocate, in
            bytes. None means unbounded.

    """

    debug_checks: bool = True
    max_capacity: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "StrConfig":
        """Create StrConfig from dictionary.

        Only includes keys that are valid StrConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                StrConfig attribute names.

        Returns:
            New StrConfig instance with values from dict.

        Example:
            >>> StrConfig.from_dict({"max_capacity": 64, "other": 1}).max_capacity
            64

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: StrConfig = StrConfig()

_str_config: ContextVar[StrConfig] = ContextVar(
    "str_config",
    default=_DEFAULT_CONFIG,
)


def get_str_config() -> StrConfig:
    """Get current buffer configuration (thread-local)."""
    return _str_config.get()


def set_str_config(config: StrConfig) -> None:
    """Set buffer configuration for current context.

    Args:
        config: StrConfig instance to use for this context.

    """
    _str_config.set(config)


def reset_str_config() -> None:
    """Reset to default configuration."""
    _str_config.set(_DEFAULT_CONFIG)


@contextmanager
def str_config_context(config: StrConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: StrConfig to use within the context.

    Yields:
        None

    Example:
        >>> with str_config_context(StrConfig(debug_checks=False)):
        ...     buf.append(b"fast path")
        >>> # Previous config restored

    """
    previous = _str_config.get()
    _str_config.set(config)
    try:
        yield
    finally:
        _str_config.set(previous)


__all__ = [
    "StrConfig",
    "get_str_config",
    "set_str_config",
    "reset_str_config",
    "str_config_context",
]
