"""ContextVar-based scan configuration for Pinzas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Patterns describe *what* to match; ScanConfig describes *how* scans over
segmented buffers behave (copy granularity, snapshot verification).

Thread Safety:
    ContextVars are thread-local. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from pinzas.config import set_scan_config, reset_scan_config, ScanConfig

    set_scan_config(ScanConfig(verify_snapshot=True))
    try:
        pattern.matches(builder)
    finally:
        reset_scan_config()

    # Or use the context manager
    with scan_config_context(ScanConfig(copy_chunk_size=512)):
        pattern.replace(builder, "")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from pinzas.errors import InvalidConfigurationError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        copy_chunk_size: Largest piece copied at once when replace streams
            untouched spans out of a segmented buffer
        verify_snapshot: Check on every scanner step that a segmented buffer
            still has the length it had when its snapshot was taken

    """

    copy_chunk_size: int = 4096
    verify_snapshot: bool = False

    def __post_init__(self) -> None:
        if self.copy_chunk_size < 1:
            raise InvalidConfigurationError(
                "copy_chunk_size", f"must be >= 1, got {self.copy_chunk_size}"
            )

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                ScanConfig attribute names.

        Returns:
            New ScanConfig instance with values from dict.

        Example:
            >>> config = ScanConfig.from_dict({
            ...     "verify_snapshot": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.verify_snapshot
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

# Thread-local configuration via ContextVar
_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local).

    Returns:
        The active ScanConfig for this thread/context.

    """
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: ScanConfig to use within the context.

    Yields:
        None

    Example:
        >>> with scan_config_context(ScanConfig(verify_snapshot=True)):
        ...     pattern.matches(builder)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
