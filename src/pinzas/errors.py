"""Exception classes for Pinzas.

Provides standardized exceptions for error handling throughout Pinzas.
Failing to find a match is never an error; these are raised only for
contract violations at the offending call.
"""

from __future__ import annotations


class PinzasError(Exception):
    """Base exception for all Pinzas errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidConfigurationError(PinzasError, ValueError):
    """Invalid pattern, scan, or call configuration.

    Raised when a delimiter is empty, an escape marker is not a single
    character, a replacement evaluator is missing, or a copy destination
    is too small to receive a match.
    """

    def __init__(self, parameter: str, message: str) -> None:
        """Initialize configuration error.

        Args:
            parameter: Name of the offending parameter (e.g., "open", "escape")
            message: Description of what is wrong with it
        """
        self.parameter = parameter
        self.message = message
        super().__init__(f"Invalid '{parameter}': {message}")


class SnapshotMutatedError(PinzasError, RuntimeError):
    """A segmented buffer changed while a scan over it was in flight.

    Only raised when ScanConfig.verify_snapshot is enabled; otherwise
    mutation during a scan is undefined behavior.
    """

    def __init__(self, expected: int, actual: int) -> None:
        """Initialize snapshot mutation error.

        Args:
            expected: Buffer length captured when the snapshot was taken
            actual: Buffer length observed during the scan
        """
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Buffer changed during scan: snapshot length {expected}, now {actual}"
        )
