"""Pinzas ScanAccumulator: opt-in profiling for delimiter scans.

This module provides accumulated metrics across scans:
- Total profiling time
- Source length scanned
- Matches produced
- Candidates rejected by content filters

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from pinzas import Pattern
    from pinzas.profiling import profiled_scan

    pattern = Pattern("[", "]", excluded=["draft"])
    with profiled_scan() as metrics:
        pattern.matches("[a] [draft b] [c]")

    print(metrics.summary())
    # {"total_ms": 0.1, "scans": 1, "source_length": 17, "matches": 2, "rejected": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics across delimiter scans.

    Attributes:
        start_time: Profiling start timestamp.
        scans: Number of scans that ran to exhaustion.
        source_length: Total length of the sources scanned.
        matches: Matches produced.
        rejected: Candidates discarded by the content filter.

    """

    start_time: float = field(default_factory=perf_counter)
    scans: int = 0
    source_length: int = 0
    matches: int = 0
    rejected: int = 0

    def record_scan(self, source_length: int, matches: int, rejected: int) -> None:
        """Record a finished scan.

        Args:
            source_length: Length of the scanned source.
            matches: Matches the scan produced.
            rejected: Candidates the content filter discarded.

        """
        self.scans += 1
        self.source_length += source_length
        self.matches += matches
        self.rejected += rejected

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, scans, source_length, matches, rejected.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "scans": self.scans,
            "source_length": self.source_length,
            "matches": self.matches,
            "rejected": self.rejected,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated as scans finish.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
