"""Match-scanning state machine with guaranteed forward progress.

The scanner is a lazy iterator over non-overlapping matches. Each step
looks for an unescaped open token, resolves its close token under the
pattern's ClosePolicy, runs the content filter on the interior, and
either yields a Match or discards the candidate and keeps going.

States:
    SEEKING   -> looking for the next candidate
    FOUND     -> one match was just produced; the next call seeks again
    EXHAUSTED -> terminal; source consumed or match budget spent

The cursor only ever moves forward (past each close token, accepted or
rejected), so a scan finishes in O(n) token-search steps. There is no
backtracking and no mid-sequence restart: start a new scan from an
explicit offset instead.

Thread Safety:
Scanners are single-use and scan-local. Create one per scan; the Pattern
they read from may be shared freely.

"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from pinzas.balance import find_balanced_end
from pinzas.config import get_scan_config
from pinzas.locator import find_last_before, find_next
from pinzas.profiling import get_scan_accumulator
from pinzas.result import Match
from pinzas.tokens import ClosePolicy
from pinzas.utils.logger import get_logger

if TYPE_CHECKING:
    from pinzas.pattern import Pattern
    from pinzas.source import CharacterSource

logger = get_logger(__name__)


class ScanState(Enum):
    """Scanner states."""

    SEEKING = auto()
    FOUND = auto()
    EXHAUSTED = auto()


@dataclass(slots=True)
class ScanCursor:
    """Mutable per-scan position and remaining-match budget.

    Attributes:
        position: Next index to search from
        remaining: Matches still allowed

    """

    position: int
    remaining: int

    def advance_to(self, position: int) -> None:
        """Move forward to position; never moves backward."""
        if position > self.position:
            self.position = position


def normalize_budget(max_matches: int | None) -> int:
    """None means unbounded; negative budgets count as zero."""
    if max_matches is None:
        return sys.maxsize
    return max(0, max_matches)


class MatchScanner:
    """Lazy, forward-only iterator of matches for one pattern over one source.

    Usage:
            >>> from pinzas import Pattern
            >>> scanner = Pattern("[", "]").iter_matches("[a] [b] [c]", max_matches=2)
            >>> [m.value for m in scanner]
            ['a', 'b']
            >>> scanner.state
            <ScanState.EXHAUSTED: 3>

    """

    __slots__ = (
        "_accumulator",
        "_cursor",
        "_length",
        "_matches",
        "_origin",
        "_pattern",
        "_recorded",
        "_rejected",
        "_source",
        "_state",
        "_verify",
    )

    def __init__(
        self,
        pattern: Pattern,
        source: CharacterSource,
        *,
        start: int = 0,
        max_matches: int | None = None,
        origin: CharacterSource | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            pattern: Pattern to apply
            source: Source to search
            start: Offset to begin at (clamped into [0, len(source)])
            max_matches: Budget of matches to produce (None = unbounded)
            origin: Source matches are bound to; defaults to ``source``
        """
        self._pattern = pattern
        self._source = source
        self._origin = source if origin is None else origin
        self._length = len(source)
        self._cursor = ScanCursor(
            position=min(max(start, 0), self._length),
            remaining=normalize_budget(max_matches),
        )
        self._state = ScanState.SEEKING
        self._matches = 0
        self._rejected = 0
        self._recorded = False
        self._verify = get_scan_config().verify_snapshot
        self._accumulator = get_scan_accumulator()

    def __iter__(self) -> MatchScanner:
        return self

    def __next__(self) -> Match:
        match = self.try_next()
        if match is None:
            raise StopIteration
        return match

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def position(self) -> int:
        return self._cursor.position

    @property
    def remaining(self) -> int:
        return self._cursor.remaining

    @property
    def matches_found(self) -> int:
        return self._matches

    @property
    def rejected(self) -> int:
        """Candidates discarded by the content filter so far."""
        return self._rejected

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def source(self) -> CharacterSource:
        return self._source

    @property
    def origin(self) -> CharacterSource:
        return self._origin

    # =========================================================================
    # Stepping
    # =========================================================================

    def try_next(self) -> Match | None:
        """Advance to the next match.

        Returns:
            The next Match, or None once the scanner is exhausted.

        Raises:
            SnapshotMutatedError: If snapshot verification is enabled and
                the underlying buffer changed since the scan started.
        """
        if self._state is ScanState.EXHAUSTED:
            return None

        self._state = ScanState.SEEKING
        cursor = self._cursor
        if cursor.remaining <= 0 or cursor.position >= self._length:
            self._exhaust()
            return None

        if self._verify:
            self._origin.verify_unchanged()

        match = self._seek()
        if match is None:
            self._exhaust()
            return None

        self._state = ScanState.FOUND
        if cursor.remaining <= 0 or cursor.position >= self._length:
            # Nothing further can match; report now rather than on the next call
            self._record()
        return match

    def _seek(self) -> Match | None:
        pattern = self._pattern
        source = self._source
        cursor = self._cursor
        open_token = pattern.open_token
        close_len = len(pattern.close_token)
        content_filter = pattern.content_filter
        check_content = not content_filter.is_noop

        while True:
            start = find_next(source, open_token, cursor.position, pattern.escape)
            if start < 0:
                return None

            interior = start + len(open_token)
            close = self._find_close(interior)
            if close < 0:
                return None

            after = close + close_len
            cursor.advance_to(after)

            if check_content and not content_filter.passes(source, interior, close):
                self._rejected += 1
                continue

            cursor.remaining -= 1
            self._matches += 1
            if pattern.include_bounds:
                return Match(start, after - start, self._origin)
            return Match(interior, close - interior, self._origin)

    def _find_close(self, interior: int) -> int:
        pattern = self._pattern
        source = self._source
        policy = pattern.close_policy

        if policy is ClosePolicy.TOGGLE or policy is ClosePolicy.SHORTEST:
            return find_next(source, pattern.close_token, interior, pattern.escape)

        if policy is ClosePolicy.NESTED:
            return find_balanced_end(
                source, interior, pattern.open_token, pattern.close_token, pattern.escape
            )

        next_open = find_next(source, pattern.open_token, interior, pattern.escape)
        window_end = self._length if next_open < 0 else next_open
        return find_last_before(source, pattern.close_token, interior, window_end, pattern.escape)

    def _exhaust(self) -> None:
        self._state = ScanState.EXHAUSTED
        self._record()

    def _record(self) -> None:
        if self._recorded:
            return
        self._recorded = True
        logger.debug(
            "Scan finished at %d/%d: %d match(es), %d rejected",
            self._cursor.position,
            self._length,
            self._matches,
            self._rejected,
        )
        if self._accumulator is not None:
            self._accumulator.record_scan(
                source_length=self._length,
                matches=self._matches,
                rejected=self._rejected,
            )
