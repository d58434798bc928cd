"""Replace engine: rebuild text around scanner matches.

Drives a MatchScanner to exhaustion. For each match it copies the untouched
span before it verbatim, then appends the substitution. The tail after the
last match is copied at the end. Text before the scan's start offset is
untouched text like any other and is copied as-is.

Untouched spans are streamed out of the source through iter_range in
pieces of at most ScanConfig.copy_chunk_size characters, so a segmented
input is never joined into one string on the way to the output.

Thread Safety:
ReplaceEngine instances are single-use, like the scanner they consume.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from pinzas.config import get_scan_config
from pinzas.stringbuilder import StringBuilder
from pinzas.utils.logger import get_logger

if TYPE_CHECKING:
    from pinzas.result import Match
    from pinzas.scanner import MatchScanner

logger = get_logger(__name__)

Substitution = Callable[["Match"], "str | None"]


def fixed(replacement: str | None) -> Substitution:
    """Substitution that always yields the same text (None means "")."""
    text = replacement or ""
    return lambda _match: text


class ReplaceEngine:
    """Streams an output buffer from a scanner and a substitution.

    Usage:
        >>> from pinzas import Pattern
        >>> pattern = Pattern("{", "}", include_bounds=True)
        >>> engine = ReplaceEngine(pattern.iter_matches("a {x} b {y}"))
        >>> engine.run(fixed("_")).build()
        'a _ b _'
        >>> engine.replacements
        2

    """

    __slots__ = ("_chunk_size", "_origin", "_replacements", "_scanner")

    def __init__(self, scanner: MatchScanner, *, chunk_size: int | None = None) -> None:
        """Initialize engine.

        Args:
            scanner: Fresh scanner whose budget bounds the replacement count
            chunk_size: Override for ScanConfig.copy_chunk_size
        """
        self._scanner = scanner
        self._origin = scanner.origin
        self._chunk_size = chunk_size or get_scan_config().copy_chunk_size
        self._replacements = 0

    @property
    def replacements(self) -> int:
        """Number of substitutions made by run()."""
        return self._replacements

    def run(self, substitute: Substitution) -> StringBuilder:
        """Consume the scanner and build the output.

        Args:
            substitute: Called once per match, in order; None results are
                treated as empty text

        Returns:
            A new StringBuilder holding the rebuilt text.
        """
        out = StringBuilder()
        prev = 0
        for match in self._scanner:
            self._copy(out, prev, match.start)
            result = substitute(match)
            out.append("" if result is None else result)
            prev = match.end
            self._replacements += 1
        self._copy(out, prev, len(self._origin))

        logger.debug(
            "Replaced %d span(s); %d chars in, %d chars out",
            self._replacements,
            len(self._origin),
            len(out),
        )
        return out

    def _copy(self, out: StringBuilder, start: int, end: int) -> None:
        if start < end:
            out.extend(self._origin.iter_range(start, end, self._chunk_size))
