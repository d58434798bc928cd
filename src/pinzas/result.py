"""Match results.

A Match records where a delimited span was found and keeps a reference to
the source it was found in. The matched text is materialized only when
``value`` is read (or copied out with ``copy_to``); for a segmented buffer
that means only the matched range is ever joined.

Thread Safety:
Match is frozen. Reading ``value`` goes through the source, which is
scan-local; read values from the thread that ran the scan.

"""

from __future__ import annotations

from collections.abc import MutableSequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pinzas.config import get_scan_config
from pinzas.errors import InvalidConfigurationError

if TYPE_CHECKING:
    from pinzas.source import CharacterSource


@dataclass(frozen=True, slots=True)
class Match:
    """A located span.

    Attributes:
        start: Offset of the reported span (delimiters included or not,
            per the pattern's include_bounds)
        length: Span length; -1 for an unsuccessful match
        source: Source the span is read from

    Usage:
        >>> from pinzas import Pattern
        >>> m = Pattern("(", ")").match("f(x, y)")
        >>> m.start, m.length, m.end, m.value
        (2, 4, 6, 'x, y')
        >>> bool(Pattern("(", ")").match("no parens"))
        False

    """

    start: int
    length: int
    source: CharacterSource | None = field(default=None, repr=False, compare=False)

    @classmethod
    def failed(cls, source: CharacterSource | None = None) -> Match:
        """The unsuccessful-match sentinel."""
        return cls(-1, -1, source)

    @property
    def success(self) -> bool:
        return self.length >= 0

    @property
    def end(self) -> int:
        """Exclusive end offset (start + length)."""
        return self.start + self.length

    @property
    def value(self) -> str:
        """The matched text, materialized on demand ("" if unsuccessful)."""
        if self.length <= 0 or self.source is None:
            return ""
        if get_scan_config().verify_snapshot:
            self.source.verify_unchanged()
        return self.source.slice(self.start, self.end)

    def copy_to(self, destination: MutableSequence[str], offset: int = 0) -> int:
        """Write the matched characters into destination[offset:].

        Args:
            destination: Pre-sized mutable sequence of characters
                (e.g. a list of str)
            offset: First slot to write

        Returns:
            Number of characters written.

        Raises:
            InvalidConfigurationError: If destination cannot hold the match.
        """
        if self.length <= 0 or self.source is None:
            return 0
        if offset < 0 or len(destination) - offset < self.length:
            raise InvalidConfigurationError(
                "destination",
                f"needs {self.length} slots from offset {offset}, has {len(destination) - offset}",
            )
        i = offset
        for piece in self.source.iter_range(self.start, self.end):
            for char in piece:
                destination[i] = char
                i += 1
        return self.length

    def rebind(self, source: CharacterSource) -> Match:
        """Return the same span addressed against another source."""
        return Match(self.start, self.length, source)

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        return self.value
