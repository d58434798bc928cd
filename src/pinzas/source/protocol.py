"""Protocols for Pinzas character sources.

Defines the uniform read-only access contract the scanner and its helpers
use, regardless of whether text lives in one str or in many segments.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable


class CharacterSource(Protocol):
    """Indexed and search access over a logical character sequence.

    All indices are global offsets into the logical sequence. Searches
    return -1 when nothing is found; a zero-length source finds nothing.

    Thread Safety:
        Implementations may keep a private lookup cache, so a source is
        scan-local. Build one per scan; share Patterns, not sources.

    """

    def __len__(self) -> int: ...

    def char_at(self, index: int) -> str:
        """Return the character at index (0 <= index < len)."""
        ...

    def find_char(self, char: str, start: int, end: int | None = None) -> int:
        """Return the first index of char in [start, end), or -1."""
        ...

    def sequence_equals_at(self, start: int, token: str) -> bool:
        """Check whether token occurs exactly at start."""
        ...

    def index_of(self, needle: str, start: int, end: int | None = None) -> int:
        """Return the first index where needle lies wholly inside [start, end), or -1."""
        ...

    def slice(self, start: int, end: int) -> str:
        """Materialize [start, end) as a str."""
        ...

    def iter_range(self, start: int, end: int, max_piece: int | None = None) -> Iterator[str]:
        """Yield [start, end) as consecutive pieces without joining them.

        Complexity: O(end - start); each piece is at most max_piece long.
        """
        ...

    def verify_unchanged(self) -> None:
        """Raise SnapshotMutatedError if the backing buffer changed."""
        ...


@runtime_checkable
class SegmentedText(Protocol):
    """A mutable text buffer that exposes its parts without joining them.

    pinzas.StringBuilder is the reference implementation.
    """

    def __len__(self) -> int: ...

    def iter_chunks(self) -> Iterable[str]: ...
