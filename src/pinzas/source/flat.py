"""Flat character source over a single str.

Every operation delegates to the C-implemented str methods, so this is
the fastest path through the scanner.
"""

from __future__ import annotations

from collections.abc import Iterator


class FlatSource:
    """CharacterSource over one contiguous str with O(1) indexed access."""

    __slots__ = ("_length", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._length = len(text)

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"FlatSource(length={self._length})"

    def char_at(self, index: int) -> str:
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")
        return self._text[index]

    def find_char(self, char: str, start: int, end: int | None = None) -> int:
        return self._text.find(char, max(start, 0), self._length if end is None else end)

    def sequence_equals_at(self, start: int, token: str) -> bool:
        return start >= 0 and self._text.startswith(token, start)

    def index_of(self, needle: str, start: int, end: int | None = None) -> int:
        return self._text.find(needle, max(start, 0), self._length if end is None else end)

    def slice(self, start: int, end: int) -> str:
        return self._text[max(start, 0) : end]

    def iter_range(self, start: int, end: int, max_piece: int | None = None) -> Iterator[str]:
        start = max(start, 0)
        end = min(end, self._length)
        if max_piece is None:
            if start < end:
                yield self._text[start:end]
            return
        for pos in range(start, end, max_piece):
            yield self._text[pos : min(pos + max_piece, end)]

    def verify_unchanged(self) -> None:
        # str is immutable; nothing can change underneath us
        return None
