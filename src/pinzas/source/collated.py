"""Collated character source: the locale/case-aware slow path.

Non-ordinal comparison is never attempted against a chunked layout.
Instead the input is flattened once, each character is folded into its
comparison key, and searches compare keys. Reads (char_at, slice,
iter_range) still return the original characters, so escape markers are
matched exactly and reported values are the source's own text.

Because folding is strictly per character, offsets are identical to the
original buffer's and need no translation beyond rebinding.
"""

from __future__ import annotations

from pinzas.comparison import Comparison
from pinzas.source.flat import FlatSource


class CollatedSource(FlatSource):
    """FlatSource whose searches use a Comparison's per-character keys."""

    __slots__ = ("_comparison", "_folded", "_keys")

    def __init__(self, text: str, comparison: Comparison) -> None:
        super().__init__(text)
        self._comparison = comparison
        self._keys = comparison.fold_text(text)
        self._folded: dict[str, list[str]] = {}

    @property
    def comparison(self) -> Comparison:
        return self._comparison

    def __repr__(self) -> str:
        return f"CollatedSource(length={self._length}, comparison={self._comparison.value})"

    def _fold(self, text: str) -> list[str]:
        folded = self._folded.get(text)
        if folded is None:
            folded = self._comparison.fold_text(text)
            self._folded[text] = folded
        return folded

    def find_char(self, char: str, start: int, end: int | None = None) -> int:
        end = self._length if end is None else min(end, self._length)
        start = max(start, 0)
        if start >= end:
            return -1
        try:
            return self._keys.index(self._fold(char)[0], start, end)
        except ValueError:
            return -1

    def sequence_equals_at(self, start: int, token: str) -> bool:
        n = len(token)
        if start < 0 or start + n > self._length:
            return False
        return self._keys[start : start + n] == self._fold(token)

    def index_of(self, needle: str, start: int, end: int | None = None) -> int:
        end = self._length if end is None else min(end, self._length)
        start = max(start, 0)
        folded = self._fold(needle)
        n = len(folded)
        if n == 0:
            return start if start <= end else -1

        keys = self._keys
        last_start = end - n
        pos = start
        while pos <= last_start:
            try:
                i = keys.index(folded[0], pos, last_start + 1)
            except ValueError:
                return -1
            if keys[i : i + n] == folded:
                return i
            pos = i + 1
        return -1
