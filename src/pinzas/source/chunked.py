"""Chunked character source over non-contiguous segments.

A ChunkedSource is a read-only snapshot of a segmented buffer's layout:
an ordered table of (cumulative start, segment) pairs built once at
construction. Segments are never joined; searches run segment by segment
and stitch results across boundaries.

Index translation walks the table forward from the last segment used, so
the scanner's monotonically increasing access pattern is amortized O(1).
Backward jumps (escape-run checks look behind a token) fall back to
bisection.

Thread Safety:
The segment cache is mutable. Build one ChunkedSource per scan.

"""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Iterator, Sized

from pinzas.errors import SnapshotMutatedError


class ChunkedSource:
    """CharacterSource over an ordered list of segments.

    Invariants:
        - starts are strictly increasing (empty segments are dropped)
        - the sum of segment lengths equals len(source)

    Usage:
            >>> src = ChunkedSource.from_segments(["ab", "", "cd", "e"])
            >>> len(src), src.segment_count
            (5, 3)
            >>> src.index_of("bc", 0)
            1

    """

    __slots__ = ("_chunks", "_cursor", "_length", "_origin", "_starts")

    def __init__(self, segments: Iterable[str], *, origin: Sized | None = None) -> None:
        """Snapshot the segment layout.

        Args:
            segments: Segment strings in order (empty ones are skipped)
            origin: The mutable buffer the segments came from, if any;
                used only by verify_unchanged()
        """
        chunks: list[str] = []
        starts: list[int] = []
        total = 0
        for segment in segments:
            if not segment:
                continue
            chunks.append(segment)
            starts.append(total)
            total += len(segment)
        self._chunks = chunks
        self._starts = starts
        self._length = total
        self._origin = origin
        self._cursor = 0

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> ChunkedSource:
        """Build a source from any iterable of strings."""
        return cls(segments)

    @classmethod
    def snapshot(cls, buffer: object) -> ChunkedSource:
        """Snapshot a segmented buffer (anything with iter_chunks())."""
        return cls(buffer.iter_chunks(), origin=buffer)  # type: ignore[attr-defined]

    @property
    def segment_count(self) -> int:
        return len(self._chunks)

    @property
    def segments(self) -> tuple[tuple[int, str], ...]:
        """The (cumulative start, segment) table."""
        return tuple(zip(self._starts, self._chunks, strict=True))

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"ChunkedSource(length={self._length}, segments={len(self._chunks)})"

    # =========================================================================
    # Index translation
    # =========================================================================

    def _locate(self, index: int) -> int:
        """Return the segment number containing index (0 <= index < len)."""
        starts = self._starts
        i = self._cursor
        if index < starts[i]:
            i = bisect_right(starts, index) - 1
        else:
            last = len(starts) - 1
            while i < last and index >= starts[i + 1]:
                i += 1
        self._cursor = i
        return i

    # =========================================================================
    # CharacterSource
    # =========================================================================

    def char_at(self, index: int) -> str:
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range for length {self._length}")
        ci = self._locate(index)
        return self._chunks[ci][index - self._starts[ci]]

    def find_char(self, char: str, start: int, end: int | None = None) -> int:
        end = self._length if end is None else min(end, self._length)
        start = max(start, 0)
        if start >= end:
            return -1

        chunks = self._chunks
        starts = self._starts
        ci = self._locate(start)
        offset = start - starts[ci]
        while ci < len(chunks):
            chunk_start = starts[ci]
            if chunk_start >= end:
                break
            rel = chunks[ci].find(char, offset, end - chunk_start)
            if rel >= 0:
                self._cursor = ci
                return chunk_start + rel
            ci += 1
            offset = 0
        return -1

    def sequence_equals_at(self, start: int, token: str) -> bool:
        n = len(token)
        if start < 0 or start + n > self._length:
            return False
        if n == 0:
            return True

        chunks = self._chunks
        ci = self._locate(start)
        offset = start - self._starts[ci]
        k = 0
        while k < n:
            chunk = chunks[ci]
            take = min(len(chunk) - offset, n - k)
            if not chunk.startswith(token[k : k + take], offset):
                return False
            k += take
            ci += 1
            offset = 0
        return True

    def index_of(self, needle: str, start: int, end: int | None = None) -> int:
        end = self._length if end is None else min(end, self._length)
        start = max(start, 0)
        n = len(needle)
        if n == 0:
            return start if start <= end else -1
        last_start = end - n
        if start > last_start:
            return -1

        chunks = self._chunks
        starts = self._starts
        first = needle[0]
        pos = start
        while pos <= last_start:
            ci = self._locate(pos)
            chunk = chunks[ci]
            chunk_start = starts[ci]
            offset = pos - chunk_start

            # Occurrences wholly inside this segment
            rel = chunk.find(needle, offset, min(len(chunk), end - chunk_start))
            if rel >= 0:
                return chunk_start + rel

            # Occurrences that begin in the tail and straddle into later segments
            tail_from = max(offset, len(chunk) - n + 1)
            tail_to = min(len(chunk), last_start - chunk_start + 1)
            for off in range(tail_from, tail_to):
                if chunk[off] == first and self.sequence_equals_at(chunk_start + off, needle):
                    return chunk_start + off

            pos = chunk_start + len(chunk)
        return -1

    def slice(self, start: int, end: int) -> str:
        return "".join(self.iter_range(start, end))

    def iter_range(self, start: int, end: int, max_piece: int | None = None) -> Iterator[str]:
        start = max(start, 0)
        end = min(end, self._length)
        if start >= end:
            return

        chunks = self._chunks
        starts = self._starts
        ci = self._locate(start)
        pos = start
        while pos < end:
            chunk = chunks[ci]
            chunk_start = starts[ci]
            stop = min(len(chunk), end - chunk_start)
            offset = pos - chunk_start
            while offset < stop:
                piece_end = stop if max_piece is None else min(stop, offset + max_piece)
                yield chunk[offset:piece_end]
                offset = piece_end
            pos = chunk_start + stop
            ci += 1

    def verify_unchanged(self) -> None:
        if self._origin is not None and len(self._origin) != self._length:
            raise SnapshotMutatedError(self._length, len(self._origin))
