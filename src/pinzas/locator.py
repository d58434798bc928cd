"""Escape-aware token location.

Dispatches once on the token's shape: CHAR tokens use the source's
find_char, SEQUENCE tokens use index_of. A candidate that turns out to be
escaped is skipped and the search resumes one position later.

Complexity: O(n) per call over the searched range, plus the escape-run
look-behind for each candidate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinzas.escape import is_escaped
from pinzas.tokens import Token, TokenKind

if TYPE_CHECKING:
    from pinzas.source import CharacterSource


def _find_raw(source: CharacterSource, token: Token, start: int, end: int) -> int:
    if token.kind is TokenKind.CHAR:
        return source.find_char(token.text, start, end)
    return source.index_of(token.text, start, end)


def find_next(
    source: CharacterSource,
    token: Token,
    start: int,
    escape: str | None = None,
) -> int:
    """Find the first unescaped occurrence of token at or after start.

    Args:
        source: Source to search
        token: Delimiter to find
        start: First index to consider
        escape: Escape marker, or None

    Returns:
        Start offset of the occurrence, or -1 if none remains.
    """
    end = len(source)
    pos = start
    while True:
        idx = _find_raw(source, token, pos, end)
        if idx < 0:
            return -1
        if not is_escaped(source, idx, escape):
            return idx
        pos = idx + 1


def find_last_before(
    source: CharacterSource,
    token: Token,
    start: int,
    end: int,
    escape: str | None = None,
) -> int:
    """Find the last unescaped occurrence of token wholly inside [start, end).

    Used by longest-match extraction, where ``end`` is the next open
    token (or the end of the source).

    Returns:
        Start offset of the occurrence, or -1 if there is none.
    """
    last = -1
    pos = start
    while True:
        idx = _find_raw(source, token, pos, end)
        if idx < 0:
            return last
        if not is_escaped(source, idx, escape):
            last = idx
        pos = idx + 1
