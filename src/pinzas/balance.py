"""Balanced-nesting search for distinct open/close pairs.

Only used when nesting is enabled and the open and close tokens differ.
The opening token that triggered the search is already consumed, so the
depth starts at one.

Each iteration needs the next unescaped open and the next unescaped close
at or after the current position. An occurrence found earlier is still
the first one at or after the new position as long as it has not fallen
behind it, so it is reused rather than searched for again; this keeps the
whole search linear in the scanned range.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pinzas.locator import find_next

if TYPE_CHECKING:
    from pinzas.source import CharacterSource
    from pinzas.tokens import Token

_UNKNOWN = -2


def find_balanced_end(
    source: CharacterSource,
    start: int,
    open_token: Token,
    close_token: Token,
    escape: str | None = None,
) -> int:
    """Find the close token that balances an already-consumed open token.

    Args:
        source: Source to search
        start: First index after the consumed open token
        open_token: Opening delimiter
        close_token: Closing delimiter
        escape: Escape marker, or None

    Returns:
        Start offset of the balancing close token, or -1 if the source runs
        out of close tokens first.

    Example:
        For ``(a(b)c)`` with the outer ``(`` consumed, returns 6.
    """
    depth = 1
    pos = start
    next_open = _UNKNOWN
    next_close = _UNKNOWN
    while True:
        if next_close == _UNKNOWN or 0 <= next_close < pos:
            next_close = find_next(source, close_token, pos, escape)
        if next_close < 0:
            return -1
        if next_open == _UNKNOWN or 0 <= next_open < pos:
            next_open = find_next(source, open_token, pos, escape)

        if 0 <= next_open < next_close:
            depth += 1
            pos = next_open + len(open_token)
        else:
            depth -= 1
            if depth == 0:
                return next_close
            pos = next_close + len(close_token)
