"""Escape-marker parity.

A token is escaped iff it is preceded by an odd-length run of escape
markers. With ``\\`` as the marker, ``\\)`` escapes the paren while
``\\\\)`` is an escaped backslash followed by a literal paren.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pinzas.source import CharacterSource


def escape_run_length(source: CharacterSource, index: int, escape: str) -> int:
    """Count consecutive escape markers immediately before index."""
    run = 0
    i = index - 1
    while i >= 0 and source.char_at(i) == escape:
        run += 1
        i -= 1
    return run


def is_escaped(source: CharacterSource, index: int, escape: str | None) -> bool:
    """Check whether the token starting at index is escaped.

    Args:
        source: Source holding the token
        index: Start offset of the candidate token
        escape: Escape marker, or None when escaping is disabled

    Returns:
        True if an odd number of markers precede index.
    """
    if escape is None:
        return False
    return escape_run_length(source, index, escape) & 1 == 1
