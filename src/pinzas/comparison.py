"""Comparison modes for token and substring equality.

ORDINAL compares code points exactly and runs on the fast path against
any CharacterSource, flat or chunked. Every other mode is locale- or
case-aware and runs on the slow path: the input is flattened into a
CollatedSource whose per-character keys are compared instead of the
characters themselves.

Folding is per character, so it never changes lengths and offsets found
on the flattened text map straight back onto the original buffer.
"""

from __future__ import annotations

import locale
from enum import Enum

from pinzas.errors import InvalidConfigurationError


class Comparison(Enum):
    """How delimiter and filter text is compared against the source."""

    ORDINAL = "ordinal"
    ORDINAL_IGNORE_CASE = "ordinal_ignore_case"
    CULTURE = "culture"
    CULTURE_IGNORE_CASE = "culture_ignore_case"

    @property
    def is_ordinal(self) -> bool:
        """True for exact code-point comparison (the fast path)."""
        return self is Comparison.ORDINAL

    @property
    def ignore_case(self) -> bool:
        return self in (Comparison.ORDINAL_IGNORE_CASE, Comparison.CULTURE_IGNORE_CASE)

    @property
    def locale_aware(self) -> bool:
        return self in (Comparison.CULTURE, Comparison.CULTURE_IGNORE_CASE)

    def fold(self, char: str) -> str:
        """Return the comparison key for a single character.

        Two characters are equal under this mode iff their keys are equal.
        Culture modes use the current LC_COLLATE via locale.strxfrm.
        """
        if self is Comparison.ORDINAL:
            return char
        if self.ignore_case:
            char = char.casefold()
        if self.locale_aware:
            return locale.strxfrm(char)
        return char

    def fold_text(self, text: str) -> list[str]:
        """Fold every character of text into its comparison key."""
        if self is Comparison.ORDINAL:
            return list(text)
        return [self.fold(c) for c in text]

    def equals(self, a: str, b: str) -> bool:
        """Compare two strings character by character under this mode."""
        if self is Comparison.ORDINAL:
            return a == b
        return len(a) == len(b) and self.fold_text(a) == self.fold_text(b)

    @classmethod
    def coerce(cls, value: Comparison | str) -> Comparison:
        """Accept a member, its value, or its case-insensitive name.

        Raises:
            InvalidConfigurationError: If the value names no mode.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        names = ", ".join(m.value for m in cls)
        raise InvalidConfigurationError("comparison", f"expected one of {names}, got {value!r}")
