"""Content filter for candidate interiors.

Inspects only the interior span between the delimiters, never the
delimiters themselves, whatever bounds are reported. Searches run against
the CharacterSource in place, so a chunked interior is never joined and a
collated source applies its comparison mode.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pinzas.source import CharacterSource


@dataclass(frozen=True, slots=True)
class ContentFilter:
    """Required / excluded substring constraints.

    Attributes:
        required: Text the interior must contain ("" or None = no constraint)
        excluded: Texts the interior must not contain (empty entries ignored)

    Usage:
        >>> from pinzas.source import FlatSource
        >>> f = ContentFilter(required="id", excluded=("draft",))
        >>> f.passes(FlatSource("[id=1]"), 1, 5)
        True

    """

    required: str | None = None
    excluded: tuple[str, ...] = ()

    @classmethod
    def build(cls, required: str | None, excluded: Iterable[str] | None) -> ContentFilter:
        """Normalize optional constraints, dropping empty excluded entries."""
        return cls(
            required=required or None,
            excluded=tuple(e for e in (excluded or ()) if e),
        )

    @property
    def is_noop(self) -> bool:
        """True when no constraint is configured."""
        return not self.required and not self.excluded

    def passes(self, source: CharacterSource, start: int, end: int) -> bool:
        """Check the interior [start, end) against the constraints.

        Stops at the first violated constraint.
        """
        if self.required and source.index_of(self.required, start, end) < 0:
            return False
        for banned in self.excluded:
            if banned and source.index_of(banned, start, end) >= 0:
                return False
        return True
