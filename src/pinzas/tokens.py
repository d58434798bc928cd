"""Delimiter tokens and close policies for Pinzas patterns.

A delimiter is either a single character or a fixed character sequence.
Both are represented by one Token type tagged with a TokenKind, so every
search routine handles the two shapes at a single dispatch point instead
of duplicating logic per shape.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind and ClosePolicy are enums (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenKind(Enum):
    """Shape of a delimiter token."""

    CHAR = auto()  # Single character: searched with find_char
    SEQUENCE = auto()  # Fixed multi-character text: searched with index_of


class ClosePolicy(Enum):
    """How the closing delimiter of a candidate is chosen.

    Resolved once per Pattern, in priority order:
    - TOGGLE: open and close are the same text; the next occurrence closes
    - NESTED: balance inner open/close pairs (allow_nesting)
    - SHORTEST: the first close after the open (default)
    - LONGEST: the last close before the next open, or before the end

    """

    TOGGLE = auto()
    NESTED = auto()
    SHORTEST = auto()
    LONGEST = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """An open or close delimiter.

    Attributes:
        text: The delimiter text (non-empty)
        kind: CHAR for one character, SEQUENCE otherwise (derived)

    Example:
        >>> Token("(").kind
        <TokenKind.CHAR: 1>
        >>> Token("{{").kind
        <TokenKind.SEQUENCE: 2>

    """

    text: str
    kind: TokenKind = field(init=False)

    def __post_init__(self) -> None:
        kind = TokenKind.CHAR if len(self.text) == 1 else TokenKind.SEQUENCE
        object.__setattr__(self, "kind", kind)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text
