"""
Pinzas: Delimited-Span Matching for Python

Find, extract and replace text between an opening and a closing delimiter
in plain strings or segmented buffers. Supports nested pairs, shortest or
longest closing, escape markers, required/excluded content filters and
case- or locale-aware comparison. Every scan is a single forward pass.

Quick Start:
    >>> from pinzas import Pattern
    >>> pattern = Pattern("{{", "}}")
    >>> pattern.match("Hello {{name}}!").value
    'name'
    >>> [m.value for m in pattern.matches("{{a}} and {{b}}")]
    ['a', 'b']
    >>> pattern.replace("Hi {{name}}", "Ada")
    'Hi {{Ada}}'

    >>> # Or use the one-shot helpers
    >>> import pinzas
    >>> pinzas.replace("f(x) + g(y)", "(", ")", "_", include_bounds=True)
    'f_ + g_'

Segmented Buffers:
    >>> from pinzas import StringBuilder
    >>> buf = StringBuilder(["<<a", "bc>", "> tail"])
    >>> Pattern("<<", ">>").match(buf).value
    'abc'
"""

from pinzas.comparison import Comparison
from pinzas.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from pinzas.errors import InvalidConfigurationError, PinzasError, SnapshotMutatedError
from pinzas.pattern import Pattern
from pinzas.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from pinzas.replacer import ReplaceEngine
from pinzas.result import Match
from pinzas.scanner import MatchScanner, ScanState
from pinzas.source import (
    CharacterSource,
    ChunkedSource,
    CollatedSource,
    FlatSource,
    SegmentedText,
    open_source,
)
from pinzas.stringbuilder import StringBuilder
from pinzas.tokens import ClosePolicy, Token, TokenKind

__version__ = "0.1.0"


def match(
    text: str | SegmentedText,
    open: str,
    close: str,
    *,
    start: int = 0,
    **options: object,
) -> Match:
    """Find the first delimited span in text.

    Args:
        text: A str or a segmented buffer
        open: Opening delimiter
        close: Closing delimiter
        start: Offset to begin at
        **options: Any other Pattern field (required, excluded,
            include_bounds, longest, allow_nesting, escape, comparison)

    Returns:
        The first Match, or the unsuccessful sentinel.

    Example:
        >>> match("call(a(b))", "(", ")", allow_nesting=True).value
        'a(b)'
    """
    return Pattern(open, close, **options).match(text, start)


def matches(
    text: str | SegmentedText,
    open: str,
    close: str,
    *,
    start: int = 0,
    max_matches: int | None = None,
    **options: object,
) -> list[Match]:
    """Find every delimited span in text, in order.

    Example:
        >>> [m.value for m in matches("[a] [b]", "[", "]")]
        ['a', 'b']
    """
    return Pattern(open, close, **options).matches(text, start, max_matches)


def is_match(
    text: str | SegmentedText,
    open: str,
    close: str,
    *,
    start: int = 0,
    **options: object,
) -> bool:
    """Check whether text contains a delimited span."""
    return Pattern(open, close, **options).is_match(text, start)


def replace(
    text: str | SegmentedText,
    open: str,
    close: str,
    replacement: str | None,
    *,
    start: int = 0,
    max_replacements: int | None = None,
    **options: object,
) -> str | StringBuilder:
    """Replace every delimited span in text.

    Returns a new str for str input, a new StringBuilder for a segmented
    buffer. The input is never modified.

    Example:
        >>> replace("a <b> c", "<", ">", "B")
        'a <B> c'
    """
    return Pattern(open, close, **options).replace(text, replacement, start, max_replacements)


__all__ = [
    # Core API
    "Pattern",
    "Match",
    "match",
    "matches",
    "is_match",
    "replace",
    # Comparison and tokens
    "Comparison",
    "ClosePolicy",
    "Token",
    "TokenKind",
    # Scanning
    "MatchScanner",
    "ScanState",
    "ReplaceEngine",
    # Sources
    "CharacterSource",
    "SegmentedText",
    "FlatSource",
    "ChunkedSource",
    "CollatedSource",
    "open_source",
    "StringBuilder",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Errors
    "PinzasError",
    "InvalidConfigurationError",
    "SnapshotMutatedError",
    # Metadata
    "__version__",
]
