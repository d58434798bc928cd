"""Character sources: uniform access to flat and segmented text.

Provides:
- CharacterSource: the access protocol every search routine consumes
- FlatSource: one contiguous str
- ChunkedSource: a snapshot of non-contiguous segments
- CollatedSource: flattened text compared by locale/case-aware keys
- open_source: pick the right source pair for an input and comparison
"""

from __future__ import annotations

from pinzas.comparison import Comparison
from pinzas.errors import InvalidConfigurationError
from pinzas.source.chunked import ChunkedSource
from pinzas.source.collated import CollatedSource
from pinzas.source.flat import FlatSource
from pinzas.source.protocol import CharacterSource, SegmentedText
from pinzas.utils.logger import get_logger

logger = get_logger(__name__)


def open_source(
    text: str | SegmentedText,
    comparison: Comparison = Comparison.ORDINAL,
) -> tuple[CharacterSource, CharacterSource]:
    """Build the sources a scan needs for an input.

    Args:
        text: A str or a segmented buffer (e.g. pinzas.StringBuilder)
        comparison: How tokens and filter text are compared

    Returns:
        (search, origin): the scanner searches ``search``; matches and
        replace output read from ``origin``. They are the same object on
        the ordinal fast path. For other comparisons ``search`` is a
        CollatedSource over the flattened input, and ``origin`` addresses
        the original buffer with identical offsets.

    Raises:
        InvalidConfigurationError: If text is neither str nor segmented.
    """
    if isinstance(text, str):
        origin: CharacterSource = FlatSource(text)
    elif isinstance(text, SegmentedText):
        origin = ChunkedSource.snapshot(text)
    else:
        raise InvalidConfigurationError(
            "text", f"expected str or a segmented buffer, got {type(text).__name__}"
        )

    if comparison.is_ordinal:
        return origin, origin

    flat = text if isinstance(text, str) else origin.slice(0, len(origin))
    logger.debug(
        "Comparison %s: flattening %d chars for collated search",
        comparison.value,
        len(flat),
    )
    return CollatedSource(flat, comparison), origin


__all__ = [
    "CharacterSource",
    "ChunkedSource",
    "CollatedSource",
    "FlatSource",
    "SegmentedText",
    "open_source",
]
