"""Pattern: the immutable description of a delimited span.

A Pattern bundles the delimiters, the content filter, the extraction
options and the comparison mode. It is validated once at construction and
then reused across any number of scans; all per-scan state lives in the
scanner, never here.

Thread Safety:
Pattern is a frozen dataclass. Share one instance across threads freely;
each call builds its own source snapshot and scanner.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, overload

from pinzas.comparison import Comparison
from pinzas.errors import InvalidConfigurationError
from pinzas.filters import ContentFilter
from pinzas.replacer import ReplaceEngine, Substitution, fixed
from pinzas.result import Match
from pinzas.scanner import MatchScanner
from pinzas.source import SegmentedText, open_source
from pinzas.stringbuilder import StringBuilder
from pinzas.tokens import ClosePolicy, Token


@dataclass(frozen=True, slots=True)
class Pattern:
    """Open/close delimiter pattern with filters and extraction options.

    Attributes:
        open: Opening delimiter (one character or a fixed sequence)
        close: Closing delimiter (one character or a fixed sequence)
        required: Text the interior must contain (None = no constraint)
        excluded: Texts the interior must not contain, checked in order
        include_bounds: Report the delimiters as part of the match
        longest: Close at the last close token before the next open
        allow_nesting: Balance inner open/close pairs
        escape: Single-character escape marker (None = no escaping)
        comparison: How delimiters and filter text are compared

    Usage:
        >>> Pattern("(", ")", allow_nesting=True).match("(a(b)c)").value
        'a(b)c'
        >>> Pattern("<", ">", longest=True).match("<a>b>").value
        'a>b'
        >>> Pattern('"', '"', escape="\\\\").matches('"a\\\\"b" "c"')[1].value
        'c'

    """

    open: str
    close: str
    required: str | None = None
    excluded: tuple[str, ...] = ()
    include_bounds: bool = False
    longest: bool = False
    allow_nesting: bool = False
    escape: str | None = None
    comparison: Comparison = Comparison.ORDINAL

    open_token: Token = field(init=False, repr=False, compare=False)
    close_token: Token = field(init=False, repr=False, compare=False)
    close_policy: ClosePolicy = field(init=False, repr=False, compare=False)
    content_filter: ContentFilter = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in ("open", "close"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidConfigurationError(name, "delimiter must be a non-empty string")

        if self.escape is not None and (not isinstance(self.escape, str) or len(self.escape) != 1):
            raise InvalidConfigurationError(
                "escape", f"must be a single character, got {self.escape!r}"
            )

        if self.required is not None and not isinstance(self.required, str):
            raise InvalidConfigurationError(
                "required", f"must be a string, got {type(self.required).__name__}"
            )

        excluded = self.excluded
        if excluded is None:
            excluded = ()
        elif isinstance(excluded, str):
            excluded = (excluded,)
        excluded = tuple(excluded)
        for entry in excluded:
            if not isinstance(entry, str):
                raise InvalidConfigurationError(
                    "excluded", f"entries must be strings, got {entry!r}"
                )

        comparison = Comparison.coerce(self.comparison)

        object.__setattr__(self, "excluded", excluded)
        object.__setattr__(self, "comparison", comparison)
        object.__setattr__(self, "open_token", Token(self.open))
        object.__setattr__(self, "close_token", Token(self.close))
        object.__setattr__(self, "content_filter", ContentFilter.build(self.required, excluded))
        object.__setattr__(self, "close_policy", self._resolve_policy(comparison))

    def _resolve_policy(self, comparison: Comparison) -> ClosePolicy:
        if comparison.equals(self.open, self.close):
            return ClosePolicy.TOGGLE
        if self.allow_nesting:
            return ClosePolicy.NESTED
        if self.longest:
            return ClosePolicy.LONGEST
        return ClosePolicy.SHORTEST

    @property
    def is_toggle(self) -> bool:
        return self.close_policy is ClosePolicy.TOGGLE

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> Pattern:
        """Create a Pattern from a dictionary.

        Unknown keys are silently ignored. ``comparison`` may be a
        Comparison member or its name; ``excluded`` may be any iterable.

        Example:
            >>> p = Pattern.from_dict(
            ...     {"open": "{{", "close": "}}", "comparison": "ordinal_ignore_case"}
            ... )
            >>> p.comparison
            <Comparison.ORDINAL_IGNORE_CASE: 'ordinal_ignore_case'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values() if f.init}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    # =========================================================================
    # Matching
    # =========================================================================

    def iter_matches(
        self,
        text: str | SegmentedText,
        start: int = 0,
        max_matches: int | None = None,
    ) -> MatchScanner:
        """Lazily scan text for matches, left to right.

        Args:
            text: A str or a segmented buffer (read-only snapshot)
            start: Offset to begin at (clamped into range)
            max_matches: Most matches to produce (None = unbounded)

        Returns:
            A single-use MatchScanner iterator.
        """
        search, origin = open_source(text, self.comparison)
        return MatchScanner(self, search, start=start, max_matches=max_matches, origin=origin)

    def match(self, text: str | SegmentedText, start: int = 0) -> Match:
        """Return the first match at or after start, or the failed sentinel."""
        scanner = self.iter_matches(text, start, 1)
        found = scanner.try_next()
        return found if found is not None else Match.failed(scanner.origin)

    def matches(
        self,
        text: str | SegmentedText,
        start: int = 0,
        max_matches: int | None = None,
    ) -> list[Match]:
        """Return up to max_matches matches, in order."""
        return list(self.iter_matches(text, start, max_matches))

    def is_match(self, text: str | SegmentedText, start: int = 0) -> bool:
        """Check whether any match exists at or after start."""
        return self.iter_matches(text, start, 1).try_next() is not None

    # =========================================================================
    # Replacing
    # =========================================================================

    @overload
    def replace(
        self,
        text: str,
        replacement: str | None,
        start: int = 0,
        max_replacements: int | None = None,
    ) -> str: ...

    @overload
    def replace(
        self,
        text: SegmentedText,
        replacement: str | None,
        start: int = 0,
        max_replacements: int | None = None,
    ) -> StringBuilder: ...

    def replace(
        self,
        text: str | SegmentedText,
        replacement: str | None,
        start: int = 0,
        max_replacements: int | None = None,
    ) -> str | StringBuilder:
        """Replace each matched span with fixed text.

        Args:
            text: A str or a segmented buffer; never modified
            replacement: Text to substitute (None means "")
            start: Offset to begin matching at; text before it is kept
            max_replacements: Most spans to replace (None = unbounded)

        Returns:
            A new str for str input, a new StringBuilder otherwise.
        """
        return self._replace(text, fixed(replacement), start, max_replacements)

    @overload
    def replace_with(
        self,
        text: str,
        evaluator: Callable[[Match], str | None],
        start: int = 0,
        max_replacements: int | None = None,
    ) -> str: ...

    @overload
    def replace_with(
        self,
        text: SegmentedText,
        evaluator: Callable[[Match], str | None],
        start: int = 0,
        max_replacements: int | None = None,
    ) -> StringBuilder: ...

    def replace_with(
        self,
        text: str | SegmentedText,
        evaluator: Callable[[Match], str | None],
        start: int = 0,
        max_replacements: int | None = None,
    ) -> str | StringBuilder:
        """Replace each matched span with text computed from the Match.

        Args:
            text: A str or a segmented buffer; never modified
            evaluator: Called once per match; returning None substitutes ""
            start: Offset to begin matching at; text before it is kept
            max_replacements: Most spans to replace (None = unbounded)

        Raises:
            InvalidConfigurationError: If evaluator is None or not callable.
        """
        if evaluator is None or not callable(evaluator):
            raise InvalidConfigurationError("evaluator", "a callable is required")
        return self._replace(text, evaluator, start, max_replacements)

    def _replace(
        self,
        text: str | SegmentedText,
        substitute: Substitution,
        start: int,
        max_replacements: int | None,
    ) -> str | StringBuilder:
        engine = ReplaceEngine(self.iter_matches(text, start, max_replacements))
        out = engine.run(substitute)
        if isinstance(text, str):
            return text if engine.replacements == 0 else out.build()
        return out
