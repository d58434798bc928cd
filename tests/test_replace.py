"""Tests for replace and replace_with on flat and segmented input."""

import pytest

from pinzas import (
    InvalidConfigurationError,
    Match,
    Pattern,
    ReplaceEngine,
    ScanConfig,
    StringBuilder,
    scan_config_context,
)
from pinzas.replacer import fixed


class TestReplaceFixed:
    def test_interior_replaced(self) -> None:
        assert Pattern("{{", "}}").replace("Hi {{name}}!", "Ada") == "Hi {{Ada}}!"

    def test_bounds_replaced(self) -> None:
        pattern = Pattern("{{", "}}", include_bounds=True)
        assert pattern.replace("Hi {{name}}!", "Ada") == "Hi Ada!"

    def test_all_matches(self) -> None:
        pattern = Pattern("[", "]", include_bounds=True)
        assert pattern.replace("[a] x [b] y [c]", "_") == "_ x _ y _"

    def test_none_replacement_is_empty(self) -> None:
        pattern = Pattern("<", ">", include_bounds=True)
        assert pattern.replace("a<tag>b", None) == "ab"

    def test_no_match_returns_input(self) -> None:
        text = "nothing here"
        assert Pattern("[", "]").replace(text, "x") is text

    def test_empty_input(self) -> None:
        assert Pattern("[", "]").replace("", "x") == ""

    def test_max_replacements(self) -> None:
        pattern = Pattern("[", "]", include_bounds=True)
        assert pattern.replace("[a][b][c]", "_", max_replacements=2) == "__[c]"

    def test_zero_replacements(self) -> None:
        text = "[a]"
        assert Pattern("[", "]").replace(text, "x", max_replacements=0) is text

    def test_text_before_start_is_kept(self) -> None:
        pattern = Pattern("[", "]", include_bounds=True)
        assert pattern.replace("[a] [b] [c]", "_", start=2) == "[a] _ _"

    def test_filtered_spans_untouched(self) -> None:
        pattern = Pattern("[", "]", excluded=("keep",), include_bounds=True)
        assert pattern.replace("[x] [keep me] [y]", "") == " [keep me] "

    def test_nested(self) -> None:
        pattern = Pattern("(", ")", allow_nesting=True, include_bounds=True)
        assert pattern.replace("f(a(b)) + g(c)", "()") == "f() + g()"

    def test_input_is_not_mutated(self) -> None:
        sb = StringBuilder(["[a", "] b"])
        Pattern("[", "]").replace(sb, "zz")
        assert sb.build() == "[a] b"


class TestReplaceWith:
    def test_evaluator_sees_match(self) -> None:
        pattern = Pattern("{", "}", include_bounds=True)
        env = {"x": "1", "y": "2"}
        result = pattern.replace_with("{x}+{y}", lambda m: env[m.value[1:-1]])
        assert result == "1+2"

    def test_evaluator_called_in_order(self) -> None:
        seen: list[int] = []

        def record(m: Match) -> str:
            seen.append(m.start)
            return str(len(seen))

        out = Pattern("[", "]").replace_with("[a] [b] [c]", record)
        assert out == "[1] [2] [3]"
        assert seen == [1, 5, 9]

    def test_none_result_is_empty(self) -> None:
        pattern = Pattern("[", "]", include_bounds=True)
        assert pattern.replace_with("a[b]c", lambda m: None) == "ac"

    @pytest.mark.parametrize("evaluator", [None, "not callable"])
    def test_missing_evaluator(self, evaluator: object) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            Pattern("[", "]").replace_with("[a]", evaluator)  # type: ignore[arg-type]
        assert exc_info.value.parameter == "evaluator"

    def test_missing_evaluator_fails_without_matches(self) -> None:
        with pytest.raises(InvalidConfigurationError):
            Pattern("[", "]").replace_with("no match", None)  # type: ignore[arg-type]


class TestSegmentedReplace:
    def test_returns_new_builder(self) -> None:
        sb = StringBuilder(["Hello {", "{name}", "}!"])
        out = Pattern("{{", "}}", include_bounds=True).replace(sb, "Ada")
        assert isinstance(out, StringBuilder)
        assert out is not sb
        assert out.build() == "Hello Ada!"

    def test_no_match_returns_copy(self) -> None:
        sb = StringBuilder(["abc", "def"])
        out = Pattern("[", "]").replace(sb, "x")
        assert out is not sb
        assert out.build() == "abcdef"

    def test_untouched_spans_stream_in_pieces(self) -> None:
        text = "a" * 10 + "[x]" + "b" * 7
        sb = StringBuilder([text[:6], text[6:]])
        with scan_config_context(ScanConfig(copy_chunk_size=4)):
            out = Pattern("[", "]", include_bounds=True).replace(sb, "-")
        assert out.build() == "a" * 10 + "-" + "b" * 7
        assert max(len(part) for part in out.iter_chunks()) <= 4

    def test_same_output_as_flat(self) -> None:
        text = "x(a) y(b(c)) z(d"
        pattern = Pattern("(", ")", allow_nesting=True)
        sb = StringBuilder([text[i : i + 3] for i in range(0, len(text), 3)])
        assert pattern.replace(sb, "_").build() == pattern.replace(text, "_")


class TestReplaceEngine:
    def test_counts_replacements(self) -> None:
        engine = ReplaceEngine(Pattern("[", "]").iter_matches("[a] [b]"))
        out = engine.run(fixed("z"))
        assert out.build() == "[z] [z]"
        assert engine.replacements == 2

    def test_explicit_chunk_size(self) -> None:
        engine = ReplaceEngine(Pattern("[", "]").iter_matches("abcdef[g]"), chunk_size=2)
        out = engine.run(fixed("G"))
        assert out.iter_chunks() == ("ab", "cd", "ef", "[", "G", "]")

    def test_length_accounting(self) -> None:
        text = "<aa> b <cccc> d"
        pattern = Pattern("<", ">")
        found = pattern.matches(text)
        out = pattern.replace(text, "xyz")
        expected = len(text) - sum(m.length for m in found) + 3 * len(found)
        assert len(out) == expected
