"""Tests for comparison modes and their use in patterns."""

import pytest

from pinzas import ClosePolicy, Comparison, InvalidConfigurationError, Pattern, StringBuilder


class TestComparisonEnum:
    def test_ordinal_flags(self) -> None:
        assert Comparison.ORDINAL.is_ordinal
        assert not Comparison.ORDINAL.ignore_case
        assert not Comparison.ORDINAL.locale_aware

    def test_ignore_case_flags(self) -> None:
        assert not Comparison.ORDINAL_IGNORE_CASE.is_ordinal
        assert Comparison.ORDINAL_IGNORE_CASE.ignore_case
        assert Comparison.CULTURE_IGNORE_CASE.ignore_case
        assert Comparison.CULTURE.locale_aware

    def test_fold_text_preserves_length(self) -> None:
        text = "Straße ÀB"
        for mode in Comparison:
            assert len(mode.fold_text(text)) == len(text)

    def test_equals(self) -> None:
        assert Comparison.ORDINAL.equals("ab", "ab")
        assert not Comparison.ORDINAL.equals("ab", "AB")
        assert Comparison.ORDINAL_IGNORE_CASE.equals("ab", "AB")
        assert not Comparison.ORDINAL_IGNORE_CASE.equals("ab", "abc")

    def test_culture_equals_identical_text(self) -> None:
        assert Comparison.CULTURE.equals("<x>", "<x>")
        assert Comparison.CULTURE_IGNORE_CASE.equals("End", "eND")


class TestComparisonCoerce:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Comparison.CULTURE, Comparison.CULTURE),
            ("ordinal", Comparison.ORDINAL),
            ("ORDINAL_IGNORE_CASE", Comparison.ORDINAL_IGNORE_CASE),
            (" culture_ignore_case ", Comparison.CULTURE_IGNORE_CASE),
        ],
    )
    def test_accepted_values(self, value: object, expected: Comparison) -> None:
        assert Comparison.coerce(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["binary", "", 3, None])
    def test_rejected_values(self, value: object) -> None:
        with pytest.raises(InvalidConfigurationError) as exc_info:
            Comparison.coerce(value)  # type: ignore[arg-type]
        assert exc_info.value.parameter == "comparison"


class TestIgnoreCaseMatching:
    def test_delimiters_match_any_case(self) -> None:
        pattern = Pattern("<B>", "</B>", comparison=Comparison.ORDINAL_IGNORE_CASE)
        m = pattern.match("x <b>Bold</b> y")
        assert m.value == "Bold"
        assert m.start == 5

    def test_ordinal_is_exact(self) -> None:
        pattern = Pattern("<B>", "</B>")
        assert not pattern.match("x <b>Bold</b> y")

    def test_filters_use_comparison(self) -> None:
        pattern = Pattern(
            "[", "]", excluded=("draft",), comparison=Comparison.ORDINAL_IGNORE_CASE
        )
        assert [m.value for m in pattern.matches("[DRAFT one] [two]")] == ["two"]

    def test_toggle_resolved_with_comparison(self) -> None:
        pattern = Pattern("x", "X", comparison=Comparison.ORDINAL_IGNORE_CASE)
        assert pattern.close_policy is ClosePolicy.TOGGLE
        assert Pattern("x", "X").close_policy is ClosePolicy.SHORTEST

    def test_escape_marker_compared_exactly(self) -> None:
        pattern = Pattern(
            "a", "b", escape="q", comparison=Comparison.ORDINAL_IGNORE_CASE
        )
        # "Q" is not the escape marker, so the B right after it still closes
        assert pattern.match("aXQBy").value == "XQ"
        assert pattern.match("aXqBy b").value == "XqBy "

    def test_segmented_input_reports_original_offsets(self) -> None:
        sb = StringBuilder(["Hi <", "B>bo", "ld</", "b> !"])
        pattern = Pattern("<b>", "</B>", comparison=Comparison.ORDINAL_IGNORE_CASE)
        m = pattern.match(sb)
        assert (m.start, m.length, m.value) == (6, 4, "bold")

    def test_replace_on_segmented_input(self) -> None:
        sb = StringBuilder(["A[", "x]b[Y", "]"])
        out = Pattern("[", "]", comparison=Comparison.ORDINAL_IGNORE_CASE).replace(sb, "-")
        assert isinstance(out, StringBuilder)
        assert out.build() == "A[-]b[-]"
