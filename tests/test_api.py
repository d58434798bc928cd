"""Tests for the high-level Pinzas API."""


class TestMatchFunction:
    """Tests for the match() shortcut."""

    def test_match(self) -> None:
        from pinzas import match

        m = match("call(a(b))", "(", ")", allow_nesting=True)
        assert m.value == "a(b)"

    def test_match_start(self) -> None:
        from pinzas import match

        assert match("[a] [b]", "[", "]", start=1).value == "b"

    def test_match_failure(self) -> None:
        from pinzas import match

        assert not match("abc", "[", "]")


class TestMatchesFunction:
    """Tests for the matches() shortcut."""

    def test_matches(self) -> None:
        from pinzas import matches

        assert [m.value for m in matches("[a] [b]", "[", "]")] == ["a", "b"]

    def test_matches_budget_and_options(self) -> None:
        from pinzas import matches

        found = matches("<a> <b> <c>", "<", ">", max_matches=2, include_bounds=True)
        assert [m.value for m in found] == ["<a>", "<b>"]


class TestIsMatchFunction:
    def test_is_match(self) -> None:
        from pinzas import is_match

        assert is_match("x {{y}}", "{{", "}}")
        assert not is_match("x {{y", "{{", "}}")


class TestReplaceFunction:
    """Tests for the replace() shortcut."""

    def test_replace_str(self) -> None:
        from pinzas import replace

        assert replace("a <b> c", "<", ">", "B") == "a <B> c"

    def test_replace_builder(self) -> None:
        from pinzas import StringBuilder, replace

        out = replace(StringBuilder(["f(x", ") + g(y)"]), "(", ")", "_", include_bounds=True)
        assert isinstance(out, StringBuilder)
        assert out.build() == "f_ + g_"

    def test_replace_budget(self) -> None:
        from pinzas import replace

        assert replace("[a][b]", "[", "]", "", max_replacements=1) == "[][b]"


class TestPatternReuse:
    """A Pattern is built once and reused across inputs."""

    def test_reuse_across_inputs(self) -> None:
        from pinzas import Pattern, StringBuilder

        pattern = Pattern("{{", "}}")
        assert pattern.match("{{a}}").value == "a"
        assert pattern.match(StringBuilder(["{", "{b}", "}"])).value == "b"
        assert pattern.replace("{{c}}", "C") == "{{C}}"
        assert pattern.match("{{d}}").value == "d"
