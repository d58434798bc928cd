"""Tests for pinzas.profiling: the scan profiling API."""

from pinzas import Pattern, StringBuilder
from pinzas.profiling import (
    ScanAccumulator,
    get_scan_accumulator,
    profiled_scan,
)


class TestGetScanAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_scan_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_scan():
            pass
        assert get_scan_accumulator() is None


class TestProfiledScan:
    def test_yields_accumulator(self) -> None:
        with profiled_scan() as acc:
            assert isinstance(acc, ScanAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_scan() as acc:
            assert get_scan_accumulator() is acc

    def test_records_scan(self) -> None:
        text = "[a] [draft b] [c]"
        with profiled_scan() as acc:
            Pattern("[", "]", excluded=("draft",)).matches(text)
        assert acc.scans == 1
        assert acc.source_length == len(text)
        assert acc.matches == 2
        assert acc.rejected == 1

    def test_records_each_operation_once(self) -> None:
        pattern = Pattern("[", "]")
        with profiled_scan() as acc:
            pattern.match("[a] [b]")
            pattern.is_match("none")
            pattern.replace(StringBuilder(["[x", "]"]), "y")
        assert acc.scans == 3
        assert acc.matches == 2

    def test_partial_iteration_records_when_budget_spent(self) -> None:
        with profiled_scan() as acc:
            scanner = Pattern("[", "]").iter_matches("[a] [b]", max_matches=1)
            next(scanner)
        assert acc.scans == 1

    def test_total_duration_positive(self) -> None:
        with profiled_scan() as acc:
            Pattern("(", ")", allow_nesting=True).matches("(a(b)c)" * 50)
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = ScanAccumulator().summary()
        assert summary["scans"] == 0
        assert summary["source_length"] == 0
        assert summary["matches"] == 0
        assert summary["rejected"] == 0

    def test_summary_keys(self) -> None:
        with profiled_scan() as acc:
            Pattern("[", "]").matches("[a]")
        assert set(acc.summary()) == {"total_ms", "scans", "source_length", "matches", "rejected"}
