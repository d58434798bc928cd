"""Benchmark Pinzas scans: flat vs segmented input, ordinal vs collated.

Run with:
    python benchmarks/benchmark_scan.py
"""

import time

from pinzas import Comparison, Pattern, StringBuilder


def make_document(sections: int = 2000) -> str:
    """Template-like text with nested calls, quotes and placeholders."""
    parts = []
    for i in range(sections):
        parts.append(
            f'Item {i}: {{{{ user.name }}}} said "hi \\"there\\"" '
            f"and called f(a(b({i})), c) [draft] [ok {i}]\n"
        )
    return "".join(parts)


def as_builder(text: str, segment: int = 64) -> StringBuilder:
    return StringBuilder([text[i : i + segment] for i in range(0, len(text), segment)])


def time_call(fn, iterations: int = 10) -> float:
    """Average seconds per call after one warmup call."""
    fn()
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    text = make_document()
    builder = as_builder(text)
    print(f"Document: {len(text)} chars, {builder.part_count} segments")
    print(f"Python {sys.version.split()[0]}\n")

    cases = [
        ("placeholders", Pattern("{{", "}}")),
        ("nested calls", Pattern("(", ")", allow_nesting=True)),
        ("escaped quotes", Pattern('"', '"', escape="\\")),
        ("filtered brackets", Pattern("[", "]", excluded=("draft",))),
        ("ignore-case", Pattern("{{", "}}", comparison=Comparison.ORDINAL_IGNORE_CASE)),
    ]

    print("=" * 60)
    print(f"{'case':20} {'flat':>10} {'segmented':>12} {'replace':>10}")
    print("=" * 60)
    for name, pattern in cases:
        flat = time_call(lambda p=pattern: p.matches(text))
        seg = time_call(lambda p=pattern: p.matches(builder))
        rep = time_call(lambda p=pattern: p.replace(builder, "_"))
        print(f"{name:20} {flat * 1000:8.2f}ms {seg * 1000:10.2f}ms {rep * 1000:8.2f}ms")


if __name__ == "__main__":
    main()
