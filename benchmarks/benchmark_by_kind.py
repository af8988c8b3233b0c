"""Benchmark the lexemizer by lexeme kind.

Times one small Rust corpus per lexeme kind, to find which classifier
dominates scan time.

Run with:
    python benchmarks/benchmark_by_kind.py
"""

import time
from dataclasses import dataclass

from rs2ts import LexemeKind, lexemize


@dataclass
class KindTiming:
    """Timing data for one corpus."""

    kind: LexemeKind
    total_bytes: int
    avg_time_us: float

    @property
    def mb_per_s(self) -> float:
        return self.total_bytes / self.avg_time_us if self.avg_time_us else 0.0


def build_corpora(repeat: int = 500) -> dict[LexemeKind, str]:
    """Return one source string per kind, each dominated by that kind."""
    samples = {
        LexemeKind.CHARACTER: "'a' '\\n' '\\x7F' '\\u{1F600}' '日' ",
        LexemeKind.COMMENT: "// line comment\n/* block /* nested */ comment */ ",
        LexemeKind.IDENTIFIER: "let mut some_value = other_value_2 + ünïcödé; ",
        LexemeKind.NUMBER: "0b1010_1010 0o777 0xFF_FF 1_000.5e-3 42 ",
        LexemeKind.PUNCTUATION: ">>= <<= ..= :: -> => && || != {}[](); ",
        LexemeKind.STRING: '"plain \\"escaped\\"" r#"raw "quoted" text"# ',
        LexemeKind.WHITESPACE: "a \t\r\n    \u0085 ",
        LexemeKind.UNRECOGNIZED: "'static ~ ` \\ 'outer: ",
    }
    return {kind: sample * repeat for kind, sample in samples.items()}


def benchmark_kind(kind: LexemeKind, source: str, iterations: int = 20) -> KindTiming:
    """Benchmark lexemizing one corpus.

    Returns:
        KindTiming with the mean time per call in µs.
    """
    lexemize(source)  # Warmup

    start = time.perf_counter()
    for _ in range(iterations):
        lexemize(source)
    elapsed = time.perf_counter() - start

    return KindTiming(
        kind=kind,
        total_bytes=len(source.encode()),
        avg_time_us=(elapsed / iterations) * 1_000_000,
    )


def main() -> None:
    """Run kind-by-kind benchmarks."""
    import sys

    print("rs2ts Lexeme Kind Benchmark")
    print("=" * 60)
    print(f"Python {sys.version.split()[0]}\n")

    results = [benchmark_kind(kind, source) for kind, source in build_corpora().items()]
    results.sort(key=lambda x: x.mb_per_s)

    print("RESULTS: Sorted by throughput (slowest first)")
    print("=" * 60)
    for r in results:
        print(
            f"  {r.kind.value:14} {r.avg_time_us:10.1f}µs/call "
            f"({r.total_bytes:6} bytes) {r.mb_per_s:6.2f} MB/s"
        )


if __name__ == "__main__":
    main()
