"""Tests for the Analyzer orchestrator.

Verifies the public entry points end to end:
    - Unsafe pattern and ledger size analysis over source text.
    - Empty results (never exceptions) for unparsable input.
    - Construction defaults and size_limit reconfiguration.
    - Idempotence of repeated calls.
"""

from __future__ import annotations

import pytest

from sanctifier.core.analyzer import (
    AnalysisReport,
    Analyzer,
    AnalyzerConfig,
    PatternKind,
    SizeWarning,
)
from sanctifier.exceptions import ConfigError, ParseError
from sanctifier.syntax import SyntaxProvider, SyntaxTree

FORTY_K_FIELDS = ["Vec<u32>"] * 312 + ["Bytes"]
SEVENTY_K_FIELDS = ["Vec<Address>"] * 546 + ["Address"] * 3 + ["i64"] * 2

PANIC_SOURCE = """
pub fn test() {
    panic!("error");
}
"""

UNWRAP_EXPECT_SOURCE = """
pub fn test() {
    let x: Option<i32> = None;
    x.unwrap();
    x.expect("msg");
}
"""

UNPARSABLE = [
    "fn broken( {",
    "#[contracttype] pub struct {",
    "}}}} not rust",
]


class TestConstruction:
    """Defaults and configuration surface."""

    def test_new_defaults(self) -> None:
        analyzer = Analyzer.new(True)
        assert analyzer.strict_mode is True
        assert analyzer.size_limit == 64000

    def test_keyword_construction(self) -> None:
        analyzer = Analyzer(strict_mode=False, size_limit=1000)
        assert analyzer.config == AnalyzerConfig(size_limit=1000)

    def test_explicit_config_wins(self) -> None:
        config = AnalyzerConfig(strict_mode=True, size_limit=10)
        analyzer = Analyzer(config=config)
        assert analyzer.config is config

    def test_size_limit_is_reconfigurable(self, struct_source) -> None:
        analyzer = Analyzer(strict_mode=False)
        source = struct_source("S", ["u32", "Address", "Bytes"])
        assert analyzer.analyze_ledger_size(source) == []
        analyzer.size_limit = 99
        assert analyzer.size_limit == 99
        assert analyzer.analyze_ledger_size(source) == [SizeWarning("S", 100, 99)]

    def test_invalid_size_limit_rejected(self) -> None:
        with pytest.raises(ConfigError):
            Analyzer(size_limit=-5)
        analyzer = Analyzer()
        with pytest.raises(ConfigError):
            analyzer.size_limit = -5
        assert analyzer.size_limit == 64000


class TestUnsafePatterns:
    """``analyze_unsafe_patterns`` over source text."""

    def test_find_panic(self, analyzer: Analyzer) -> None:
        patterns = analyzer.analyze_unsafe_patterns(PANIC_SOURCE)
        assert len(patterns) == 1
        assert patterns[0].pattern_kind is PatternKind.UNCONDITIONAL_ABORT
        assert patterns[0].snippet == "panic!"
        assert patterns[0].source_line == 3

    def test_find_unwrap_expect(self, analyzer: Analyzer) -> None:
        patterns = analyzer.analyze_unsafe_patterns(UNWRAP_EXPECT_SOURCE)
        assert [p.pattern_kind for p in patterns] == [
            PatternKind.FALLIBLE_UNWRAP,
            PatternKind.FALLIBLE_EXPECT,
        ]

    def test_strict_mode_does_not_change_patterns(
        self, analyzer: Analyzer, strict_analyzer: Analyzer
    ) -> None:
        assert (
            analyzer.analyze_unsafe_patterns(UNWRAP_EXPECT_SOURCE)
            == strict_analyzer.analyze_unsafe_patterns(UNWRAP_EXPECT_SOURCE)
        )


class TestLedgerSize:
    """``analyze_ledger_size`` over source text."""

    def test_small_structure(self, analyzer: Analyzer, struct_source) -> None:
        source = struct_source("Small", ["u32", "Address", "Bytes"])
        assert analyzer.analyze_ledger_size(source) == []
        assert analyzer.estimate_ledger_sizes(source)[0][1] == 100

    def test_strict_forty_k(self, strict_analyzer: Analyzer, struct_source) -> None:
        warnings = strict_analyzer.analyze_ledger_size(struct_source("Mid", FORTY_K_FIELDS))
        assert warnings == [SizeWarning("Mid", 40000, 64000)]

    def test_non_strict_forty_k(self, analyzer: Analyzer, struct_source) -> None:
        assert analyzer.analyze_ledger_size(struct_source("Mid", FORTY_K_FIELDS)) == []

    def test_non_strict_seventy_k(self, analyzer: Analyzer, struct_source) -> None:
        warnings = analyzer.analyze_ledger_size(struct_source("Big", SEVENTY_K_FIELDS))
        assert warnings == [SizeWarning("Big", 70000, 64000)]

    def test_untagged_never_warns(self, strict_analyzer: Analyzer, struct_source) -> None:
        source = struct_source("Big", SEVENTY_K_FIELDS, tagged=False)
        assert strict_analyzer.analyze_ledger_size(source) == []


class TestUnparsableInput:
    """Parse failures yield empty results, never errors."""

    @pytest.mark.parametrize("source", UNPARSABLE)
    def test_empty_results(self, analyzer: Analyzer, source: str) -> None:
        assert analyzer.analyze_unsafe_patterns(source) == []
        assert analyzer.analyze_ledger_size(source) == []
        assert analyzer.estimate_ledger_sizes(source) == []
        assert analyzer.analyze(source) == AnalysisReport()

    def test_partial_source_with_panic_yields_nothing(self, analyzer: Analyzer) -> None:
        source = 'fn ok() { panic!("x"); }\nfn broken( {'
        assert analyzer.analyze_unsafe_patterns(source) == []

    def test_custom_provider_failure(self) -> None:
        class _FailingProvider(SyntaxProvider):
            def parse(self, source: str) -> SyntaxTree:
                raise ParseError("always")

        analyzer = Analyzer(provider=_FailingProvider())
        assert analyzer.analyze_unsafe_patterns(PANIC_SOURCE) == []
        assert analyzer.analyze_ledger_size(PANIC_SOURCE) == []


class TestCombinedReport:
    """``analyze`` bundles both analyses."""

    def test_report(self, analyzer: Analyzer, struct_source) -> None:
        source = PANIC_SOURCE + struct_source("Big", SEVENTY_K_FIELDS)
        report = analyzer.analyze(source)
        assert report.unsafe_patterns == analyzer.analyze_unsafe_patterns(source)
        assert report.size_warnings == analyzer.analyze_ledger_size(source)
        assert not report.is_clean

    def test_clean_report(self, analyzer: Analyzer) -> None:
        report = analyzer.analyze("pub fn add(a: u32, b: u32) -> u32 { a + b }")
        assert report.is_clean
        assert report.to_dict() == {"unsafe_patterns": [], "size_warnings": []}


class TestIdempotence:
    """Identical input and configuration give identical output."""

    def test_repeated_calls_equal(self, strict_analyzer: Analyzer, struct_source) -> None:
        source = UNWRAP_EXPECT_SOURCE + struct_source("Mid", FORTY_K_FIELDS)
        first = strict_analyzer.analyze(source).to_dict()
        second = strict_analyzer.analyze(source).to_dict()
        assert first == second
