"""Analyzer: the public surface of the Sanctifier analysis engine.

``Analyzer`` owns an ``AnalyzerConfig`` and runs the walkers over source
text. Every entry point parses its input independently and is total: a
source that cannot be parsed produces an empty result, never an exception.

Entry points
------------
- ``analyze_unsafe_patterns(source)`` -- abort-prone call sites.
- ``analyze_ledger_size(source)`` -- oversized ``#[contracttype]`` structs.
- ``estimate_ledger_sizes(source)`` -- every tagged struct with its size.
- ``analyze(source)`` -- both result lists in one ``AnalysisReport``.
- ``scan_auth_gaps(source)`` / ``check_storage_collisions(keys)`` --
  extension points, no-op by default.

All public names are re-exported here::

    from sanctifier.core.analyzer import Analyzer, AnalyzerConfig, PatternKind
"""

from sanctifier.core.analyzer.engine import Analyzer
from sanctifier.core.config import AnalyzerConfig, SizeTable
from sanctifier.core.models import (
    AnalysisReport,
    PatternKind,
    SizeWarning,
    TaggedStructure,
    UnsafePattern,
    sort_by_line,
)

__all__ = [
    "AnalysisReport",
    "Analyzer",
    "AnalyzerConfig",
    "PatternKind",
    "SizeTable",
    "SizeWarning",
    "TaggedStructure",
    "UnsafePattern",
    "sort_by_line",
]
