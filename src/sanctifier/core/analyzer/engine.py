"""Analysis orchestrator for Soroban contract sources.

The ``Analyzer`` class ties the pieces together:

1. **Parse** -- the configured ``SyntaxProvider`` turns source text into a
   ``SyntaxTree``. A ``ParseError`` ends the call with an empty result.
2. **Walk** -- the abort-pattern visitor or the ledger size estimator runs
   over the tree.
3. **Report** -- records are returned in traversal / declaration order.

The analyzer holds no mutable state besides its configuration, so one
instance can serve concurrent calls as long as the configuration is not
reassigned mid-flight.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sanctifier.core.config import DEFAULT_SIZE_LIMIT, AnalyzerConfig
from sanctifier.core.extensions import (
    AuthGapScanner,
    NoopAuthGapScanner,
    NoopStorageCollisionChecker,
    StorageCollisionChecker,
)
from sanctifier.core.ledger import collect_size_warnings, estimate_sizes
from sanctifier.core.models import (
    AnalysisReport,
    SizeWarning,
    TaggedStructure,
    UnsafePattern,
)
from sanctifier.core.patterns import collect_unsafe_patterns
from sanctifier.exceptions import ParseError
from sanctifier.syntax import RustSyntaxProvider, SyntaxProvider, SyntaxTree

logger = logging.getLogger(__name__)


class Analyzer:
    """Best-effort static analyzer for Rust smart-contract sources.

    The tool is advisory, not a compiler: every public method accepts any
    string and always returns a result.

    Usage::

        analyzer = Analyzer(strict_mode=True)
        for pattern in analyzer.analyze_unsafe_patterns(source):
            print(f"line {pattern.source_line}: {pattern.snippet}")
        for warning in analyzer.analyze_ledger_size(source):
            print(f"{warning.structure_name}: {warning.estimated_size} bytes")

    Args:
        strict_mode: Halve the effective size threshold.
        size_limit: Ledger entry size warning threshold in bytes.
        config: A complete configuration. When given, ``strict_mode`` and
            ``size_limit`` are ignored.
        provider: Syntax tree provider. Defaults to tree-sitter Rust.
        auth_scanner: Implementation behind ``scan_auth_gaps``.
        collision_checker: Implementation behind
            ``check_storage_collisions``.

    Raises:
        ConfigError: If the configuration is invalid.
    """

    def __init__(
        self,
        strict_mode: bool = False,
        size_limit: int = DEFAULT_SIZE_LIMIT,
        *,
        config: AnalyzerConfig | None = None,
        provider: SyntaxProvider | None = None,
        auth_scanner: AuthGapScanner | None = None,
        collision_checker: StorageCollisionChecker | None = None,
    ) -> None:
        if config is None:
            config = AnalyzerConfig(strict_mode=strict_mode, size_limit=size_limit)
        self._config = config
        self._provider = provider or RustSyntaxProvider()
        self._auth_scanner = auth_scanner or NoopAuthGapScanner()
        self._collision_checker = collision_checker or NoopStorageCollisionChecker()

    @classmethod
    def new(cls, strict_mode: bool) -> Analyzer:
        """Create an analyzer with the default 64000 byte size limit."""
        return cls(strict_mode=strict_mode)

    # -- Configuration --

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    @property
    def strict_mode(self) -> bool:
        return self._config.strict_mode

    @property
    def size_limit(self) -> int:
        return self._config.size_limit

    @size_limit.setter
    def size_limit(self, value: int) -> None:
        self._config = self._config.with_changes(size_limit=value)

    # -- Analyses --

    def analyze_unsafe_patterns(self, source: str) -> list[UnsafePattern]:
        """Find every call site in ``source`` that can abort execution.

        Returns:
            Matches in pre-order traversal order. Empty if ``source``
            cannot be parsed.
        """
        tree = self._parse(source)
        if tree is None:
            return []
        return collect_unsafe_patterns(tree)

    def analyze_ledger_size(self, source: str) -> list[SizeWarning]:
        """Find tagged structures whose estimated size crosses the threshold.

        Returns:
            At most one warning per tagged structure, in declaration
            order. Empty if ``source`` cannot be parsed.
        """
        tree = self._parse(source)
        if tree is None:
            return []
        return collect_size_warnings(tree, self._config)

    def estimate_ledger_sizes(self, source: str) -> list[tuple[TaggedStructure, int]]:
        """Estimate the size of every tagged structure, warning or not."""
        tree = self._parse(source)
        if tree is None:
            return []
        return estimate_sizes(tree, self._config)

    def analyze(self, source: str) -> AnalysisReport:
        """Run both analyses on ``source`` with a single parse."""
        tree = self._parse(source)
        if tree is None:
            return AnalysisReport()
        return AnalysisReport(
            unsafe_patterns=collect_unsafe_patterns(tree),
            size_warnings=collect_size_warnings(tree, self._config),
        )

    # -- Extension points --

    def scan_auth_gaps(self, source: str) -> list[str]:
        """Report functions missing an authorization check (no-op by default)."""
        return self._auth_scanner.scan(source)

    def check_storage_collisions(self, keys: Sequence[str]) -> bool:
        """Report whether storage keys can collide (no-op by default)."""
        return self._collision_checker.check(list(keys))

    # -- Internals --

    def _parse(self, source: str) -> SyntaxTree | None:
        try:
            return self._provider.parse(source)
        except ParseError as exc:
            logger.debug("Skipping unparsable source: %s", exc)
            return None
