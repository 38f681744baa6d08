"""Data models shared by the analysis walkers and the analyzer.

PatternKind, UnsafePattern, TaggedStructure, SizeWarning and AnalysisReport
are intentionally decoupled from the walkers so that downstream code (CLI
formatters, CI gates, editor integrations) can import them without pulling
in tree-sitter.

Every record exposes ``to_dict()`` returning a flat mapping of primitive
values, ready for ``json.dumps``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable


# ---------------------------------------------------------------------------
# PatternKind: What kind of abort a call site can cause
# ---------------------------------------------------------------------------


class PatternKind(Enum):
    """Classification of an abort-prone call site."""

    UNCONDITIONAL_ABORT = "unconditional_abort"
    FALLIBLE_UNWRAP = "fallible_unwrap"
    FALLIBLE_EXPECT = "fallible_expect"


# ---------------------------------------------------------------------------
# UnsafePattern: One abort-prone call site
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UnsafePattern:
    """A single call site that can abort contract execution.

    Attributes:
        pattern_kind: Which abort construct was matched.
        source_line: 1-based line of the matched token (the macro name
            for ``panic!``, the method name for ``unwrap``/``expect``).
        snippet: Short label naming the construct, e.g. ``"panic!"`` or
            ``"unwrap"``.
    """

    pattern_kind: PatternKind
    source_line: int
    snippet: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "pattern_kind": self.pattern_kind.value,
            "source_line": self.source_line,
            "snippet": self.snippet,
        }


def sort_by_line(patterns: Iterable[UnsafePattern]) -> list[UnsafePattern]:
    """Return ``patterns`` ordered by source line.

    The sort is stable, so call sites on the same line keep their
    traversal order. The analyzer itself always returns traversal order.
    """
    return sorted(patterns, key=lambda p: p.source_line)


# ---------------------------------------------------------------------------
# TaggedStructure: A persisted struct declaration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TaggedStructure:
    """A struct declaration carrying the persistence marker attribute.

    Attributes:
        name: The struct identifier.
        field_types: Resolved type name of each field in declaration
            order. ``None`` marks a field whose type is not a named path
            (tuple, reference, array, ...).
        line: 1-based line of the ``struct`` keyword.
    """

    name: str
    field_types: tuple[str | None, ...] = ()
    line: int = 0


# ---------------------------------------------------------------------------
# SizeWarning: A structure that may not fit in one ledger entry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SizeWarning:
    """Estimated serialized size of a tagged structure exceeds a threshold.

    Attributes:
        structure_name: Name of the offending struct.
        estimated_size: Estimated serialized size in bytes.
        limit: The configured ledger entry size limit in bytes. Under
            strict mode this is still the full limit, not the halved one.
    """

    structure_name: str
    estimated_size: int
    limit: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "structure_name": self.structure_name,
            "estimated_size": self.estimated_size,
            "limit": self.limit,
        }


# ---------------------------------------------------------------------------
# AnalysisReport: Both result collections for one source
# ---------------------------------------------------------------------------


@dataclass
class AnalysisReport:
    """Combined output of running every analysis on one source text.

    Attributes:
        unsafe_patterns: Abort-prone call sites in traversal order.
        size_warnings: Oversized tagged structures in declaration order.
    """

    unsafe_patterns: list[UnsafePattern] = field(default_factory=list)
    size_warnings: list[SizeWarning] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        """True when neither analysis reported anything."""
        return not self.unsafe_patterns and not self.size_warnings

    def to_dict(self) -> dict[str, Any]:
        return {
            "unsafe_patterns": [p.to_dict() for p in self.unsafe_patterns],
            "size_warnings": [w.to_dict() for w in self.size_warnings],
        }
