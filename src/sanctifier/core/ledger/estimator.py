"""Estimate serialized sizes of tagged structures and apply thresholds."""

from __future__ import annotations

import logging

from sanctifier.core.config import AnalyzerConfig, SizeTable
from sanctifier.core.ledger.structures import find_tagged_structures
from sanctifier.core.models import SizeWarning, TaggedStructure
from sanctifier.exceptions import AnalysisError
from sanctifier.syntax import SyntaxTree

logger = logging.getLogger(__name__)


def estimate_structure_size(structure: TaggedStructure, table: SizeTable) -> int:
    """Sum the per-field estimates of ``structure``. A fieldless struct is 0."""
    return sum(table.size_of(type_name) for type_name in structure.field_types)


def evaluate_size(
    structure: TaggedStructure, size: int, config: AnalyzerConfig
) -> SizeWarning | None:
    """Return a warning if ``size`` crosses the configured threshold.

    A structure that is over both the full limit and the strict limit
    still yields a single warning. The warning always carries the full
    configured limit.
    """
    if not config.exceeds(size):
        return None
    return SizeWarning(
        structure_name=structure.name,
        estimated_size=size,
        limit=config.size_limit,
    )


def estimate_sizes(
    tree: SyntaxTree, config: AnalyzerConfig
) -> list[tuple[TaggedStructure, int]]:
    """Estimate every tagged structure in ``tree``.

    Returns:
        ``(structure, estimated_size)`` pairs in declaration order. Empty
        if the tree cannot be walked.
    """
    try:
        structures = find_tagged_structures(tree, config.persistence_marker)
    except (AnalysisError, AttributeError, TypeError) as exc:
        logger.warning("Ledger size walk failed: %s", exc)
        return []
    return [(s, estimate_structure_size(s, config.size_table)) for s in structures]


def collect_size_warnings(tree: SyntaxTree, config: AnalyzerConfig) -> list[SizeWarning]:
    """Return one warning per tagged structure over the threshold."""
    warnings: list[SizeWarning] = []
    for structure, size in estimate_sizes(tree, config):
        warning = evaluate_size(structure, size, config)
        if warning is not None:
            logger.debug(
                "%s estimated at %d bytes (limit %d)",
                structure.name, size, config.effective_limit,
            )
            warnings.append(warning)
    return warnings
