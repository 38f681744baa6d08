"""Ledger entry size estimation for persisted contract types.

Soroban stores each ``#[contracttype]`` value as one ledger entry, and the
network rejects entries above a size limit. This package finds every struct
tagged with the persistence marker, estimates its serialized size from a
fixed per-type table, and warns when the estimate crosses the configured
threshold.

Submodules
----------
- ``structures``: Locating tagged structs and resolving field type names.
- ``estimator``: Size sums and threshold evaluation.
"""

from sanctifier.core.ledger.estimator import (
    collect_size_warnings,
    estimate_sizes,
    estimate_structure_size,
    evaluate_size,
)
from sanctifier.core.ledger.structures import (
    declaration_markers,
    find_tagged_structures,
    resolve_type_name,
)

__all__ = [
    "collect_size_warnings",
    "declaration_markers",
    "estimate_sizes",
    "estimate_structure_size",
    "evaluate_size",
    "find_tagged_structures",
    "resolve_type_name",
]
