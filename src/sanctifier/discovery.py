"""Locate Rust source files to analyze.

``discover_sources`` accepts either a single file or a directory. Directory
walks are recursive, sorted for deterministic output, and skip Cargo build
output (``target/``) and hidden directories such as ``.git``.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

RUST_SUFFIX = ".rs"

_SKIPPED_DIRS: frozenset[str] = frozenset({"target", "node_modules"})


def _is_skipped(path: Path, root: Path) -> bool:
    parts = path.relative_to(root).parts[:-1]
    return any(p in _SKIPPED_DIRS or p.startswith(".") for p in parts)


def discover_sources(path: Path) -> list[Path]:
    """Return the Rust source files under ``path``.

    Args:
        path: A ``.rs`` file or a directory to search.

    Returns:
        Sorted list of source files. A single file is returned as-is if
        it has the ``.rs`` suffix. Empty if nothing was found.
    """
    if path.is_file():
        return [path] if path.suffix == RUST_SUFFIX else []
    if not path.is_dir():
        return []
    found: list[Path] = []
    try:
        for candidate in path.rglob(f"*{RUST_SUFFIX}"):
            if candidate.is_file() and not _is_skipped(candidate, path):
                found.append(candidate)
    except PermissionError:
        logger.warning("Permission denied: %s", path)
    return sorted(found)


def read_source(path: Path) -> str | None:
    """Read a source file as UTF-8, or return None if it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read source: %s", path, exc_info=True)
        return None
