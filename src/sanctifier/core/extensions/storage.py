"""Storage-key collision checking interface.

A real checker would decide whether two distinct storage keys used by a
contract can serialize to the same ledger key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class StorageCollisionChecker(ABC):
    """Detects colliding contract storage keys."""

    @abstractmethod
    def check(self, keys: Sequence[str]) -> bool:
        """Return True if any two of ``keys`` can collide."""


class NoopStorageCollisionChecker(StorageCollisionChecker):
    """Default checker: performs no analysis and never reports a collision."""

    def check(self, keys: Sequence[str]) -> bool:
        return False
