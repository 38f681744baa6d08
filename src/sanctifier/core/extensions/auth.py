"""Authorization-gap scanning interface.

A real scanner would report contract entry points that mutate state
without first calling ``require_auth`` on the acting address.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AuthGapScanner(ABC):
    """Finds functions that are missing an authorization check."""

    @abstractmethod
    def scan(self, source: str) -> list[str]:
        """Scan one compilation unit.

        Must not raise on unparsable input; return an empty list instead.

        Args:
            source: The complete text of a single source file.

        Returns:
            Names of functions with an authorization gap.
        """


class NoopAuthGapScanner(AuthGapScanner):
    """Default scanner: performs no analysis and reports nothing."""

    def scan(self, source: str) -> list[str]:
        return []
