"""Sanctifier exception hierarchy.

All public exceptions inherit from SanctifierError, giving callers a single
base class to catch when they want to handle any Sanctifier-specific failure
without swallowing unrelated errors.

The analyzer's public entry points never let ``ParseError`` or
``AnalysisError`` escape: both are converted into empty results. Only
``ConfigError`` reaches callers, and only while an analyzer is being
configured.
"""


class SanctifierError(Exception):
    """Base exception for all Sanctifier errors."""


class ParseError(SanctifierError):
    """Raised when source text cannot be parsed into a syntax tree.

    Covers syntax errors, missing tokens reported by the parser, and
    source text that cannot be encoded for the parser.
    """


class AnalysisError(SanctifierError):
    """Raised when a syntax tree cannot be traversed.

    Covers trees that violate the structural shape a walker expects,
    such as nodes without a type or children from a foreign provider.
    """


class ConfigError(SanctifierError):
    """Raised for invalid analyzer configuration.

    Covers negative size limits, non-positive strict divisors, unknown
    size-table categories, and malformed YAML configuration files.
    """
