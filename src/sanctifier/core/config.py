"""Analyzer configuration: thresholds and the per-type size table.

The numbers in this module are heuristics, not measurements. Soroban
serializes contract data as XDR ``ScVal`` trees whose real size depends on
the values stored, so the table only assigns a flat, conservative
estimate to each family of field types. Variable-length types
(``Bytes``, ``String``, ``Vec``, ``Map`` ...) have no static size at all;
their entries are placeholders, not upper bounds. Every value is a policy
knob and can be overridden per analyzer.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

from sanctifier.exceptions import ConfigError

DEFAULT_SIZE_LIMIT = 64000
"""Default ledger entry size warning threshold, in bytes."""

DEFAULT_STRICT_DIVISOR = 2
"""Strict mode divides the size limit by this value."""

DEFAULT_PERSISTENCE_MARKER = "contracttype"
"""Attribute that marks a struct as persisted contract data."""


# Type name -> SizeTable category. Names are matched against the last
# segment of a type path, so ``soroban_sdk::Address`` resolves to
# ``Address`` and ``Vec<u32>`` to ``Vec``.
DEFAULT_TYPE_CATEGORIES: dict[str, str] = {
    "bool": "small_scalar",
    "u32": "small_scalar",
    "i32": "small_scalar",
    "u64": "word64",
    "i64": "word64",
    "u128": "word128",
    "i128": "word128",
    "U128": "word128",
    "I128": "word128",
    "Address": "address",
    "Bytes": "variable_length",
    "BytesN": "variable_length",
    "String": "variable_length",
    "Symbol": "variable_length",
    "Vec": "container",
    "Map": "container",
}


# ---------------------------------------------------------------------------
# SizeTable
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SizeTable:
    """Per-category byte estimates used by the size estimator.

    Attributes:
        small_scalar: ``bool`` and 32-bit integers.
        word64: 64-bit integers.
        word128: 128-bit integers.
        address: Account and contract addresses.
        variable_length: Byte strings, strings and symbols.
        container: ``Vec`` and ``Map``.
        unknown_named: Any named type missing from ``type_categories``,
            including user-defined structs and enums.
        structural: Types that are not a named path at all (tuples,
            references, arrays, slices, pointers, function types).
        type_categories: Type name to category mapping.
    """

    small_scalar: int = 4
    word64: int = 8
    word128: int = 16
    address: int = 32
    variable_length: int = 64
    container: int = 128
    unknown_named: int = 32
    structural: int = 8
    type_categories: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_TYPE_CATEGORIES),
        hash=False,
    )

    def __post_init__(self) -> None:
        for name in self.categories():
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(
                    f"size for category {name!r} must be a non-negative integer, "
                    f"got {value!r}"
                )
        unknown = set(self.type_categories.values()) - set(self.categories())
        if unknown:
            raise ConfigError(f"unknown size categories: {sorted(unknown)}")

    @staticmethod
    def categories() -> tuple[str, ...]:
        """Names of the integer size categories, in declaration order."""
        return tuple(f.name for f in fields(SizeTable) if f.name != "type_categories")

    def size_of(self, type_name: str | None) -> int:
        """Return the estimated size of a field of type ``type_name``.

        ``None`` means the field type is not a named path and gets the
        ``structural`` estimate. Names missing from the mapping fall back
        to ``unknown_named``.
        """
        if type_name is None:
            return self.structural
        category = self.type_categories.get(type_name)
        if category is None:
            return self.unknown_named
        return getattr(self, category)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SizeTable:
        """Build a table from category overrides.

        Args:
            data: Category name to byte size, plus an optional ``types``
                mapping of extra type name to category.

        Raises:
            ConfigError: On unknown categories or invalid sizes.
        """
        overrides = dict(data)
        extra_types = overrides.pop("types", None) or {}
        unknown = set(overrides) - set(cls.categories())
        if unknown:
            raise ConfigError(f"unknown size categories: {sorted(unknown)}")
        if not isinstance(extra_types, Mapping):
            raise ConfigError("size_table.types must be a mapping")
        type_categories = dict(DEFAULT_TYPE_CATEGORIES)
        type_categories.update({str(k): str(v) for k, v in extra_types.items()})
        return cls(type_categories=type_categories, **overrides)


# ---------------------------------------------------------------------------
# AnalyzerConfig
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AnalyzerConfig:
    """Immutable analyzer settings.

    Attributes:
        strict_mode: Lower the size threshold to
            ``size_limit // strict_divisor``.
        size_limit: Ledger entry size warning threshold in bytes.
        strict_divisor: Divisor applied to ``size_limit`` in strict mode.
        persistence_marker: Bare attribute name identifying persisted
            structs (``#[contracttype]``).
        size_table: Per-type size estimates.
    """

    strict_mode: bool = False
    size_limit: int = DEFAULT_SIZE_LIMIT
    strict_divisor: int = DEFAULT_STRICT_DIVISOR
    persistence_marker: str = DEFAULT_PERSISTENCE_MARKER
    size_table: SizeTable = field(default_factory=SizeTable)

    def __post_init__(self) -> None:
        if not isinstance(self.strict_mode, bool):
            raise ConfigError(f"strict_mode must be true or false, got {self.strict_mode!r}")
        if isinstance(self.size_limit, bool) or not isinstance(self.size_limit, int):
            raise ConfigError(f"size_limit must be an integer, got {self.size_limit!r}")
        if self.size_limit < 0:
            raise ConfigError(f"size_limit must be non-negative, got {self.size_limit}")
        if (
            isinstance(self.strict_divisor, bool)
            or not isinstance(self.strict_divisor, int)
            or self.strict_divisor < 1
        ):
            raise ConfigError(
                f"strict_divisor must be a positive integer, got {self.strict_divisor!r}"
            )
        if not isinstance(self.persistence_marker, str) or not self.persistence_marker:
            raise ConfigError("persistence_marker must be a non-empty string")

    @property
    def effective_limit(self) -> int:
        """The threshold actually applied to estimated sizes."""
        if self.strict_mode:
            return self.size_limit // self.strict_divisor
        return self.size_limit

    def exceeds(self, size: int) -> bool:
        """Return True if ``size`` should produce a size warning."""
        return size > self.size_limit or (self.strict_mode and size > self.effective_limit)

    def with_changes(self, **changes: Any) -> AnalyzerConfig:
        """Return a copy with ``changes`` applied and re-validated."""
        return replace(self, **changes)
