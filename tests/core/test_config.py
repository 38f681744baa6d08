"""Tests for AnalyzerConfig and SizeTable validation."""

from __future__ import annotations

import pytest

from sanctifier.core.config import (
    DEFAULT_SIZE_LIMIT,
    DEFAULT_TYPE_CATEGORIES,
    AnalyzerConfig,
    SizeTable,
)
from sanctifier.exceptions import ConfigError


class TestAnalyzerConfig:
    """Defaults, derived thresholds and validation."""

    def test_defaults(self) -> None:
        config = AnalyzerConfig()
        assert config.strict_mode is False
        assert config.size_limit == DEFAULT_SIZE_LIMIT == 64000
        assert config.strict_divisor == 2
        assert config.persistence_marker == "contracttype"

    def test_effective_limit(self) -> None:
        assert AnalyzerConfig().effective_limit == 64000
        assert AnalyzerConfig(strict_mode=True).effective_limit == 32000
        assert AnalyzerConfig(strict_mode=True, strict_divisor=4).effective_limit == 16000

    def test_frozen(self) -> None:
        config = AnalyzerConfig()
        with pytest.raises(AttributeError):
            config.size_limit = 1  # type: ignore[misc]

    def test_with_changes_revalidates(self) -> None:
        config = AnalyzerConfig()
        assert config.with_changes(size_limit=10).size_limit == 10
        with pytest.raises(ConfigError):
            config.with_changes(size_limit=-1)

    @pytest.mark.parametrize("kwargs", [
        {"size_limit": -1},
        {"size_limit": 1.5},
        {"size_limit": True},
        {"strict_divisor": 0},
        {"strict_divisor": True},
        {"persistence_marker": ""},
    ])
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ConfigError):
            AnalyzerConfig(**kwargs)


class TestSizeTable:
    """Category validation and overrides."""

    def test_categories(self) -> None:
        assert SizeTable.categories() == (
            "small_scalar", "word64", "word128", "address",
            "variable_length", "container", "unknown_named", "structural",
        )

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ConfigError):
            SizeTable(container=-1)

    def test_unknown_category_in_mapping_rejected(self) -> None:
        with pytest.raises(ConfigError):
            SizeTable(type_categories={"Foo": "huge"})

    def test_from_mapping_overrides(self) -> None:
        table = SizeTable.from_mapping({
            "container": 256,
            "types": {"Timepoint": "word64"},
        })
        assert table.size_of("Vec") == 256
        assert table.size_of("Timepoint") == 8
        assert table.size_of("Address") == 32

    def test_from_mapping_unknown_key(self) -> None:
        with pytest.raises(ConfigError):
            SizeTable.from_mapping({"gigantic": 1})

    def test_default_mapping_not_shared(self) -> None:
        table = SizeTable()
        assert table.type_categories == DEFAULT_TYPE_CATEGORIES
        assert table.type_categories is not DEFAULT_TYPE_CATEGORIES
