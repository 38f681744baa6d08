"""Load analyzer settings from a YAML file and command-line overrides.

The analysis core never reads files or environment variables; the CLI
builds an ``AnalyzerConfig`` here and hands it to the ``Analyzer``.

File format (every key optional)::

    strict_mode: true
    size_limit: 64000
    strict_divisor: 2
    persistence_marker: contracttype
    size_table:
      variable_length: 96
      container: 256
      types:
        Timepoint: word64

When no ``--config`` is passed, ``sanctifier.yaml`` or ``.sanctifier.yaml``
in the scanned directory is used if present. Command-line flags win over
file values.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sanctifier.core.config import AnalyzerConfig, SizeTable
from sanctifier.exceptions import ConfigError

CONFIG_FILENAMES: tuple[str, ...] = ("sanctifier.yaml", ".sanctifier.yaml")

_KNOWN_KEYS = frozenset({
    "strict_mode", "size_limit", "strict_divisor", "persistence_marker", "size_table",
})


def find_config_file(search_dir: Path) -> Path | None:
    """Return the first default config file in ``search_dir``, if any."""
    for name in CONFIG_FILENAMES:
        candidate = search_dir / name
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse a YAML config file into a dict.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, is not
            a mapping, or contains unknown keys.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    unknown = set(data) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"unknown config keys in {path}: {sorted(unknown)}")
    return data


def build_config(
    file_values: dict[str, Any],
    *,
    strict_mode: bool | None = None,
    size_limit: int | None = None,
) -> AnalyzerConfig:
    """Merge file values and command-line overrides into a config.

    Raises:
        ConfigError: If any resulting value is invalid.
    """
    values = dict(file_values)
    table_data = values.pop("size_table", None)
    if table_data is not None:
        if not isinstance(table_data, dict):
            raise ConfigError("size_table must be a mapping")
        values["size_table"] = SizeTable.from_mapping(table_data)
    if strict_mode is not None:
        values["strict_mode"] = strict_mode
    if size_limit is not None:
        values["size_limit"] = size_limit
    return AnalyzerConfig(**values)


def load_config(
    config_path: Path | None,
    search_dir: Path,
    *,
    strict_mode: bool | None = None,
    size_limit: int | None = None,
) -> AnalyzerConfig:
    """Resolve the effective configuration for one CLI invocation.

    Args:
        config_path: Explicit ``--config`` file, or None to search.
        search_dir: Directory searched for a default config file.
        strict_mode: ``--strict`` override, None when not given.
        size_limit: ``--size-limit`` override, None when not given.
    """
    path = config_path or find_config_file(search_dir)
    file_values = read_config_file(path) if path is not None else {}
    return build_config(file_values, strict_mode=strict_mode, size_limit=size_limit)
