"""``sanctifier sizes <path>`` -- Show estimated ledger entry sizes.

Lists every ``#[contracttype]`` struct with its estimated serialized size
and whether it crosses the effective threshold (half the limit under
``--strict``).

Exit Codes:
    0 -- Every tagged struct is within the threshold.
    1 -- At least one tagged struct crosses the threshold.
    2 -- No Rust sources found, or invalid configuration.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from sanctifier.cli.scan import build_analyzer, common_options
from sanctifier.core.analyzer import AnalyzerConfig, TaggedStructure
from sanctifier.discovery import discover_sources, read_source

SizeRow = tuple[Path, TaggedStructure, int]


def _rows_to_json(rows: list[SizeRow], config: AnalyzerConfig) -> list[dict]:
    return [
        {
            "path": str(path),
            "structure_name": structure.name,
            "line": structure.line,
            "estimated_size": size,
            "limit": config.size_limit,
            "effective_limit": config.effective_limit,
            "exceeds": config.exceeds(size),
        }
        for path, structure, size in rows
    ]


@click.command("sizes")
@click.argument("path", type=click.Path(exists=True))
@common_options
def sizes_command(
    path: str,
    strict: bool | None,
    size_limit: int | None,
    config_path: str | None,
    output_format: str,
) -> None:
    """Show the estimated size of every persisted contract type.

    Exit code 0 if all types fit, 1 if any crosses the threshold.
    """
    target = Path(path)
    analyzer = build_analyzer(target, config_path, strict, size_limit)
    config = analyzer.config

    sources = discover_sources(target)
    if not sources:
        if output_format == "json":
            click.echo(json.dumps([]))
        else:
            click.echo("No Rust sources found.")
        sys.exit(2)

    rows: list[SizeRow] = []
    for source_path in sources:
        text = read_source(source_path)
        if text is None:
            continue
        for structure, size in analyzer.estimate_ledger_sizes(text):
            rows.append((source_path, structure, size))

    if output_format == "json":
        click.echo(json.dumps(_rows_to_json(rows, config), indent=2))
    else:
        from sanctifier.cli.output import print_size_table
        print_size_table(rows, config)

    sys.exit(1 if any(config.exceeds(size) for _, _, size in rows) else 0)
