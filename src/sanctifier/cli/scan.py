"""``sanctifier scan <path>`` -- Analyze Rust contract sources.

Runs both analyses on every ``.rs`` file found at PATH: abort-prone call
sites (``panic!``, ``.unwrap()``, ``.expect()``) and ``#[contracttype]``
structs whose estimated size crosses the ledger entry threshold.

Exit Codes:
    0 -- No findings in any file.
    1 -- At least one unsafe pattern or size warning.
    2 -- No Rust sources found, or invalid configuration.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from sanctifier.cli.config import load_config
from sanctifier.core.analyzer import AnalysisReport, Analyzer
from sanctifier.discovery import discover_sources, read_source
from sanctifier.exceptions import ConfigError


def _reports_to_json(reports: list[tuple[Path, AnalysisReport]]) -> list[dict]:
    """Convert per-file reports to JSON-serializable dicts."""
    return [{"path": str(path), **report.to_dict()} for path, report in reports]


def _analyze_sources(analyzer: Analyzer, sources: list[Path]) -> list[tuple[Path, AnalysisReport]]:
    reports: list[tuple[Path, AnalysisReport]] = []
    for source_path in sources:
        text = read_source(source_path)
        if text is None:
            continue
        reports.append((source_path, analyzer.analyze(text)))
    return reports


def common_options(func):
    """Options shared by every analysis command."""
    func = click.option(
        "--format", "output_format",
        type=click.Choice(["text", "json"]),
        default="text",
        help="Output format (default: text).",
    )(func)
    func = click.option(
        "--config", "config_path",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="YAML config file (default: sanctifier.yaml in PATH).",
    )(func)
    func = click.option(
        "--size-limit",
        type=click.IntRange(min=0),
        default=None,
        help="Ledger entry size limit in bytes (default: 64000).",
    )(func)
    func = click.option(
        "--strict/--no-strict",
        default=None,
        help="Warn at half the size limit.",
    )(func)
    return func


def build_analyzer(
    path: Path,
    config_path: str | None,
    strict: bool | None,
    size_limit: int | None,
) -> Analyzer:
    """Build an analyzer from the config file and flag overrides.

    Raises:
        click.UsageError: If the configuration is invalid.
    """
    search_dir = path if path.is_dir() else path.parent
    try:
        config = load_config(
            Path(config_path) if config_path else None,
            search_dir,
            strict_mode=strict,
            size_limit=size_limit,
        )
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    return Analyzer(config=config)


@click.command("scan")
@click.argument("path", type=click.Path(exists=True))
@common_options
def scan_command(
    path: str,
    strict: bool | None,
    size_limit: int | None,
    config_path: str | None,
    output_format: str,
) -> None:
    """Analyze Rust contract sources for abort risks and oversized types.

    PATH is a single .rs file or a directory searched recursively
    (target/ and hidden directories are skipped).

    Exit code 0 if nothing was found, 1 if any finding exists.
    """
    target = Path(path)
    analyzer = build_analyzer(target, config_path, strict, size_limit)

    sources = discover_sources(target)
    if not sources:
        if output_format == "json":
            click.echo(json.dumps([]))
        else:
            click.echo("No Rust sources found.")
        sys.exit(2)

    reports = _analyze_sources(analyzer, sources)

    if output_format == "json":
        click.echo(json.dumps(_reports_to_json(reports), indent=2))
    else:
        from sanctifier.cli.output import print_scan_reports
        print_scan_reports(reports, analyzer.config)

    has_findings = any(not report.is_clean for _, report in reports)
    sys.exit(1 if has_findings else 0)
