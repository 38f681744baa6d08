"""Rich output formatting helpers for the Sanctifier CLI.

Provides consistent, kind-colored terminal output for scan reports and
ledger size tables.

Pattern Color Mapping:
    UNCONDITIONAL_ABORT = bold red, FALLIBLE_UNWRAP = yellow,
    FALLIBLE_EXPECT = cyan
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sanctifier.core.analyzer import (
    AnalysisReport,
    AnalyzerConfig,
    PatternKind,
    TaggedStructure,
)

_KIND_STYLES: dict[PatternKind, str] = {
    PatternKind.UNCONDITIONAL_ABORT: "bold red",
    PatternKind.FALLIBLE_UNWRAP: "yellow",
    PatternKind.FALLIBLE_EXPECT: "cyan",
}

console = Console()


def kind_style(kind: PatternKind) -> str:
    """Return the Rich style string for a given pattern kind."""
    return _KIND_STYLES.get(kind, "white")


def print_scan_reports(
    reports: list[tuple[Path, AnalysisReport]],
    config: AnalyzerConfig,
) -> None:
    """Print unsafe patterns and size warnings for every scanned file.

    Args:
        reports: ``(path, report)`` pairs in scan order.
        config: The configuration the reports were produced with.
    """
    patterns = [(path, p) for path, r in reports for p in r.unsafe_patterns]
    warnings = [(path, w) for path, r in reports for w in r.size_warnings]

    if patterns:
        table = Table(title="Abort-Prone Call Sites", show_header=True, header_style="bold")
        table.add_column("File", style="dim")
        table.add_column("Line", justify="right")
        table.add_column("Kind")
        table.add_column("Construct", style="bold")
        for path, pattern in patterns:
            table.add_row(
                str(path), str(pattern.source_line),
                Text(pattern.pattern_kind.name, style=kind_style(pattern.pattern_kind)),
                pattern.snippet,
            )
        console.print(table)

    if warnings:
        table = Table(title="Ledger Size Warnings", show_header=True, header_style="bold")
        table.add_column("File", style="dim")
        table.add_column("Type", style="bold")
        table.add_column("Estimated", justify="right")
        table.add_column("Limit", justify="right")
        for path, warning in warnings:
            table.add_row(
                str(path), warning.structure_name,
                Text(str(warning.estimated_size), style="red"),
                str(warning.limit),
            )
        console.print(table)

    if not patterns and not warnings:
        console.print("[green]No findings. All sources passed.[/green]")

    _print_scan_summary(reports, config, len(patterns), len(warnings))


def _print_scan_summary(
    reports: list[tuple[Path, AnalysisReport]],
    config: AnalyzerConfig,
    n_patterns: int,
    n_warnings: int,
) -> None:
    """Print a one-line summary after the report tables."""
    parts = [f"[bold]{len(reports)}[/bold] files scanned"]
    if n_patterns > 0:
        parts.append(f"[yellow]{n_patterns} abort-prone call sites[/yellow]")
    if n_warnings > 0:
        parts.append(f"[red]{n_warnings} size warnings[/red]")
    mode = "strict" if config.strict_mode else "normal"
    parts.append(f"threshold {config.effective_limit} bytes ({mode})")
    console.print(" | ".join(parts))


def print_size_table(
    rows: list[tuple[Path, TaggedStructure, int]],
    config: AnalyzerConfig,
) -> None:
    """Print every tagged structure with its estimated size.

    Args:
        rows: ``(path, structure, estimated_size)`` triples.
        config: Supplies the effective threshold.
    """
    if not rows:
        console.print("[dim]No persisted contract types found.[/dim]")
        return

    table = Table(title="Ledger Entry Size Estimates", show_header=True, header_style="bold")
    table.add_column("File", style="dim")
    table.add_column("Type", style="bold")
    table.add_column("Fields", justify="right")
    table.add_column("Estimated", justify="right")
    table.add_column("Status", justify="center")

    for path, structure, size in rows:
        if config.exceeds(size):
            status = Text("OVER", style="bold red")
        else:
            status = Text("OK", style="bold green")
        table.add_row(
            str(path), structure.name, str(len(structure.field_types)), str(size), status,
        )

    console.print(table)
    console.print(f"Effective threshold: [bold]{config.effective_limit}[/bold] bytes")
