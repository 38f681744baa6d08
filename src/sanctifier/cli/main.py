"""Sanctifier CLI -- Static analysis for Soroban smart contracts.

Entry point for the ``sanctifier`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    scan   -- Report abort-prone call sites and oversized ledger types.
    sizes  -- Show the estimated size of every persisted contract type.

Usage::

    sanctifier scan ./contracts/token
    sanctifier scan src/lib.rs --strict --format json
    sanctifier sizes ./contracts --size-limit 32000
"""

from __future__ import annotations

import logging

import click

from sanctifier import __version__
from sanctifier.cli.scan import scan_command
from sanctifier.cli.sizes_cmd import sizes_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Sanctifier: Static analysis for Soroban smart contracts.

    Finds panics and unchecked unwraps that can abort a contract call, and
    persisted contract types that may not fit in a single ledger entry.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register all subcommands
cli.add_command(scan_command)
cli.add_command(sizes_command)
