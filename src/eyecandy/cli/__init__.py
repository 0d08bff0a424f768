# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Command-line interface for eyecandy."""

from __future__ import annotations

import rich_click as click

from eyecandy.__about__ import __version__
from eyecandy.cli.commands import spin, table
from eyecandy.logging import init_cli_logging, logger


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(version=__version__, prog_name="eyecandy")
def eyecandy(*, verbose: bool) -> None:
    """Eyecandy - spinners and tables for the terminal."""
    init_cli_logging(verbose=verbose)
    logger.debug("eyecandy %s", __version__)


# Register subcommands
eyecandy.add_command(table.table)
eyecandy.add_command(spin.spin)
