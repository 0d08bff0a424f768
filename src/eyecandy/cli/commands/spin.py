# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Run a command under a spinner.

This module provides the ``eyecandy spin`` command.
"""

from __future__ import annotations

import click
from rich.console import Console

from eyecandy.logging import logger
from eyecandy.spinner import SpinnerModel
from eyecandy.utils import proc

EXIT_INTERRUPTED = 130


@click.command(context_settings={"ignore_unknown_options": True})
@click.option("--title", "-t", help="Spinner title (defaults to the command line)")
@click.option(
    "--spinner",
    "spinner_name",
    default="line",
    show_default=True,
    help="Rich spinner animation, e.g. dots",
)
@click.option("--timeout", type=float, help="Seconds before the command is abandoned")
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_context
def spin(
    ctx: click.Context,
    command: tuple[str, ...],
    *,
    title: str | None,
    spinner_name: str,
    timeout: float | None,
) -> None:
    """Run COMMAND while showing a spinner.

    Separate the command from eyecandy options with --, for example:
    eyecandy spin -t "Syncing" -- rsync -a src/ dst/
    """
    cmd = list(command)

    def task() -> None:
        proc.run(cmd, timeout=timeout)

    try:
        model = SpinnerModel(title or " ".join(cmd), task, spinner=spinner_name, console=Console())
    except KeyError as e:
        msg = f"unknown spinner '{spinner_name}'"
        raise click.BadParameter(msg, param_hint="--spinner") from e

    err = model.spin()
    if err is not None:
        logger.debug("Command failed: %s", err)
        ctx.exit(1)
    if not model.done:
        logger.info("Interrupted; '%s' may still be running", model.title)
        ctx.exit(EXIT_INTERRUPTED)
