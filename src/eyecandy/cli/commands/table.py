# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Render CSV or JSON data files as tables.

This module provides the ``eyecandy table`` command.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

import click
from rich.console import Console

from eyecandy.config.columns import ColumnConfigError, load_columns
from eyecandy.logging import logger
from eyecandy.table_renderer import (
    TABLE_STYLE_DEFAULT,
    TABLE_STYLE_MARKDOWN,
    TableAlignment,
    TableColumn,
    TableRenderer,
)

STYLES = {
    "default": TABLE_STYLE_DEFAULT,
    "markdown": TABLE_STYLE_MARKDOWN,
}


def load_rows(path: Path) -> tuple[list[str], list[dict[str, str]]]:
    """Read rows from a CSV file, or a JSON file holding a list of objects.

    Returns:
        tuple[list[str], list[dict[str, str]]]: Keys in first-seen order and
        the rows with every value converted to text
    """
    if path.suffix.lower() == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            msg = f"Expected a JSON list of objects in {path}"
            raise ValueError(msg)
        records: list[dict[str, Any]] = data
    else:
        with open(path, encoding="utf-8", newline="") as f:
            records = list(csv.DictReader(f))

    keys: dict[str, None] = {}
    rows = []
    for record in records:
        row = {}
        for key, value in record.items():
            keys.setdefault(str(key), None)
            row[str(key)] = "" if value is None else str(value)
        rows.append(row)
    return list(keys), rows


def _parse_assignments(values: tuple[str, ...], option: str) -> dict[str, str]:
    """Split repeated KEY=VALUE options into a dict."""
    parsed = {}
    for value in values:
        key, sep, rest = value.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got '{value}'"
            raise click.BadParameter(msg, param_hint=option)
        parsed[key] = rest
    return parsed


def _check_keys(keys: set[str], columns: list[TableColumn], option: str) -> None:
    known = {column.key for column in columns}
    unknown = sorted(keys - known)
    if unknown:
        msg = f"unknown column key(s): {', '.join(unknown)}"
        raise click.BadParameter(msg, param_hint=option)


def apply_overrides(  # pylint: disable=too-many-arguments
    columns: list[TableColumn],
    *,
    hide: tuple[str, ...] = (),
    max_widths: tuple[str, ...] = (),
    alignments: tuple[str, ...] = (),
    empty_string: str | None = None,
) -> list[TableColumn]:
    """Apply command-line column overrides on top of the base columns."""
    widths = _parse_assignments(max_widths, "--max-width")
    aligns = _parse_assignments(alignments, "--align")
    _check_keys(set(hide), columns, "--hide")
    _check_keys(set(widths), columns, "--max-width")
    _check_keys(set(aligns), columns, "--align")

    result = []
    for column in columns:
        if column.key in hide:
            column = column.with_active(False)
        if column.key in widths:
            try:
                column = column.with_max_width(int(widths[column.key]))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--max-width") from e
        if column.key in aligns:
            try:
                column = column.with_alignment(TableAlignment(aligns[column.key].lower()))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--align") from e
        if empty_string is not None:
            column = column.with_empty_string(empty_string)
        result.append(column)
    return result


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--columns",
    "columns_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with column definitions",
)
@click.option(
    "--style",
    "style_name",
    type=click.Choice(sorted(STYLES)),
    default="default",
    show_default=True,
    help="Table style",
)
@click.option("--hide", multiple=True, help="Hide a column (KEY)")
@click.option("--max-width", "max_widths", multiple=True, help="Truncate a column (KEY=WIDTH)")
@click.option(
    "--align", "alignments", multiple=True, help="Align a column (KEY=left|center|right)"
)
@click.option("--empty", "empty_string", help="Substitute for empty values in every column")
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write CSV to this file instead of printing",
)
def table(  # pylint: disable=too-many-arguments
    file: Path,
    *,
    columns_file: Path | None,
    style_name: str,
    hide: tuple[str, ...],
    max_widths: tuple[str, ...],
    alignments: tuple[str, ...],
    empty_string: str | None,
    export_path: Path | None,
) -> None:
    """Render a CSV or JSON file as a table."""
    try:
        keys, rows = load_rows(file)
        columns = (
            load_columns(columns_file)
            if columns_file
            else [TableColumn(key, key) for key in keys]
        )
    except (OSError, ValueError, ColumnConfigError) as e:
        raise click.ClickException(str(e)) from e

    columns = apply_overrides(
        columns,
        hide=hide,
        max_widths=max_widths,
        alignments=alignments,
        empty_string=empty_string,
    )
    renderer = TableRenderer(columns, rows, STYLES[style_name])

    if export_path is None:
        renderer.print(Console())
        return

    try:
        with open(export_path, "w", encoding="utf-8", newline="") as f:
            renderer.export_csv(f)
    except OSError as e:
        raise click.ClickException(f"Failed to write {export_path}: {e}") from e
    logger.info("✅ Wrote %d rows to %s", len(rows), export_path)
