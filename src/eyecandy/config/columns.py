# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Declarative column definitions loaded from YAML.

A column file has a single top-level key, ``columns``, holding a list of
mappings::

    columns:
      - key: id
        title: ID
        alignment: right
      - key: status
        title: Status
        empty_string: "-"
        transform: upper
        styles:
          OK: bold green
          FAIL: red
      - key: notes
        max_width: 30
        active: false

Only ``key`` is required; ``title`` defaults to the key.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml
from rich.errors import StyleSyntaxError
from rich.style import Style

from eyecandy.logging import logger
from eyecandy.table_renderer import StyleFunc, TableAlignment, TableColumn

TRANSFORMS: dict[str, Callable[[str], str]] = {
    "upper": str.upper,
    "lower": str.lower,
    "strip": str.strip,
    "title": str.title,
}

_KNOWN_FIELDS = frozenset(
    {"key", "title", "active", "max_width", "alignment", "empty_string", "transform", "styles"}
)


class ColumnConfigError(Exception):
    """Base exception for column configuration errors."""


class ColumnConfigValidationError(ColumnConfigError):
    """Raised when a column configuration is structurally invalid."""


def load_columns(config_path: str | Path) -> list[TableColumn]:
    """
    Load column definitions from a YAML file.

    Args:
        config_path (str | Path): Path to the YAML file

    Returns:
        list[TableColumn]: Columns in declared order

    Raises:
        ColumnConfigError: If the file cannot be read or parsed
        ColumnConfigValidationError: If a column definition is invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        msg = f"Column file not found: {config_path}"
        raise ColumnConfigError(msg)

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        msg = f"Failed to parse column file {config_path}: {e}"
        raise ColumnConfigError(msg) from e

    columns = parse_columns(data)
    logger.debug("Loaded %d columns from %s", len(columns), config_path)
    return columns


def parse_columns(data: Any) -> list[TableColumn]:
    """Validate parsed YAML data and build the columns it describes."""
    if not isinstance(data, dict):
        msg = f"Column file must be a dictionary, got {type(data).__name__}"
        raise ColumnConfigValidationError(msg)

    if "columns" not in data:
        msg = "Column file must contain 'columns' key"
        raise ColumnConfigValidationError(msg)

    columns_data = data["columns"]
    if not isinstance(columns_data, list):
        msg = "'columns' must be a list"
        raise ColumnConfigValidationError(msg)

    columns: list[TableColumn] = []
    seen: set[str] = set()
    for i, column_data in enumerate(columns_data):
        try:
            column = _parse_column_data(column_data, i)
        except (TypeError, ValueError, StyleSyntaxError) as e:
            msg = f"Error in column {i}: {e}"
            raise ColumnConfigValidationError(msg) from e
        if column.key in seen:
            msg = f"Column {i}: duplicate key '{column.key}'"
            raise ColumnConfigValidationError(msg)
        seen.add(column.key)
        columns.append(column)
    return columns


def _parse_column_data(column_data: Any, index: int) -> TableColumn:
    """
    Parse a single column mapping.

    Args:
        column_data (Any): Column mapping from YAML
        index (int): Column index for error reporting

    Returns:
        TableColumn: Column built from the mapping
    """
    _validate_column_data_type(column_data, index)
    _validate_fields(column_data, index)

    key = column_data["key"]
    column = TableColumn(
        key=key,
        title=str(column_data.get("title", key)),
        active=bool(column_data.get("active", True)),
        max_width=int(column_data.get("max_width", -1)),
        alignment=TableAlignment(str(column_data.get("alignment", "left")).lower()),
        empty_string=str(column_data.get("empty_string", "")),
    )

    transform = column_data.get("transform")
    if transform is not None:
        column = column.with_value_func(_lookup_transform(transform, index))

    styles = column_data.get("styles")
    if styles is not None:
        column = column.with_style_func(_value_styles(styles, index))

    return column


def _validate_column_data_type(column_data: Any, index: int) -> None:
    """Validate that column data is a dictionary."""
    if not isinstance(column_data, dict):
        msg = f"Column {index} must be a dictionary"
        raise ColumnConfigValidationError(msg)


def _validate_fields(column_data: dict[str, Any], index: int) -> None:
    """Validate required and unknown fields."""
    if "key" not in column_data:
        msg = f"Column {index} missing required 'key' field"
        raise ColumnConfigValidationError(msg)

    if not isinstance(column_data["key"], str):
        msg = f"Column {index} 'key' must be a string"
        raise ColumnConfigValidationError(msg)

    unknown = sorted(set(column_data) - _KNOWN_FIELDS)
    if unknown:
        msg = f"Column {index} has unknown fields: {', '.join(unknown)}"
        raise ColumnConfigValidationError(msg)


def _lookup_transform(name: Any, index: int) -> Callable[[str], str]:
    try:
        return TRANSFORMS[str(name).lower()]
    except KeyError:
        choices = ", ".join(sorted(TRANSFORMS))
        msg = f"Column {index}: unknown transform '{name}' (expected one of: {choices})"
        raise ColumnConfigValidationError(msg) from None


def _value_styles(styles: Any, index: int) -> StyleFunc:
    """Build a style function layering a per-value style over the row style."""
    if not isinstance(styles, dict):
        msg = f"Column {index} 'styles' must be a mapping of value to style"
        raise ColumnConfigValidationError(msg)

    parsed = {str(value): Style.parse(str(definition)) for value, definition in styles.items()}

    def style_func(style: Style, value: str) -> Style:
        extra = parsed.get(value)
        return style + extra if extra is not None else style

    return style_func
