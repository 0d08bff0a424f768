# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Configuration helpers for eyecandy."""

from eyecandy.config.columns import (
    ColumnConfigError,
    ColumnConfigValidationError,
    load_columns,
    parse_columns,
)

__all__ = [
    "ColumnConfigError",
    "ColumnConfigValidationError",
    "load_columns",
    "parse_columns",
]
