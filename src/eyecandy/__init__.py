# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Eyecandy terminal widgets.

Rich-based presentation helpers for command-line programs: a spinner that
tracks a single background task and a table renderer with per-column
styling, truncation and CSV export.
"""

from eyecandy.spinner import (
    SPINNER_STYLE_DEFAULT,
    SpinnerModel,
    SpinnerStyle,
    run,
)
from eyecandy.table_renderer import (
    HEADER_ROW,
    TABLE_STYLE_DEFAULT,
    TABLE_STYLE_MARKDOWN,
    TableAlignment,
    TableColumn,
    TableRenderer,
    TableStyle,
)

__all__ = [
    "HEADER_ROW",
    "SPINNER_STYLE_DEFAULT",
    "TABLE_STYLE_DEFAULT",
    "TABLE_STYLE_MARKDOWN",
    "SpinnerModel",
    "SpinnerStyle",
    "TableAlignment",
    "TableColumn",
    "TableRenderer",
    "TableStyle",
    "run",
]
