# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT

"""Table renderer for eyecandy.

Columns are declared once and carry their own formatting rules: a value
transform, a substitute for empty values, a truncation width, an alignment
and a style selector. ``TableRenderer`` runs every cell through the same
pipeline for the grid and for CSV export, so both outputs always agree.

Example::

    def bold_ok(style: Style, value: str) -> Style:
        return style + Style(bold=True) if value == "OK" else style

    columns = [
        TableColumn("id", "ID"),
        TableColumn("status", "Status").with_style_func(bold_ok),
    ]
    TableRenderer(columns).with_rows(rows).print()
"""

from __future__ import annotations

import csv
import dataclasses
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, TextIO

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segment
from rich.style import Style
from rich.table import Table
from rich.text import Text

from eyecandy.logging import logger

if TYPE_CHECKING:
    from rich.console import ConsoleOptions, RenderableType, RenderResult

HEADER_ROW = -1
ELLIPSIS = "..."

TableRow = Mapping[str, str]
ValueFunc = Callable[[str], str]
StyleFunc = Callable[[Style, str], Style]


class TableAlignment(str, Enum):
    """Horizontal alignment of a TableColumn, named after Rich justify methods."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def _identity(value: str) -> str:
    return value


def _base_style(style: Style, _value: str) -> Style:
    return style


def _check_max_width(width: int) -> None:
    """Reject widths too narrow to hold the ellipsis marker."""
    if 0 < width <= len(ELLIPSIS):
        msg = f"max_width must exceed {len(ELLIPSIS)} or be <= 0 (unbounded), got {width}"
        raise ValueError(msg)


@dataclass(frozen=True)
class TableColumn:
    """A column of a TableRenderer along with its formatting rules.

    Columns are immutable; every ``with_*`` method returns a modified copy.

    Args:
        key (str): Row key the column reads its values from
        title (str): Header text
        active (bool): Whether the column is rendered at all
        max_width (int): Truncation width, non-positive for unbounded
        alignment (TableAlignment): Horizontal alignment of header and cells
        empty_string (str): Replacement for empty values
        value_func (ValueFunc): Transform applied to every raw value
        style_func (StyleFunc): Picks a cell style from the row style and the
            final cell text

    Example:
        TableColumn("id", "ID").with_max_width(30).with_empty_string("-")
    """

    key: str
    title: str
    active: bool = True
    max_width: int = -1
    alignment: TableAlignment = TableAlignment.LEFT
    empty_string: str = ""
    value_func: ValueFunc = field(default=_identity, compare=False)
    style_func: StyleFunc = field(default=_base_style, compare=False)

    def __post_init__(self) -> None:
        _check_max_width(self.max_width)

    def with_max_width(self, width: int) -> TableColumn:
        """Truncate values longer than ``width`` characters."""
        return dataclasses.replace(self, max_width=width)

    def with_alignment(self, alignment: TableAlignment) -> TableColumn:
        """Set the alignment of the column."""
        return dataclasses.replace(self, alignment=alignment)

    def with_active(self, active: bool) -> TableColumn:  # noqa: FBT001
        """Show or hide the column."""
        return dataclasses.replace(self, active=active)

    def with_empty_string(self, empty_string: str) -> TableColumn:
        """Replace empty values, after ``value_func`` has been applied."""
        return dataclasses.replace(self, empty_string=empty_string)

    def with_value_func(self, value_func: ValueFunc) -> TableColumn:
        """Transform every value of the column before it is output."""
        return dataclasses.replace(self, value_func=value_func)

    def with_style_func(self, style_func: StyleFunc) -> TableColumn:
        """Choose the style of each body cell from its final text."""
        return dataclasses.replace(self, style_func=style_func)

    def format_value(self, raw: str) -> str:
        """Run a raw value through transform, substitution and truncation."""
        value = self.value_func(raw)
        if value == "":
            value = self.empty_string
        if 0 < self.max_width < len(value):
            value = value[: self.max_width - len(ELLIPSIS)] + ELLIPSIS
        return value


@dataclass(frozen=True)
class TableStyle:  # pylint: disable=too-many-instance-attributes
    """Visual configuration of a TableRenderer.

    ``border`` supplies the glyphs; the six toggles decide which of them are
    drawn. A ``None`` border hides every line whatever the toggles say.
    """

    header_style: Style = field(default_factory=Style.null)
    row_style: Style = field(default_factory=Style.null)
    border: box.Box | None = None
    border_header: bool = False
    border_column: bool = False
    border_top: bool = False
    border_left: bool = False
    border_bottom: bool = False
    border_right: bool = False
    padding: tuple[int, int] = (0, 1)

    @property
    def edges(self) -> tuple[bool, bool, bool, bool]:
        """Outer edge toggles as (top, left, bottom, right)."""
        return (self.border_top, self.border_left, self.border_bottom, self.border_right)


# Default style: bold ANSI colour 4 headings, no borders.
TABLE_STYLE_DEFAULT = TableStyle(header_style=Style(color="color(4)", bold=True))

TABLE_STYLE_MARKDOWN = TableStyle(
    header_style=Style(bold=True),
    border=box.MARKDOWN,
    border_header=True,
    border_column=True,
    border_left=True,
    border_right=True,
)


def _derive_box(src: box.Box, style: TableStyle) -> box.Box:
    """Build the Rich box drawn for ``style``.

    The header is rendered as an ordinary first row, so every body line uses
    the ``mid`` glyphs and the header separator comes from the ``row`` line.
    Outer edges are removed afterwards by ``_EdgeTrim``.
    """

    def divider(char: str, horizontal: str) -> str:
        return char if style.border_column else horizontal

    body = f"{src.mid_left} {divider(src.mid_vertical, ' ')}{src.mid_right}"
    separator = (
        f"{src.head_row_left}{src.head_row_horizontal}"
        f"{divider(src.head_row_cross, src.head_row_horizontal)}{src.head_row_right}"
    )
    lines = [
        f"{src.top_left}{src.top}{divider(src.top_divider, src.top)}{src.top_right}",
        body,
        separator,
        body,
        separator,
        separator,
        body,
        f"{src.bottom_left}{src.bottom}{divider(src.bottom_divider, src.bottom)}"
        f"{src.bottom_right}",
    ]
    return box.Box("\n".join(lines) + "\n", ascii=src.ascii)


class _EdgeTrim:
    """Renderable that drops the outer edges a TableStyle turns off."""

    def __init__(self, table: Table, style: TableStyle) -> None:
        self.table = table
        self.style = style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        lines = console.render_lines(self.table, options, pad=False)
        if not self.style.border_top:
            lines = lines[1:]
        if not self.style.border_bottom:
            lines = lines[:-1]

        new_line = Segment.line()
        start = 0 if self.style.border_left else 1
        for line in lines:
            length = Segment.get_line_length(line)
            end = length if self.style.border_right else length - 1
            yield from list(Segment.divide(line, [start, end]))[1]
            yield new_line

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        measurement = Measurement.get(console, options, self.table)
        trimmed = int(not self.style.border_left) + int(not self.style.border_right)
        return Measurement(measurement.minimum - trimmed, measurement.maximum - trimmed)


class TableRenderer:
    """
    Declarative table of rows rendered through per-column formatting rules.

    Args:
        columns (Sequence[TableColumn]): Column definitions in display order
        rows (Sequence[TableRow]): Rows as mappings of column key to value
        style (TableStyle): Visual configuration

    Rendering never changes the renderer; ``with_rows`` and ``with_style``
    return new instances.
    """

    def __init__(
        self,
        columns: Sequence[TableColumn],
        rows: Sequence[TableRow] = (),
        style: TableStyle = TABLE_STYLE_DEFAULT,
    ) -> None:
        self.columns: tuple[TableColumn, ...] = tuple(columns)
        self.rows: tuple[dict[str, str], ...] = tuple(dict(row) for row in rows)
        self.style = style

    def with_rows(self, rows: Sequence[TableRow]) -> TableRenderer:
        """Return a copy holding ``rows``."""
        return TableRenderer(self.columns, rows, self.style)

    def with_style(self, style: TableStyle) -> TableRenderer:
        """Return a copy rendered with ``style``."""
        return TableRenderer(self.columns, self.rows, style)

    @cached_property
    def _offsets(self) -> list[int]:
        """Number of hidden columns preceding each rendered column."""
        offsets = []
        hidden = 0
        for column in self.columns:
            if not column.active:
                hidden += 1
                continue
            offsets.append(hidden)
        return offsets

    @cached_property
    def _matrix(self) -> list[list[str]]:
        return [
            [
                column.format_value(row.get(column.key, ""))
                for column in self.columns
                if column.active
            ]
            for row in self.rows
        ]

    def _column_at(self, col: int) -> TableColumn:
        return self.columns[col + self._offsets[col]]

    def headers(self) -> list[str]:
        """Titles of the active columns in declared order."""
        return [column.title for column in self.columns if column.active]

    def row_matrix(self) -> list[list[str]]:
        """Formatted cell text for every row, active columns only."""
        return [list(row) for row in self._matrix]

    def cell_alignment(self, col: int) -> TableAlignment:
        """Alignment of the rendered column at position ``col``."""
        return self._column_at(col).alignment

    def cell_style(self, row: int, col: int) -> Style:
        """Style of the cell at rendered position (``row``, ``col``).

        ``row`` is ``HEADER_ROW`` for the header, otherwise a body row index.
        """
        if row == HEADER_ROW:
            return self.style.header_style
        column = self._column_at(col)
        return column.style_func(self.style.row_style, self._matrix[row][col])

    def _cell(self, row: int, col: int, value: str) -> Text:
        return Text(value, style=self.cell_style(row, col), justify=self.cell_alignment(col).value)

    def build(self) -> RenderableType:
        """Assemble the Rich renderable for the current state."""
        style = self.style
        show_edge = style.border is not None and any(style.edges)
        table = Table(
            box=_derive_box(style.border, style) if style.border is not None else None,
            show_header=False,
            show_edge=show_edge,
            padding=style.padding,
        )
        for col in range(len(self._offsets)):
            table.add_column(justify=self.cell_alignment(col).value, no_wrap=True)

        table.add_row(
            *(self._cell(HEADER_ROW, col, title) for col, title in enumerate(self.headers())),
            end_section=style.border_header,
        )
        for row, values in enumerate(self._matrix):
            table.add_row(*(self._cell(row, col, value) for col, value in enumerate(values)))

        if show_edge and not all(style.edges):
            return _EdgeTrim(table, style)
        return table

    def __rich__(self) -> RenderableType:
        return self.build()

    def render(self, console: Console | None = None) -> str:
        """Render the table to a string, without the trailing newline."""
        console = console or Console()
        with console.capture() as capture:
            console.print(self.build())
        return capture.get().rstrip("\n")

    def print(self, console: Console | None = None) -> None:
        """Print the table to ``console`` (stdout by default)."""
        (console or Console()).print(self.build())

    def export_csv(self, fp: TextIO) -> None:
        """Write the header and formatted rows as CSV.

        Open files with ``newline=""``. Write errors propagate unchanged.

        Example:
            with open("table.csv", "w", newline="", encoding="utf-8") as fp:
                renderer.export_csv(fp)
        """
        writer = csv.writer(fp, lineterminator="\n")
        writer.writerow(self.headers())
        writer.writerows(self._matrix)
        logger.debug("Exported %d rows x %d columns as CSV", len(self.rows), len(self._offsets))
