"""Table widget: columnar data with headers, alignment, and box borders."""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from ..layout.columns import ColumnFit, allocate_column_widths, natural_widths
from ..text.ansi import style, visible_length
from ..text.metrics import center, pad_left, pad_right
from ..text.truncate import TruncateMode, truncate
from .glyphs import BorderStyle, BoxGlyphs, box_glyphs


class Alignment(str, Enum):
    """Horizontal alignment of cell content."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


_ALIGNERS = {
    Alignment.LEFT: pad_right,
    Alignment.CENTER: center,
    Alignment.RIGHT: pad_left,
}

_BORDERLESS_SEPARATOR = "  "


@dataclass(frozen=True)
class TableColumn:
    """
    Column definition for a :class:`Table`.

    ``min_width`` defaults to 4 when unset so an ellipsis still fits after
    shrinking; ``max_width`` caps the natural width and forces truncation of
    longer cells. ``header_color`` is an SGR code wrapped around the header.
    """

    header: str = ""
    alignment: Alignment = Alignment.LEFT
    min_width: Optional[int] = None
    max_width: Optional[int] = None
    header_color: Optional[str] = None
    truncate_mode: TruncateMode = TruncateMode.END

    @property
    def fit(self) -> ColumnFit:
        return ColumnFit(min_width=self.min_width, max_width=self.max_width)


def _align(text: str, width: int, alignment: Alignment) -> str:
    return _ALIGNERS.get(alignment, pad_right)(text, width)


@dataclass(frozen=True)
class Table:
    """
    Formatted columnar data.

    Rows may contain escape sequences. Missing cells render empty and extra
    cells are ignored. With ``shrink`` (the default) columns give up width to
    fit the terminal; with ``expand`` a bordered table grows to fill it.
    """

    columns: Tuple[TableColumn, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = ()
    border: BorderStyle = BorderStyle.SQUARE
    border_color: Optional[str] = None
    show_headers: bool = True
    show_row_separators: bool = False
    expand: bool = False
    shrink: bool = True

    @property
    def bordered(self) -> bool:
        return self.border is not BorderStyle.NONE

    def column_widths(self, terminal_width: int = 80) -> List[int]:
        """Allocate content widths for every column at ``terminal_width``."""

        fits = [column.fit for column in self.columns]
        natural = natural_widths(
            [column.header for column in self.columns], self.rows, fits
        )
        return allocate_column_widths(
            natural,
            terminal_width,
            fits=fits,
            bordered=self.bordered,
            expand=self.expand,
            shrink=self.shrink,
        )

    def render(self, terminal_width: int = 80) -> List[str]:
        """
        Render the table into output lines.

        Parameters:
            terminal_width (int): Width to fit against when shrinking or expanding.

        Returns:
            List[str]: One string per output line; empty when the table has no columns.
        """
        if not self.columns:
            return []
        widths = self.column_widths(terminal_width)
        if not self.bordered:
            return self._render_borderless(widths)
        return self._render_bordered(widths, box_glyphs(self.border))

    # ------------------------------------------------------------------
    # Row rendering
    # ------------------------------------------------------------------

    def _headers(self) -> Tuple[str, ...]:
        return tuple(column.header for column in self.columns)

    def _format_cell(self, value: Optional[str], width: int, index: int, is_header: bool) -> str:
        column = self.columns[index]
        text = value or ""
        if is_header and column.header_color:
            text = style(text, column.header_color)
        if visible_length(text) > width:
            text = truncate(text, width, column.truncate_mode)
        return _align(text, width, column.alignment)

    def _cells(self, row: Sequence[Optional[str]], widths: Sequence[int], is_header: bool) -> List[str]:
        return [
            self._format_cell(row[index] if index < len(row) else "", width, index, is_header)
            for index, width in enumerate(widths)
        ]

    def _render_borderless(self, widths: Sequence[int]) -> List[str]:
        lines: List[str] = []
        if self.show_headers:
            lines.append(_BORDERLESS_SEPARATOR.join(self._cells(self._headers(), widths, True)))
        for row in self.rows:
            lines.append(_BORDERLESS_SEPARATOR.join(self._cells(row, widths, False)))
        return lines

    def _render_bordered(self, widths: Sequence[int], glyphs: BoxGlyphs) -> List[str]:
        separator = self._horizontal(widths, glyphs, glyphs.left_t, glyphs.right_t, glyphs.cross)
        lines = [self._horizontal(widths, glyphs, glyphs.top_left, glyphs.top_right, glyphs.top_t)]
        if self.show_headers:
            lines.append(self._cell_row(self._headers(), widths, glyphs, True))
            lines.append(separator)
        for index, row in enumerate(self.rows):
            lines.append(self._cell_row(row, widths, glyphs, False))
            if self.show_row_separators and index < len(self.rows) - 1:
                lines.append(separator)
        lines.append(
            self._horizontal(widths, glyphs, glyphs.bottom_left, glyphs.bottom_right, glyphs.bottom_t)
        )
        return lines

    def _horizontal(
        self, widths: Sequence[int], glyphs: BoxGlyphs, left: str, right: str, junction: str
    ) -> str:
        body = junction.join(glyphs.horizontal * (width + 2) for width in widths)
        return style(f"{left}{body}{right}", self.border_color)

    def _cell_row(
        self, row: Sequence[Optional[str]], widths: Sequence[int], glyphs: BoxGlyphs, is_header: bool
    ) -> str:
        vertical = style(glyphs.vertical, self.border_color)
        cells = "".join(f" {cell} {vertical}" for cell in self._cells(row, widths, is_header))
        return f"{vertical}{cells}"


ColumnSpec = Union[str, TableColumn]


class TableBuilder:
    """
    Accumulate table configuration and produce an immutable :class:`Table`.

    Every setter returns the builder so calls can be chained; :meth:`build`
    snapshots the current state into a new table.
    """

    def __init__(self) -> None:
        self._columns: List[TableColumn] = []
        self._rows: List[Tuple[str, ...]] = []
        self._options = Table()

    def add_column(
        self,
        column: ColumnSpec,
        alignment: Alignment = Alignment.LEFT,
        *,
        min_width: Optional[int] = None,
        max_width: Optional[int] = None,
        header_color: Optional[str] = None,
        truncate_mode: TruncateMode = TruncateMode.END,
    ) -> TableBuilder:
        if isinstance(column, TableColumn):
            self._columns.append(column)
            return self
        self._columns.append(
            TableColumn(
                header=column,
                alignment=Alignment(alignment),
                min_width=min_width,
                max_width=max_width,
                header_color=header_color or None,
                truncate_mode=TruncateMode(truncate_mode),
            )
        )
        return self

    def add_columns(self, *headers: str) -> TableBuilder:
        for header in headers:
            self._columns.append(TableColumn(header=header))
        return self

    def add_row(self, *cells: Optional[str]) -> TableBuilder:
        self._rows.append(tuple(cell or "" for cell in cells))
        return self

    def border(self, border: BorderStyle) -> TableBuilder:
        self._options = replace(self._options, border=BorderStyle(border))
        return self

    def border_color(self, color: Optional[str]) -> TableBuilder:
        self._options = replace(self._options, border_color=color or None)
        return self

    def hide_headers(self) -> TableBuilder:
        self._options = replace(self._options, show_headers=False)
        return self

    def show_row_separators(self, value: bool = True) -> TableBuilder:
        self._options = replace(self._options, show_row_separators=value)
        return self

    def expand(self, value: bool = True) -> TableBuilder:
        self._options = replace(self._options, expand=value)
        return self

    def shrink(self, value: bool = True) -> TableBuilder:
        self._options = replace(self._options, shrink=value)
        return self

    def build(self) -> Table:
        return replace(self._options, columns=tuple(self._columns), rows=tuple(self._rows))


__all__ = ["Alignment", "Table", "TableBuilder", "TableColumn"]
