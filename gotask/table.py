"""Plain-text table rendering with box-drawing borders."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

from wcwidth import wcwidth

_ANSI = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

_BORDER_TOP = ("╔", "═", "╤", "╗")
_BORDER_BOTTOM = ("╚", "═", "╧", "╝")
_DIVIDER = ("╟", "━", "┼", "╢")
_EDGE = "║"
_SEPARATOR = "│"


class Align(Enum):
    """Horizontal alignment of a cell's text."""

    DEFAULT = "default"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass
class Cell:
    """One table cell, optionally spanning several columns."""

    text: str = ""
    align: Align = Align.DEFAULT
    span: int = 1

    @property
    def columns(self) -> int:
        return max(self.span, 1)


def visible_width(text: str) -> int:
    """Return the terminal width of *text*, ignoring ANSI escape sequences."""
    plain = _ANSI.sub("", text)
    return sum(max(wcwidth(ch), 0) for ch in plain)


def _pad(cell: Cell, width: int) -> str:
    gap = max(width - visible_width(cell.text), 0)
    if cell.align is Align.RIGHT:
        return " " * gap + cell.text
    if cell.align is Align.CENTER:
        left = gap // 2
        return " " * left + cell.text + " " * (gap - left)
    return cell.text + " " * gap


def _span_width(widths: Sequence[int], start: int, span: int) -> int:
    return sum(widths[start:start + span]) + 3 * (span - 1)


def _column_widths(rows: list[list[Cell]], columns: int) -> list[int]:
    widths = [0] * columns
    for row in rows:
        col = 0
        for cell in row:
            if cell.columns == 1:
                widths[col] = max(widths[col], visible_width(cell.text))
            col += cell.columns
    for row in rows:
        col = 0
        for cell in row:
            span = cell.columns
            if span > 1:
                need = visible_width(cell.text) - _span_width(widths, col, span)
                if need > 0:
                    base, extra = divmod(need, span)
                    for offset in range(span):
                        widths[col + offset] += base + (1 if offset >= span - extra else 0)
            col += span
    return widths


def _row_line(row: list[Cell], widths: Sequence[int]) -> str:
    parts = []
    col = 0
    for cell in row:
        parts.append(_pad(cell, _span_width(widths, col, cell.columns)))
        col += cell.columns
    return f"{_EDGE} " + f" {_SEPARATOR} ".join(parts) + f" {_EDGE}"


def _rule(widths: Sequence[int], style: tuple[str, str, str, str]) -> str:
    left, fill, cross, right = style
    return left + cross.join(fill * (w + 2) for w in widths) + right


def render_table(
    header: Sequence[Cell] | None = None,
    body: Iterable[Sequence[Cell]] = (),
    footer: Sequence[Cell] | None = None,
) -> str:
    """Render the header, body rows and footer as a bordered table."""
    header_row = list(header) if header else None
    body_rows = [list(row) for row in body]
    footer_row = list(footer) if footer else None

    rows: list[list[Cell]] = []
    if header_row:
        rows.append(header_row)
    rows.extend(body_rows)
    if footer_row:
        rows.append(footer_row)
    if not rows:
        return ""

    columns = max(sum(cell.columns for cell in row) for row in rows)
    for row in rows:
        row.extend(Cell() for _ in range(columns - sum(c.columns for c in row)))
    widths = _column_widths(rows, columns)

    lines = [_rule(widths, _BORDER_TOP)]
    if header_row:
        lines.append(_row_line(header_row, widths))
        if body_rows or footer_row:
            lines.append(_rule(widths, _DIVIDER))
    lines.extend(_row_line(row, widths) for row in body_rows)
    if footer_row:
        if body_rows:
            lines.append(_rule(widths, _DIVIDER))
        lines.append(_row_line(footer_row, widths))
    lines.append(_rule(widths, _BORDER_BOTTOM))
    return "\n".join(lines)