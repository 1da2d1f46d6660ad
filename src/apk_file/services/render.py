"""Plain-text table output for search results."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO

from ..domain.models import HEADERS, FileRecord

MIN_WIDTH = 20
PADDING = 3


def _column_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    # The last column is never padded
    widths = []
    for column in range(len(HEADERS) - 1):
        widest = max(len(row[column]) for row in rows)
        widths.append(max(MIN_WIDTH, widest + PADDING))
    return widths


def format_table(records: Iterable[FileRecord]) -> str:
    """
    Format records as aligned columns under a header line.

    Each column but the last is as wide as its widest cell plus three spaces,
    and never narrower than twenty characters.
    """
    rows: list[Sequence[str]] = [HEADERS]
    rows.extend(record.as_row() for record in records)
    widths = _column_widths(rows)

    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        cells.append(row[-1])
        lines.append("".join(cells))
    return "\n".join(lines) + "\n"


def render_table(records: Iterable[FileRecord], stream: TextIO | None = None) -> None:
    """Write the formatted table to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    stream.write(format_table(records))
    stream.flush()
