"""Plain-text table rendering for list commands."""

from __future__ import annotations

from typing import Sequence

_COLUMN_GAP = "  "


class TableOutput:
    """Left-aligned columns padded to the widest cell in each column."""

    def __init__(self, rows: Sequence[Sequence[str]]) -> None:
        self.rows = [list(row) for row in rows]

    def format(self) -> str:
        if not self.rows:
            return ""
        columns = max(len(row) for row in self.rows)
        widths = [0] * columns
        for row in self.rows:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], len(cell))
        lines = []
        for row in self.rows:
            cells = [cell.ljust(widths[index]) for index, cell in enumerate(row)]
            lines.append(_COLUMN_GAP.join(cells).rstrip())
        return "\n".join(lines)
