"""Bordered ASCII table renderer.

Produces the fixed-width tables printed by the labs::

    +---+----+---+
    |id |name|age|
    +---+----+---+
    |123|jon | 32|
    |456|mary| 25|
    +---+----+---+

Each column is as wide as its widest cell or header.  Numeric columns
are right-aligned, everything else is left-aligned.  Headers are always
left-aligned.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..model import ColumnDescriptor, Row
from .base import TableRenderer, renderer_registry

#: Output for an empty result: without a row there is no schema to draw.
PLACEHOLDER = "Nothing"


def column_widths(columns: Sequence[ColumnDescriptor], grid: Sequence[Sequence[str]]) -> List[int]:
    """Return the width of each column, seeded by the header lengths."""
    widths = [len(col.name) for col in columns]
    for cells in grid:
        widths = [max(width, len(text)) for width, text in zip(widths, cells)]
    return widths


@renderer_registry.register("ascii")
class AsciiTableRenderer(TableRenderer):
    """Render rows as a bordered table of ``+``, ``-`` and ``|``."""

    placeholder = PLACEHOLDER

    def render(
        self,
        rows: Iterable[Row],
        columns: Optional[Sequence[ColumnDescriptor]] = None,
    ) -> str:
        rows_list = list(rows)
        if not rows_list:
            return self.placeholder

        cols = self.resolve_columns(rows_list, columns)
        grid = self.text_grid(rows_list, cols)
        # All widths must be known before the first line is drawn.
        widths = column_widths(cols, grid)

        sep = "+" + "+".join("-" * w for w in widths) + "+"
        header = "|" + "|".join(col.name.ljust(w) for col, w in zip(cols, widths)) + "|"

        lines = [sep, header, sep]
        for cells in grid:
            fields = [
                text.rjust(w) if col.is_numeric else text.ljust(w)
                for col, text, w in zip(cols, cells, widths)
            ]
            lines.append("|" + "|".join(fields) + "|")
        lines.append(sep)
        return "\n".join(lines)
