"""CSV table renderer.

Renders a result set as comma-separated values: one header record with
the column names, then one record per row.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Optional, Sequence

from ..model import ColumnDescriptor, Row
from .base import TableRenderer, renderer_registry


@renderer_registry.register("csv")
class CsvTableRenderer(TableRenderer):
    """Render tables in CSV format.

    Example output::

        id,name,age
        123,jon,32
        456,mary,25
    """

    def __init__(self, delimiter: str = ",") -> None:
        """Initialize the CSV renderer.

        Args:
            delimiter: Field separator passed to :func:`csv.writer`.
        """
        self.delimiter = delimiter

    def render(
        self,
        rows: Iterable[Row],
        columns: Optional[Sequence[ColumnDescriptor]] = None,
    ) -> str:
        rows_list = list(rows)
        cols = self.resolve_columns(rows_list, columns)
        if not cols:
            return ""

        output = io.StringIO()
        writer = csv.writer(output, delimiter=self.delimiter)
        writer.writerow([col.name for col in cols])
        writer.writerows(self.text_grid(rows_list, cols))

        return output.getvalue().rstrip("\r\n")
