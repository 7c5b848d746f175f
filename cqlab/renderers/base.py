"""Base renderer class and registry.

This module defines the abstract TableRenderer interface and the
renderer_registry for plugin-style registration of concrete
implementations.  Column resolution and the per-row schema check live
here so every output format treats its input the same way.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from ..model import ColumnDescriptor, Row, SchemaMismatchError
from ..registry import Registry

# Registry for renderer implementations
renderer_registry = Registry("renderer")


class TableRenderer(ABC):
    """Abstract base class for rendering a result set as text."""

    @abstractmethod
    def render(
        self,
        rows: Iterable[Row],
        columns: Optional[Sequence[ColumnDescriptor]] = None,
    ) -> str:
        """Render ``rows`` as a table.

        Args:
            rows: The result rows.  All rows must share one schema.
            columns: Explicit column order.  Defaults to the columns of
                the first row.

        Returns:
            A string containing the formatted table.
        """
        raise NotImplementedError

    @staticmethod
    def resolve_columns(
        rows: Sequence[Row],
        columns: Optional[Sequence[ColumnDescriptor]] = None,
    ) -> List[ColumnDescriptor]:
        """Return the column list used for a render call."""
        if columns is not None:
            return list(columns)
        if not rows:
            return []
        return list(rows[0].columns)

    @staticmethod
    def text_grid(rows: Sequence[Row], columns: Sequence[ColumnDescriptor]) -> List[List[str]]:
        """Return the display text of every cell, row by row.

        Raises:
            SchemaMismatchError: If a row lacks one of ``columns``.
        """
        grid: List[List[str]] = []
        for index, row in enumerate(rows):
            cells = []
            for col in columns:
                if col.name not in row:
                    raise SchemaMismatchError(col.name, index)
                cells.append(row.text(col.name))
            grid.append(cells)
        return grid
