"""Print rendered results.

Renderers only build strings; this module is where they are written
out.  Tests call the renderers directly and never need to capture
stdout.
"""

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional, Sequence, TextIO

from .model import ColumnDescriptor, Row
from .renderers import TableRenderer, renderer_registry
from .session import rows_from_result

DEFAULT_FORMAT = "ascii"


def display_rows(
    rows: Iterable[Row],
    columns: Optional[Sequence[ColumnDescriptor]] = None,
    renderer: Optional[TableRenderer] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Render ``rows`` and print the table followed by a newline."""
    renderer = renderer or renderer_registry.create(DEFAULT_FORMAT)
    print(renderer.render(rows, columns), file=out or sys.stdout)


def display(
    result: Any,
    renderer: Optional[TableRenderer] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Materialize a driver result set and print it."""
    display_rows(rows_from_result(result), renderer=renderer, out=out)
