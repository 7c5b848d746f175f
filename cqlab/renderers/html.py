"""HTML table renderer.

Renders a result set as a standalone HTML ``<table>`` through a Jinja2
template.  Numeric cells carry the ``num`` class so the stylesheet can
right-align them like the ASCII renderer does.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..model import ColumnDescriptor, Row
from .base import TableRenderer, renderer_registry

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

EMPTY_HTML = '<p class="no-rows">Nothing</p>'


@renderer_registry.register("html")
class HtmlTableRenderer(TableRenderer):
    """Render rows as an HTML table with escaped cell text."""

    template_name = "table.html.jinja2"

    def __init__(self, title: Optional[str] = None) -> None:
        """Initialize renderer with Jinja2 environment.

        Args:
            title: Optional caption shown above the table.
        """
        self.title = title
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_DIR),
            autoescape=select_autoescape(["html", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        rows: Iterable[Row],
        columns: Optional[Sequence[ColumnDescriptor]] = None,
    ) -> str:
        rows_list = list(rows)
        if not rows_list:
            return EMPTY_HTML

        cols = self.resolve_columns(rows_list, columns)
        grid = self.text_grid(rows_list, cols)
        template = self._env.get_template(self.template_name)
        return template.render(
            title=self.title,
            columns=cols,
            rows=[list(zip(cols, cells)) for cells in grid],
        ).rstrip("\n")
