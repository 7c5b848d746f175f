"""Renderer implementations for query results.

This package contains the available output formats:
- ascii: bordered fixed-width tables (the default)
- csv: comma-separated values
- html: an HTML table rendered through Jinja2

All renderers are automatically registered via decorators.
"""

from .base import TableRenderer, renderer_registry
from .ascii import AsciiTableRenderer
from .csv import CsvTableRenderer
from .html import HtmlTableRenderer

__all__ = [
    "TableRenderer",
    "renderer_registry",
    "AsciiTableRenderer",
    "CsvTableRenderer",
    "HtmlTableRenderer",
]
