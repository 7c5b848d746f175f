"""Top level package for the Cassandra lab.

This package backs a set of guided exercises against a live Cassandra
cluster.  Learners run queries and inspect the results as printed
tables.

Key concepts:

* **Model classes** describe query results: rows, column descriptors
  and value kinds.  See :mod:`cqlab.model`.
* **Renderers** turn rows into text (bordered ASCII, CSV, HTML).
  See :mod:`cqlab.renderers`.
* **Registry** enables decorator-based renderer registration.
  See :mod:`cqlab.registry`.
* **Session** connects to the cluster and adapts driver result sets.
  See :mod:`cqlab.session`.
* **Exercises** run a lab and report checks.  See :mod:`cqlab.exercises`
  and :mod:`cqlab.basic_operations`.
"""

from .model import ColumnDescriptor, Row, SchemaMismatchError, ValueKind
from .registry import Registry
from .renderers import (
    AsciiTableRenderer,
    CsvTableRenderer,
    HtmlTableRenderer,
    TableRenderer,
    renderer_registry,
)
from .output import display, display_rows

__all__ = [
    "ColumnDescriptor",
    "Row",
    "SchemaMismatchError",
    "ValueKind",
    "Registry",
    "TableRenderer",
    "AsciiTableRenderer",
    "CsvTableRenderer",
    "HtmlTableRenderer",
    "renderer_registry",
    "display",
    "display_rows",
]
