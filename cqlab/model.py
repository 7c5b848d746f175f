"""Data model for query results.

A result is a sequence of :class:`Row` objects.  Each row carries the
ordered :class:`ColumnDescriptor` list it was produced with, and each
descriptor records whether the column holds numbers (right-aligned when
rendered) or anything else (left-aligned).

The model knows nothing about where rows come from.  Adapters such as
:func:`cqlab.session.rows_from_result` build rows from driver results;
tests build them directly with :meth:`Row.from_mapping`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

#: Text shown for a missing CQL value.
NULL_TEXT = "null"


class ValueKind(Enum):
    """Alignment category of a column."""

    NUMERIC = "numeric"
    OTHER = "other"


class SchemaMismatchError(ValueError):
    """A row does not provide a value for a declared column."""

    def __init__(self, column: str, row_index: Optional[int] = None) -> None:
        self.column = column
        self.row_index = row_index
        where = f"row {row_index}" if row_index is not None else "row"
        super().__init__(f"{where} has no value for column '{column}'")


@dataclass(frozen=True)
class ColumnDescriptor:
    """Name and value kind of one result column."""

    name: str
    kind: ValueKind = ValueKind.OTHER

    @property
    def is_numeric(self) -> bool:
        return self.kind is ValueKind.NUMERIC


def format_value(value: Any) -> str:
    """Return the text shown for ``value`` in a rendered table."""
    if value is None:
        return NULL_TEXT
    return str(value)


class Row:
    """One record of a result set, exposing values by column name.

    Rows are read-only once built.  Column order is the order of
    ``columns``; values are looked up by name so that a renderer given
    an explicit column list can read them in any order.
    """

    __slots__ = ("_columns", "_values")

    def __init__(self, columns: Iterable[ColumnDescriptor], values: Mapping[str, Any]) -> None:
        self._columns: Tuple[ColumnDescriptor, ...] = tuple(columns)
        self._values: Dict[str, Any] = dict(values)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, Any],
        kinds: Optional[Mapping[str, ValueKind]] = None,
    ) -> "Row":
        """Build a row from a name -> value mapping.

        Column order follows the mapping's iteration order.  Columns not
        named in ``kinds`` are :attr:`ValueKind.OTHER`.
        """
        kinds = kinds or {}
        columns = [ColumnDescriptor(name, kinds.get(name, ValueKind.OTHER)) for name in mapping]
        return cls(columns, mapping)

    @property
    def columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self._columns

    def keys(self) -> Tuple[str, ...]:
        return tuple(c.name for c in self._columns)

    def value(self, name: str) -> Any:
        """Return the raw value of column ``name``.

        Raises:
            SchemaMismatchError: If the row has no such column.
        """
        if name not in self._values:
            raise SchemaMismatchError(name)
        return self._values[name]

    def text(self, name: str) -> str:
        """Return the display text of column ``name``."""
        return format_value(self.value(name))

    def __getitem__(self, name: str) -> Any:
        return self.value(name)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._columns == other._columns and self._values == other._values

    def __repr__(self) -> str:
        fields = ", ".join(f"{c.name}={self._values.get(c.name)!r}" for c in self._columns)
        return f"Row({fields})"
