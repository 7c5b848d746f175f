"""Stand-ins for driver result sets used across the tests."""

from collections import namedtuple


class FakeResult(list):
    """A list of rows carrying ``column_names`` and ``column_types``.

    Rows are named tuples, as produced by the driver's default row
    factory.
    """

    def __init__(self, columns, rows=()):
        names = [name for name, _ in columns]
        record = namedtuple("Row", names, rename=True)
        super().__init__(record(*values) for values in rows)
        self.column_names = names
        self.column_types = [cql_type for _, cql_type in columns]


USER_COLUMNS = [("id", "text"), ("name", "text"), ("age", "int")]


def user_result(*users):
    """A result for ``SELECT id, name, age`` holding ``(id, name, age)`` tuples."""
    return FakeResult(USER_COLUMNS, users)
