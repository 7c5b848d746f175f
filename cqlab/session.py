"""Cassandra session handling and result adaptation.

Two concerns live here:

* **Configuration and connection.**  :class:`SessionConfig` gathers the
  contact points, port and local datacenter, either from explicit values
  or from ``CQLAB_*`` environment variables.  :func:`open_session` turns
  a configuration into a connected driver session and shuts the cluster
  down when the ``with`` block ends.
* **Result adaptation.**  :func:`rows_from_result` materializes a driver
  ``ResultSet`` into :class:`cqlab.model.Row` objects.  The numeric kind
  of each column is resolved once from its declared CQL type, never from
  the value text, so zero-padded identifiers stored as ``text`` stay
  left-aligned.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from cassandra.cluster import EXEC_PROFILE_DEFAULT, Cluster, ExecutionProfile, NoHostAvailable
from cassandra.policies import DCAwareRoundRobinPolicy

from .model import ColumnDescriptor, Row, ValueKind

logger = logging.getLogger(__name__)

#: CQL types rendered right-aligned.
NUMERIC_CQL_TYPES = frozenset({
    "int",
    "bigint",
    "smallint",
    "tinyint",
    "varint",
    "counter",
    "float",
    "double",
    "decimal",
})

DEFAULT_CONTACT_POINTS = ("localhost",)
DEFAULT_PORT = 9042
DEFAULT_LOCAL_DC = "datacenter1"
DEFAULT_CONNECT_TIMEOUT = 10.0


def _env_number(name: str, default: Any, convert: Any) -> Any:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return convert(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class SessionConfig:
    """Where and how to connect to the Cassandra cluster."""

    contact_points: List[str] = field(default_factory=lambda: list(DEFAULT_CONTACT_POINTS))
    port: int = DEFAULT_PORT
    local_dc: str = DEFAULT_LOCAL_DC
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    @classmethod
    def from_env(cls) -> "SessionConfig":
        """Build a configuration from ``CQLAB_*`` environment variables.

        Raises:
            ValueError: If a numeric variable cannot be parsed.
        """
        points = os.getenv("CQLAB_CONTACT_POINTS", "")
        contact_points = [p.strip() for p in points.split(",") if p.strip()]
        return cls(
            contact_points=contact_points or list(DEFAULT_CONTACT_POINTS),
            port=_env_number("CQLAB_PORT", DEFAULT_PORT, int),
            local_dc=os.getenv("CQLAB_LOCAL_DC") or DEFAULT_LOCAL_DC,
            connect_timeout=_env_number("CQLAB_CONNECT_TIMEOUT", DEFAULT_CONNECT_TIMEOUT, float),
        )

    def describe(self) -> str:
        return ", ".join(f"{host}:{self.port}" for host in self.contact_points)


def build_cluster(config: SessionConfig) -> Cluster:
    """Create (but do not connect) a driver cluster for ``config``."""
    profile = ExecutionProfile(
        load_balancing_policy=DCAwareRoundRobinPolicy(local_dc=config.local_dc),
    )
    return Cluster(
        contact_points=config.contact_points,
        port=config.port,
        execution_profiles={EXEC_PROFILE_DEFAULT: profile},
        connect_timeout=config.connect_timeout,
    )


@contextmanager
def open_session(config: Optional[SessionConfig] = None) -> Iterator[Any]:
    """Yield a connected session; the cluster is shut down on exit.

    Raises:
        ConnectionError: If no contact point accepts the connection.
    """
    config = config or SessionConfig.from_env()
    cluster = build_cluster(config)
    logger.info("Connecting to %s (datacenter %s)", config.describe(), config.local_dc)
    try:
        session = cluster.connect()
    except NoHostAvailable as exc:
        cluster.shutdown()
        raise ConnectionError(f"Cannot connect to Cassandra at {config.describe()}: {exc}") from exc
    try:
        yield session
    finally:
        logger.debug("Shutting down cluster connection")
        cluster.shutdown()


def kind_for_cql_type(cql_type: Any) -> ValueKind:
    """Return the value kind of a CQL type.

    ``cql_type`` is either a driver type class (anything with a
    ``typename`` attribute) or a type name such as ``"int"``.
    """
    name = getattr(cql_type, "typename", cql_type)
    if isinstance(name, str) and name.lower() in NUMERIC_CQL_TYPES:
        return ValueKind.NUMERIC
    return ValueKind.OTHER


def columns_from_result(result: Any) -> List[ColumnDescriptor]:
    """Column descriptors of a driver result set, in select order."""
    names = list(result.column_names or [])
    types = list(result.column_types or [])
    if len(types) < len(names):
        types.extend([None] * (len(names) - len(types)))
    return [ColumnDescriptor(name, kind_for_cql_type(t)) for name, t in zip(names, types)]


def rows_from_result(result: Any) -> List[Row]:
    """Load every row of a driver result set into memory.

    Rows produced by the default named-tuple factory are read by
    position; rows from ``dict_factory`` are read by name.
    """
    raw_rows = list(result)
    columns = columns_from_result(result)
    names = [c.name for c in columns]
    rows = []
    for raw in raw_rows:
        if isinstance(raw, Mapping):
            values = dict(raw)
        else:
            values = dict(zip(names, raw))
        rows.append(Row(columns, values))
    logger.debug("Loaded %d row(s) with columns %s", len(rows), names)
    return rows
