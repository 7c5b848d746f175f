"""Discovering Cassandra: basic operations.

Cassandra is a column-oriented NoSQL database with eventual consistency.
It favours availability and partition tolerance, runs as a multi-master
cluster with no single point of failure, and stores data in LSM trees
tuned for heavy write loads.

Concepts used below:

* **Keyspace**: holds tables and defines replication.
* **Table**: the typed schema of a collection of partitions.
* **Partition**: the mandatory part of the primary key; it selects the
  node that stores the row.
* **Row**: columns identified by a primary key.

Cassandra is *query first*: there are no joins, and queries should only
constrain key columns.  When the same data must be read two ways, it is
denormalized into two tables with different partition keys.

To run the lab, start a single Cassandra node::

    $ docker run --name cassandra -p 9042:9042 -d cassandra:latest

then run ``python lab.py run``.  Point ``--host`` (or
``CQLAB_CONTACT_POINTS``) at the nodes of a larger cluster instead.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, List, Sequence

from .exercises import ExerciseContext, Lab
from .session import rows_from_result

KEYSPACE = "education"
TABLE = f"{KEYSPACE}.user"

lab = Lab("Discovering Cassandra")


@dataclass(frozen=True)
class User:
    id: str
    name: str
    age: int


#: Records the learner inserts on top of jon and mary.
LEARNER_USERS = [
    User("3", "Emma-Sophie", 15),
    User("4", "Maria", 28),
    User("5", "Mario", 39),
    User("6", "Elena", 31),
    User("7", "Andrew", 64),
    User("8", "Panagiotis", 66),
    User("9", "Anastasios", 39),
    User("10", "Pierre", 77),
    User("11", "Logan", 58),
    User("12", "George", 62),
    User("13", "Elise", 91),
    User("14", "Alan", 22),
    User("15", "Dimitrios", 38),
    User("16", "Georgios", 14),
]


def insert_json(session: Any, user: User) -> None:
    document = json.dumps({"id": user.id, "name": user.name, "age": user.age})
    session.execute(f"INSERT INTO {TABLE} JSON '{document}'")


def find_user_by_id(session: Any, ctx: ExerciseContext, user_id: str) -> User:
    """Look a user up through a prepared statement bound to ``user_id``."""
    statement = session.prepare(f"SELECT id, name, age FROM {TABLE} WHERE id = ?")
    rows = rows_from_result(session.execute(statement, [user_id]))

    ctx.comment("Did we get 1 user?")
    ctx.check(len(rows) == 1, "exactly one user")
    row = rows[0]
    return User(row["id"], row["name"], row["age"])


def find_users_by_ids(session: Any, ids: Sequence[str]) -> List[User]:
    """Look several users up with a single ``IN ?`` prepared statement."""
    statement = session.prepare(f"SELECT id, name, age FROM {TABLE} WHERE id IN ?")
    rows = rows_from_result(session.execute(statement, [list(ids)]))
    return [User(row["id"], row["name"], row["age"]) for row in rows]


@lab.exercise("Check the cluster")
def check_cluster(session: Any, ctx: ExerciseContext) -> None:
    # system.local describes the node we are connected to
    local_rows = rows_from_result(session.execute("SELECT * FROM system.local"))
    ctx.display(local_rows)

    ready = len(local_rows) == 1 and local_rows[0].value("bootstrapped") == "COMPLETED"
    ctx.comment("Cassandra is ready" if ready else "Cassandra is not ready")

    ctx.comment("Do we have 1 local node?")
    ctx.check(len(local_rows) == 1, "one local node")
    ctx.comment("Is the local node ready?")
    ctx.check(ready, "local node bootstrapped")

    peer_rows = rows_from_result(session.execute("SELECT * FROM system.peers"))
    ctx.display(peer_rows)

    # system.peers lists every other node of the cluster
    ctx.comment(f"How many nodes do we have in the Cassandra cluster? {len(peer_rows) + 1}")


@lab.exercise("Create a keyspace", ignore=True)
def create_keyspace(session: Any, ctx: ExerciseContext) -> None:
    # Set the replication factor to the number of available nodes.
    session.execute(
        f"""CREATE KEYSPACE IF NOT EXISTS {KEYSPACE} WITH replication = {{
  'class':              'SimpleStrategy',
  'replication_factor': '3'
}}"""
    )


@lab.exercise("Create a table")
def create_table(session: Any, ctx: ExerciseContext) -> None:
    session.execute(f"DROP TABLE IF EXISTS {TABLE}")
    session.execute(
        f"""CREATE TABLE IF NOT EXISTS {TABLE} (
  id   text,
  name text,
  age  int,
  PRIMARY KEY (id, name)
)"""
    )


@lab.exercise("Add data")
def add_data(session: Any, ctx: ExerciseContext) -> None:
    # CQL accepts the usual INSERT syntax or a JSON document.
    insert_json(session, User("123", "jon", 32))
    insert_json(session, User("456", "mary", 25))

    for user in LEARNER_USERS:
        insert_json(session, user)


@lab.exercise("Query data")
def query_data(session: Any, ctx: ExerciseContext) -> None:
    # LIMIT keeps data exploration cheap
    result = session.execute(f"SELECT id, name, age FROM {TABLE} LIMIT 100")

    ctx.comment("List of all users")
    ctx.display(result)


@lab.exercise("Query data as JSON document")
def query_data_as_json(session: Any, ctx: ExerciseContext) -> None:
    result = session.execute(f"SELECT JSON id, name, age FROM {TABLE} LIMIT 100")

    ctx.comment("List of all users (JSON)")
    ctx.display(result)


@lab.exercise("Query with constraint")
def query_with_constraint(session: Any, ctx: ExerciseContext) -> None:
    result = session.execute(f"SELECT id, name, age FROM {TABLE} WHERE id = '123' LIMIT 100")
    rows = rows_from_result(result)

    ctx.comment("Data collected")
    ctx.display(rows)

    ctx.comment("Did we get 1 user?")
    ctx.check(len(rows) == 1, "exactly one user")
    ctx.comment("Does the collected user have ID '123'?")
    ctx.check(bool(rows) and rows[0].value("id") == "123", "user id is 123")


@lab.exercise("Use prepared statement")
def use_prepared_statement(session: Any, ctx: ExerciseContext) -> None:
    # Binding values instead of formatting them into the query string
    # guards against CQL injection and lets the server cache the plan.
    user = find_user_by_id(session, ctx, "123")

    ctx.comment("Check collected data")
    ctx.check(user == User("123", "jon", 32), "user 123 is jon, 32")


@lab.exercise("Find many users")
def find_many_users(session: Any, ctx: ExerciseContext) -> None:
    users = find_users_by_ids(session, ["123", "456"])

    ctx.comment("Check collected data")
    ctx.check(
        users == [User("123", "jon", 32), User("456", "mary", 25)],
        "users 123 and 456",
    )


@lab.exercise("Query with constraint on non-key field")
def query_on_non_key_field(session: Any, ctx: ExerciseContext) -> None:
    # Without ALLOW FILTERING the server rejects a constraint on a
    # non-key column: it would have to scan every partition.
    result = session.execute(
        f"SELECT id, name, age FROM {TABLE} WHERE age >= 30 ALLOW FILTERING"
    )

    ctx.comment("Users greater or equal to 30")
    ctx.display(result)
