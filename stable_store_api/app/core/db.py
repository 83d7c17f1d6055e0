"""
SQLite database integration and simple migration system.

This module provides functions for opening the database connection
(``get_connection``), running a unit of work atomically
(``transaction``) and applying migrations on application start
(``init_db``).  SQLite is the durable substrate behind every resource
store: each resource kind lives in its own ``WITHOUT ROWID`` table,
which SQLite keeps as a B-tree clustered on the text primary key.  That
gives the stores an ordered map with logarithmic point operations and
key-ordered scans, persisted to a single file.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

MEMORY_DATABASE = ":memory:"

# Resource tables created by the initial migration.  Each table maps a
# generated string id to the JSON payload of one record.
RESOURCE_TABLES = ("staking_entries", "skill_records", "donations", "horoscopes", "products")


def _resource_table_sql(table: str) -> str:
    return (
        f"CREATE TABLE IF NOT EXISTS {table} (\n"
        "    id TEXT PRIMARY KEY,\n"
        "    payload TEXT NOT NULL\n"
        ") WITHOUT ROWID;\n"
    )


class Connection(sqlite3.Connection):
    """SQLite connection carrying the lock that serialises its users.

    One connection is shared by every store of an application, so a
    per-store lock is not enough: two stores must never interleave
    statements or transactions on the same connection.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.lock = threading.RLock()


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: one ordered id -> payload table per resource kind
    (1, "\n".join(_resource_table_sql(table) for table in RESOURCE_TABLES)),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are used as is.  Relative paths are
    resolved against the project root.
    """
    if database_url == MEMORY_DATABASE or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # stable_store_api/
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> Connection:
    """Create and return a new SQLite connection.

    The connection is shared by every store of one application, so it
    is opened with ``check_same_thread=False`` and every user holds
    ``conn.lock`` while talking to it.  ``isolation_level=None`` leaves
    transaction control to ``transaction``.
    """
    db_path = get_database_path(database_url)
    if db_path != MEMORY_DATABASE:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(
        db_path, check_same_thread=False, isolation_level=None, factory=Connection
    )
    # Return rows as dict-like objects keyed by column name
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def transaction(conn: Connection) -> Iterator[sqlite3.Cursor]:
    """Yield a cursor inside ``BEGIN``/``COMMIT``, rolling back on error.

    The connection lock is held for the whole transaction.
    """
    with conn.lock:
        cursor = conn.cursor()
        cursor.execute("BEGIN")
        try:
            yield cursor
        except BaseException:
            cursor.execute("ROLLBACK")
            raise
        else:
            cursor.execute("COMMIT")
        finally:
            cursor.close()


def init_db(conn: Connection) -> int:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  Returns the resulting schema version.  To change
    the schema, append a migration with an incremented version number.
    """
    logger = logging.getLogger(__name__)
    conn.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
    row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current_version = row["version"] if row and row["version"] is not None else 0

    for version, sql in MIGRATIONS:
        if version <= current_version:
            continue
        # executescript commits on its own, so each migration and its
        # version row are written by one script.
        conn.executescript(
            f"BEGIN;\n{sql}\nINSERT INTO migrations (version) VALUES ({int(version)});\nCOMMIT;"
        )
        logger.debug("Applied migration %s", version)
        current_version = version
    return current_version
