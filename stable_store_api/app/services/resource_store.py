"""
Generic persistent resource store.

``ResourceStore`` is an ordered map from string id to record, backed by
one SQLite ``WITHOUT ROWID`` table (see ``core.db``).  Records are
pydantic models stored as their JSON dump and validated back into the
model class on the way out.

Every operation reports presence explicitly: lookups and removals
return the record or ``None``; ``insert`` returns the value it
replaced, if any.  Absence is an ordinary outcome and is never raised
as an exception.  Genuine database faults do propagate.

A store is constructed explicitly for one table and one record class,
so an application (or a test) can hold as many independent stores as
it needs.  Stores sharing a connection serialise their operations on
the connection's lock, and the read-then-write operations run inside
a single transaction, so ``insert`` and ``remove`` always report the
value that was actually replaced or deleted.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from ..core.db import Connection, transaction

RecordT = TypeVar("RecordT", bound=BaseModel)

logger = logging.getLogger(__name__)


class ResourceStore(Generic[RecordT]):
    """Ordered id -> record map persisted in a SQLite table."""

    def __init__(self, conn: Connection, table: str, model: Type[RecordT]) -> None:
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")
        self._conn = conn
        self._table = table
        self._model = model
        # Shared with every other store on this connection.
        self._lock = conn.lock

    def _load(self, payload: str) -> RecordT:
        return self._model.model_validate_json(payload)

    def _select(self, cursor: sqlite3.Cursor, record_id: str) -> Optional[RecordT]:
        row = cursor.execute(
            f"SELECT payload FROM {self._table} WHERE id = ?", (record_id,)
        ).fetchone()
        if row is None:
            return None
        return self._load(row["payload"])

    def insert(self, record_id: str, record: RecordT) -> Optional[RecordT]:
        """Write ``record`` at ``record_id``, replacing any existing entry.

        Returns the previous record or ``None`` if the key was free.
        """
        payload = record.model_dump_json()
        with self._lock, transaction(self._conn) as cursor:
            previous = self._select(cursor, record_id)
            cursor.execute(
                f"INSERT OR REPLACE INTO {self._table} (id, payload) VALUES (?, ?)",
                (record_id, payload),
            )
        logger.debug("%s: wrote %s (replaced=%s)", self._table, record_id, previous is not None)
        return previous

    def get(self, record_id: str) -> Optional[RecordT]:
        """Return the record stored at ``record_id`` or ``None``."""
        with self._lock:
            cursor = self._conn.cursor()
            try:
                return self._select(cursor, record_id)
            finally:
                cursor.close()

    def scan(self) -> List[RecordT]:
        """Return every stored record in key order.

        The list is built fresh on each call and is not affected by
        later writes.
        """
        with self._lock:
            rows = self._conn.execute(
                f"SELECT payload FROM {self._table} ORDER BY id"
            ).fetchall()
        return [self._load(row["payload"]) for row in rows]

    def remove(self, record_id: str) -> Optional[RecordT]:
        """Delete the record at ``record_id`` and return it.

        Returns ``None`` and leaves the store untouched when the key is
        absent.
        """
        with self._lock, transaction(self._conn) as cursor:
            previous = self._select(cursor, record_id)
            if previous is not None:
                cursor.execute(f"DELETE FROM {self._table} WHERE id = ?", (record_id,))
        if previous is not None:
            logger.debug("%s: removed %s", self._table, record_id)
        return previous

    def count(self) -> int:
        """Number of records currently stored."""
        with self._lock:
            row = self._conn.execute(f"SELECT COUNT(*) AS n FROM {self._table}").fetchone()
        return int(row["n"])

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, str) and self.get(record_id) is not None
