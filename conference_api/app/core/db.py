"""
SQLite‑backed document store.

Entities are kept as JSON documents grouped into named collections,
all in a single ``documents`` table keyed by ``(collection, id)``.
The store exposes a small collection API:

* ``collection.add(data)`` stores a document and returns its generated id
* ``collection.get(id)`` / ``update(id, partial)`` / ``delete(id)``
* ``collection.query().where(...).order_by(...).offset(n).limit(n)``
  followed by ``get()`` for the documents or ``count()`` for the size
  of the filtered set (limit and offset are ignored by ``count``)

Field filters and sort keys are evaluated inside SQLite with
``json_extract`` so pagination and counting never load the whole
collection into Python.

One ``DocumentStore`` is created per process and shared by every
request.  SQLite calls are blocking, so each one is pushed to a worker
thread with ``asyncio.to_thread``; a lock serialises access to the
shared connection.  Any ``sqlite3.Error`` surfaces as ``StoreError``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import sqlite3
import threading
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .exceptions import StoreError

logger = logging.getLogger(__name__)

Document = Dict[str, Any]

# Schema migrations applied by ``DocumentStore.init``.  Append new
# entries with an incremented version number.
MIGRATIONS: List[Tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS documents (
            collection TEXT NOT NULL,
            id TEXT NOT NULL,
            data TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            PRIMARY KEY (collection, id)
        );

        CREATE INDEX IF NOT EXISTS idx_documents_collection
            ON documents (collection);
        """,
    ),
]

_OPERATORS = {
    "==": "=",
    "!=": "!=",
    "<": "<",
    "<=": "<=",
    ">": ">",
    ">=": ">=",
}
_DIRECTIONS = {"asc": "ASC", "desc": "DESC"}
# Largest value SQLite accepts for LIMIT and OFFSET.
_MAX_INTEGER = 2 ** 63 - 1


def get_database_path(database_url: str) -> str:
    """Resolve ``database_url`` to a filesystem path.

    Absolute paths and ``:memory:`` are returned unchanged; relative
    paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def _field_expression(field: str) -> Tuple[str, Tuple[Any, ...]]:
    """SQL expression (and its parameters) selecting ``field`` from a document."""
    if field == "id":
        return "id", ()
    path = '$."%s"' % field.replace('"', "")
    return "json_extract(data, ?)", (path,)


def _row_to_document(row: sqlite3.Row) -> Document:
    document = json.loads(row["data"])
    document["id"] = row["id"]
    return document


class DocumentStore:
    """Process‑wide client for the document database."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def init(self) -> None:
        """Open the connection and apply pending migrations."""
        if self._conn is not None:
            return
        try:
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            cursor = conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0
            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version
            conn.commit()
        except sqlite3.Error as exc:
            raise StoreError(f"Could not open document store at {self.path}: {exc}") from exc
        self._conn = conn
        logger.info("Document store ready at %s (schema version %s)", self.path, current_version)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def collection(self, name: str) -> "Collection":
        return Collection(self, name)

    async def ping(self) -> None:
        """Round‑trip a trivial query; raises ``StoreError`` when unavailable."""
        await self.run("SELECT 1")

    async def run(self, sql: str, params: Sequence[Any] = ()) -> Tuple[List[sqlite3.Row], int]:
        """Execute one statement in a worker thread.

        Returns the fetched rows and the affected row count.
        """
        return await asyncio.to_thread(self._execute, sql, tuple(params))

    def _execute(self, sql: str, params: Tuple[Any, ...]) -> Tuple[List[sqlite3.Row], int]:
        with self._lock:
            conn = self._connection()
            try:
                cursor = conn.execute(sql, params)
                rows = cursor.fetchall()
                conn.commit()
                return rows, cursor.rowcount
            except sqlite3.Error as exc:
                conn.rollback()
                raise StoreError(str(exc)) from exc

    def _merge(self, collection: str, doc_id: str, partial: Document) -> bool:
        """Read‑modify‑write a document under the lock; False when it is missing."""
        with self._lock:
            conn = self._connection()
            try:
                row = conn.execute(
                    "SELECT data FROM documents WHERE collection = ? AND id = ?",
                    (collection, doc_id),
                ).fetchone()
                if row is None:
                    return False
                data = json.loads(row["data"])
                data.update(partial)
                conn.execute(
                    "UPDATE documents SET data = ?, updated_at = CURRENT_TIMESTAMP "
                    "WHERE collection = ? AND id = ?",
                    (json.dumps(data), collection, doc_id),
                )
                conn.commit()
                return True
            except sqlite3.Error as exc:
                conn.rollback()
                raise StoreError(str(exc)) from exc

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("Document store is not initialised")
        return self._conn


class Collection:
    """Handle on one named collection of documents."""

    def __init__(self, store: DocumentStore, name: str) -> None:
        self._store = store
        self.name = name

    async def add(self, data: Document) -> str:
        doc_id = uuid.uuid4().hex
        await self._store.run(
            "INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)",
            (self.name, doc_id, json.dumps(data)),
        )
        return doc_id

    async def get(self, doc_id: str) -> Optional[Document]:
        rows, _ = await self._store.run(
            "SELECT id, data FROM documents WHERE collection = ? AND id = ?",
            (self.name, doc_id),
        )
        return _row_to_document(rows[0]) if rows else None

    async def update(self, doc_id: str, partial: Document) -> bool:
        return await asyncio.to_thread(self._store._merge, self.name, doc_id, partial)

    async def delete(self, doc_id: str) -> bool:
        _, deleted = await self._store.run(
            "DELETE FROM documents WHERE collection = ? AND id = ?",
            (self.name, doc_id),
        )
        return deleted > 0

    def query(self) -> "Query":
        return Query(self._store, self.name)

    def where(self, field: str, op: str, value: Any) -> "Query":
        return self.query().where(field, op, value)

    def order_by(self, field: str, direction: str = "asc") -> "Query":
        return self.query().order_by(field, direction)


class Query:
    """Immutable query builder; every refinement returns a new ``Query``.

    Without ``order_by`` documents come back in insertion order.  With
    it, documents lacking the field have a NULL key, which SQLite sorts
    first ascending and last descending; ties keep insertion order.
    """

    def __init__(
        self,
        store: DocumentStore,
        collection: str,
        filters: Tuple[Tuple[str, str, Any], ...] = (),
        order: Optional[Tuple[str, str]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> None:
        self._store = store
        self._collection = collection
        self._filters = filters
        self._order = order
        self._limit = limit
        self._offset = offset

    def _copy(self, **changes: Any) -> "Query":
        values = {
            "filters": self._filters,
            "order": self._order,
            "limit": self._limit,
            "offset": self._offset,
        }
        values.update(changes)
        return Query(self._store, self._collection, **values)

    def where(self, field: str, op: str, value: Any) -> "Query":
        if op not in _OPERATORS:
            raise ValueError(f"Unsupported operator: {op}")
        return self._copy(filters=self._filters + ((field, op, value),))

    def order_by(self, field: str, direction: str = "asc") -> "Query":
        direction = direction.lower()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Unsupported sort direction: {direction}")
        return self._copy(order=(field, direction))

    def limit(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("limit must not be negative")
        return self._copy(limit=count)

    def offset(self, count: int) -> "Query":
        if count < 0:
            raise ValueError("offset must not be negative")
        return self._copy(offset=count)

    def _where_clause(self) -> Tuple[str, List[Any]]:
        clauses = ["collection = ?"]
        params: List[Any] = [self._collection]
        for field, op, value in self._filters:
            expression, expression_params = _field_expression(field)
            params.extend(expression_params)
            if value is None and op in ("==", "!="):
                clauses.append(f"{expression} IS {'NOT ' if op == '!=' else ''}NULL")
                continue
            clauses.append(f"{expression} {_OPERATORS[op]} ?")
            params.append(value)
        return " AND ".join(clauses), params

    async def get(self) -> List[Document]:
        where, params = self._where_clause()
        sql = f"SELECT id, data FROM documents WHERE {where}"
        if self._order is not None:
            field, direction = self._order
            expression, expression_params = _field_expression(field)
            sql += f" ORDER BY {expression} {_DIRECTIONS[direction]}, rowid ASC"
            params.extend(expression_params)
        else:
            sql += " ORDER BY rowid ASC"
        # SQLite only accepts OFFSET together with LIMIT; -1 means no limit.
        sql += " LIMIT ? OFFSET ?"
        limit = -1 if self._limit is None else min(self._limit, _MAX_INTEGER)
        params.extend([limit, min(self._offset, _MAX_INTEGER)])
        rows, _ = await self._store.run(sql, params)
        return [_row_to_document(row) for row in rows]

    async def count(self) -> int:
        where, params = self._where_clause()
        rows, _ = await self._store.run(
            f"SELECT COUNT(*) AS total FROM documents WHERE {where}", params
        )
        return rows[0]["total"]
