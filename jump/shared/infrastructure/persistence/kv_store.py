"""DuckDB key/value storage for Jump.

A single two-column table holds string blobs under string keys. Values are
written wholesale; there are no partial or field-level updates.

DuckDB calls block, so the async methods hand them to the loop's default
executor. One connection is shared by those worker threads and a lock keeps
them from using it at the same time.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Protocol, TypeVar

import duckdb

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StorageError(Exception):
    """The storage backend could not be read or written."""


class KeyValueStore(Protocol):
    """Minimal async key/value interface the item store depends on."""

    async def get_item(self, key: str) -> Optional[str]: ...

    async def set_item(self, key: str, value: str) -> None: ...

    async def remove_item(self, key: str) -> None: ...


class DuckDBKeyValueStore:
    """Key/value storage backed by one DuckDB table.

    ``db_path`` may be ``":memory:"`` for a process-local store.
    """

    def __init__(self, db_path: str = ":memory:", table_name: str = "kv_store"):
        self.db_path = db_path
        self.table_name = table_name
        self.conn: Optional[duckdb.DuckDBPyConnection] = None
        self._conn_lock = threading.Lock()

    def connect(self) -> "DuckDBKeyValueStore":
        """Open the database and create the table if needed."""
        if self.conn is not None:
            return self

        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self.conn = duckdb.connect(self.db_path)
            self._create_schema()
        except (duckdb.Error, OSError) as e:
            self.conn = None
            raise StorageError(f"Cannot open key/value store at {self.db_path}: {e}") from e

        logger.info(f"Key/value store initialized: {self.db_path}")
        return self

    def _create_schema(self) -> None:
        self.conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {self.table_name} (
                key VARCHAR PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

    def _require_conn(self) -> duckdb.DuckDBPyConnection:
        if self.conn is None:
            raise StorageError("Key/value store is not connected")
        return self.conn

    async def _run(self, fn: Callable[[], T]) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, fn)

    # --- Blocking operations, run on executor threads ---

    def _get_blocking(self, key: str) -> Optional[str]:
        with self._conn_lock:
            conn = self._require_conn()
            try:
                row = conn.execute(
                    f"SELECT value FROM {self.table_name} WHERE key = ?",
                    (key,),
                ).fetchone()
            except duckdb.Error as e:
                raise StorageError(f"Failed to read '{key}': {e}") from e

        return row[0] if row else None

    def _set_blocking(self, key: str, value: str) -> None:
        with self._conn_lock:
            conn = self._require_conn()
            try:
                conn.execute("BEGIN TRANSACTION")
                conn.execute(
                    f"""
                    INSERT OR REPLACE INTO {self.table_name} (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    """,
                    (key, value),
                )
                conn.execute("COMMIT")
            except duckdb.Error as e:
                try:
                    conn.execute("ROLLBACK")
                except duckdb.Error:
                    logger.debug("Rollback after failed write did not apply")
                raise StorageError(f"Failed to write '{key}': {e}") from e

    def _remove_blocking(self, key: str) -> None:
        with self._conn_lock:
            conn = self._require_conn()
            try:
                conn.execute(f"DELETE FROM {self.table_name} WHERE key = ?", (key,))
            except duckdb.Error as e:
                raise StorageError(f"Failed to remove '{key}': {e}") from e

    # --- Async API ---

    async def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or None."""
        return await self._run(lambda: self._get_blocking(key))

    async def set_item(self, key: str, value: str) -> None:
        """Replace the value stored under ``key`` in one transaction."""
        await self._run(lambda: self._set_blocking(key, value))

    async def remove_item(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""
        await self._run(lambda: self._remove_blocking(key))

    def close(self) -> None:
        """Close the underlying connection."""
        with self._conn_lock:
            if self.conn is None:
                return
            try:
                self.conn.close()
            finally:
                self.conn = None
        logger.info(f"Key/value store closed: {self.db_path}")
