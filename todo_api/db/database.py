"""Core database connection: one shared SQLite handle behind one lock."""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Optional

from todo_api.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)

# sqlite3 raises these for values it cannot bind (ints past 64 bits, lone surrogates)
_DRIVER_ERRORS = (sqlite3.Error, OverflowError, ValueError)


class StoreError(Exception):
    """Raised when the underlying store cannot complete an operation."""


class Database:
    """
    SQLite database wrapper owning a single connection.

    Every statement, read or write, runs while holding ``self._lock`` so at
    most one statement is in flight at a time. Mutations go through
    ``transaction()``, which commits on success and rolls back on failure.
    Driver errors surface as ``StoreError``.
    """

    def __init__(self, path: Optional[Path | str] = None):
        if path is None:
            from todo_api.config import get_settings
            self.path: Path = get_settings().DATABASE_PATH
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _connection(self) -> sqlite3.Connection:
        # caller holds self._lock
        if self._conn is None:
            try:
                self._ensure_dir()
                self._conn = sqlite3.connect(str(self.path), check_same_thread=False)
            except (OSError, sqlite3.Error) as e:
                raise StoreError(f"Cannot open database at {self.path}: {e}") from e
            self._conn.row_factory = sqlite3.Row
        return self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn:
                self._conn.close()
                self._conn = None

    def init(self) -> None:
        """Open (or create) the store file and create the table (idempotent)."""
        with self._lock:
            conn = self._connection()
            try:
                conn.executescript(SCHEMA_DDL)
                conn.commit()
            except sqlite3.Error as e:
                raise StoreError(f"Cannot create schema in {self.path}: {e}") from e
        logger.info(f"Database ready at {self.path}")

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Locked unit of work: commits on success, rolls back on exception."""
        with self._lock:
            conn = self._connection()
            try:
                yield conn
                conn.commit()
            except _DRIVER_ERRORS as e:
                conn.rollback()
                raise StoreError(str(e)) from e
            except Exception:
                conn.rollback()
                raise

    # -- low-level query helpers -----------------------------------------------

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        with self._lock:
            conn = self._connection()
            try:
                rows = conn.execute(sql, params).fetchall()
            except _DRIVER_ERRORS as e:
                raise StoreError(str(e)) from e
            return [dict(r) for r in rows]

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        rows = self.fetchall(sql, params)
        return rows[0] if rows else None
