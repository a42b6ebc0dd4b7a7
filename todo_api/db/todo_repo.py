"""Repository for the ``todos`` table — list, create, delete, partial update."""

from __future__ import annotations

import logging
from typing import Any, Optional

from todo_api.db.database import Database
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)


class EmptyUpdateError(ValueError):
    """Raised when an update names none of author, body or done."""


def build_update_clause(
    todo_id: int,
    author: Optional[str] = None,
    body: Optional[str] = None,
    done: Optional[bool] = None,
) -> tuple[str, tuple[Any, ...]]:
    """Assemble ``UPDATE todos SET ... WHERE id = ?`` for the fields given.

    Columns keep the order author, body, done; the id is always the last
    bound parameter. Raises ``EmptyUpdateError`` if no field is present.
    """
    pairs: list[tuple[str, Any]] = []
    if author is not None:
        pairs.append(("author", author))
    if body is not None:
        pairs.append(("body", body))
    if done is not None:
        pairs.append(("done", 1 if done else 0))
    if not pairs:
        raise EmptyUpdateError("No fields to update")

    set_parts = [f"{column} = ?" for column, _ in pairs]
    values = [value for _, value in pairs]
    values.append(todo_id)
    return f"UPDATE todos SET {', '.join(set_parts)} WHERE id = ?", tuple(values)


class TodoRepository:
    """Single-Responsibility repository for todo persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def create(self, author: str, body: str) -> None:
        with self._db.transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO todos (author, body, done) VALUES (?, ?, ?)",
                (author, body, 0),
            )
        logger.info(f"Created todo {cursor.lastrowid}")

    # -- Read ------------------------------------------------------------------

    def list_all(self) -> list[Todo]:
        rows = self._db.fetchall("SELECT id, author, body, done FROM todos")
        return [Todo.from_row(r) for r in rows]

    # -- Update ----------------------------------------------------------------

    def update(
        self,
        todo_id: int,
        author: Optional[str] = None,
        body: Optional[str] = None,
        done: Optional[bool] = None,
    ) -> bool:
        """Replace the given fields; returns whether a row matched ``todo_id``."""
        sql, params = build_update_clause(todo_id, author=author, body=body, done=done)
        with self._db.transaction() as conn:
            cursor = conn.execute(sql, params)
        logger.info(f"Updated todo {todo_id} ({cursor.rowcount} row(s))")
        return cursor.rowcount > 0

    # -- Delete ----------------------------------------------------------------

    def delete(self, todo_id: int) -> bool:
        with self._db.transaction() as conn:
            cursor = conn.execute("DELETE FROM todos WHERE id = ?", (todo_id,))
        logger.info(f"Deleted todo {todo_id} ({cursor.rowcount} row(s))")
        return cursor.rowcount > 0
