"""Database layer — one SQLite connection behind a lock, plus the todo repository."""

from todo_api.db.database import Database, StoreError
from todo_api.db.schema import SCHEMA_DDL
from todo_api.db.todo_repo import EmptyUpdateError, TodoRepository, build_update_clause

__all__ = [
    "Database", "StoreError", "SCHEMA_DDL",
    "TodoRepository", "EmptyUpdateError", "build_update_clause",
]
