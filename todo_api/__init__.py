"""todo-api — a small CRUD service over a single SQLite ``todos`` table."""

__version__ = "1.0.0"
