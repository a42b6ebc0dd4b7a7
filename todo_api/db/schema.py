"""Database schema DDL — the ``todos`` table."""

SCHEMA_DDL = """
CREATE TABLE IF NOT EXISTS todos (
    id      INTEGER PRIMARY KEY AUTOINCREMENT,
    author  TEXT NOT NULL,
    body    TEXT NOT NULL,
    done    INTEGER NOT NULL
);
"""
