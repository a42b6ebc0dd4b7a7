#!/usr/bin/env python3
"""Create the todo database (idempotent) without starting the server."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from todo_api.db.database import Database, StoreError
from todo_api.db.todo_repo import TodoRepository


def main():
    parser = argparse.ArgumentParser(description="Initialize the todo database")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    db_path = Path(args.db_path) if args.db_path else None
    db = Database(path=db_path)
    try:
        db.init()
    except StoreError as e:
        print(f"Initialization failed: {e}")
        sys.exit(1)
    print(f"Database initialized at: {db.path}")
    print(f"  {len(TodoRepository(db).list_all())} todo(s) stored")
    db.close()
    print("Done.")


if __name__ == "__main__":
    main()
