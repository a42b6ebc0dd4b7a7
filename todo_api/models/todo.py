"""Todo domain model — the single entity persisted in the ``todos`` table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Todo:
    id: int
    author: str
    body: str
    done: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "author": self.author,
            "body": self.body,
            "done": self.done,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Todo":
        # done is stored as INTEGER 0/1
        return cls(
            id=row["id"],
            author=row["author"],
            body=row["body"],
            done=bool(row["done"]),
        )
