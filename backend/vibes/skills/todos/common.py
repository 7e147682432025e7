from __future__ import annotations

from typing import Any

from vibes.schemas.todo import Todo

MISSING_ID = "ID parameter is required. Use query-todos to look up todo IDs."


def counts(todos: list[Todo]) -> dict[str, int]:
    done = sum(1 for t in todos if t.completed)
    return {"total": len(todos), "open": len(todos) - done, "completed": done}


def dump(todos: list[Todo]) -> list[dict[str, Any]]:
    return [t.model_dump() for t in todos]
