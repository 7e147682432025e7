"""List todos, optionally only open or completed ones."""

from __future__ import annotations

from typing import Any

from vibes.skills.base import SkillContext, fail, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.todos.common import counts, dump
from vibes.skills.views import no_view

description = "List todos with their IDs, optionally filtered by status."

STATUSES = ["all", "open", "completed"]


@skill_handler("Failed to query todos")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    status = args.get("status") or "all"
    if status not in STATUSES:
        return fail(f"Status must be one of: {', '.join(STATUSES)}")

    todos = await require_store(context, "todos").list()
    if status == "open":
        selected = [t for t in todos if not t.completed]
    elif status == "completed":
        selected = [t for t in todos if t.completed]
    else:
        selected = todos

    return ok(
        {
            "todos": dump(selected),
            "status": status,
            "counts": counts(todos),
            "timestamp": utc_now_iso(),
        }
    )


ui_component = no_view

schema = {
    "status": {
        "type": "string",
        "optional": True,
        "enum": STATUSES,
        "description": "Which todos to list (default all)",
    },
}
