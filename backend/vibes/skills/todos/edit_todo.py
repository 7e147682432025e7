from __future__ import annotations

from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.todos.common import MISSING_ID
from vibes.skills.views import no_view

log = structlog.get_logger()

description = "Change the title and/or completion status of a todo."


@skill_handler("Failed to edit todo")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    todo_id = args.get("id")
    title = args.get("title")
    completed = args.get("completed")

    if is_blank(todo_id):
        return fail(MISSING_ID)
    if title is None and completed is None:
        return fail("At least one field (title or completed) must be provided for editing")
    if title is not None and is_blank(title):
        return fail("Title must be a non-empty string if provided")
    if completed is not None and not isinstance(completed, bool):
        return fail("Completed must be a boolean if provided")

    store = require_store(context, "todos")
    original = await store.get(todo_id)
    if original is None:
        return fail(f'Todo with ID "{todo_id}" not found')

    patch = {k: v for k, v in (("title", title), ("completed", completed)) if v is not None}
    updated = await store.update(todo_id, patch)
    if updated is None:
        return fail(f'Todo with ID "{todo_id}" not found')
    log.info("todos.edited", id=todo_id, fields=sorted(patch))

    return ok(
        {
            "todo": updated.model_dump(),
            "change": {
                "id": todo_id,
                "original": original.model_dump(exclude={"id"}),
                "updated": updated.model_dump(exclude={"id"}),
                "fields_changed": sorted(patch),
            },
            "timestamp": utc_now_iso(),
        }
    )


ui_component = no_view

schema = {
    "id": {"type": "string", "optional": False, "description": "ID of the todo to edit"},
    "title": {"type": "string", "optional": True, "description": "New title"},
    "completed": {"type": "boolean", "optional": True, "description": "New completion status"},
}
