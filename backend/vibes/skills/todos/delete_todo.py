from __future__ import annotations

from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.todos.common import MISSING_ID, dump
from vibes.skills.views import no_view

log = structlog.get_logger()

description = "Remove a todo from the list."


@skill_handler("Failed to delete todo")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    todo_id = args.get("id")
    if is_blank(todo_id):
        return fail(MISSING_ID)

    store = require_store(context, "todos")
    if not await store.delete(todo_id):
        return fail(f'Todo with ID "{todo_id}" not found')
    log.info("todos.deleted", id=todo_id)
    return ok({"deleted_id": todo_id, "todos": dump(await store.list()), "timestamp": utc_now_iso()})


ui_component = no_view

schema = {
    "id": {"type": "string", "optional": False, "description": "ID of the todo to delete"},
}
