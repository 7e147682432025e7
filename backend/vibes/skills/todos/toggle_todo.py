from __future__ import annotations

from typing import Any

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.todos.common import MISSING_ID
from vibes.skills.views import no_view

description = "Flip a todo between open and completed."


@skill_handler("Failed to toggle todo")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    todo_id = args.get("id")
    if is_blank(todo_id):
        return fail(MISSING_ID)

    todo = await require_store(context, "todos").toggle(todo_id)
    if todo is None:
        return fail(f'Todo with ID "{todo_id}" not found')
    return ok({"todo": todo.model_dump(), "timestamp": utc_now_iso()})


ui_component = no_view

schema = {
    "id": {"type": "string", "optional": False, "description": "ID of the todo to toggle"},
}
