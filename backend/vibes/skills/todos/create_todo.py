from __future__ import annotations

from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.todos.common import dump
from vibes.skills.views import no_view

log = structlog.get_logger()

description = "Add a new item to the todo list."


@skill_handler("Failed to create todo")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    title = args.get("title")
    if is_blank(title):
        return fail("Title is required and must be a non-empty string")

    store = require_store(context, "todos")
    todo = await store.create({"title": title, "completed": False})
    log.info("todos.created", id=todo.id)
    return ok(
        {
            "todo": todo.model_dump(),
            "todos": dump(await store.list()),
            "timestamp": utc_now_iso(),
        }
    )


ui_component = no_view

schema = {
    "title": {"type": "string", "optional": False, "description": "Todo title"},
}
