from __future__ import annotations

from datetime import date
from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.calendar.common import calendar_context, display_locale, local_now, week_view
from vibes.skills.views import no_view

log = structlog.get_logger()

description = "Delete a calendar entry by ID."


@skill_handler("Failed to delete calendar entry")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    entry_id = args.get("id")
    if is_blank(entry_id):
        return fail("Entry ID is required for deleting")

    store = require_store(context, "calendar")
    now, locale = local_now(context), display_locale(context)
    entry = await store.get(entry_id)
    if entry is None or not await store.delete(entry_id):
        return fail(f'Calendar entry with ID "{entry_id}" not found')
    log.info("calendar.entry_deleted", id=entry_id)

    view = await week_view(store, date.fromisoformat(entry.date))
    return ok(
        {
            "deleted": entry.model_dump(),
            **view,
            "calendar_context": await calendar_context(store, now, locale),
            "message": f'Entry "{entry.title}" deleted',
        },
        timestamp=utc_now_iso(),
    )


ui_component = no_view

schema = {
    "id": {"type": "string", "optional": False, "description": "Entry ID to delete"},
}
