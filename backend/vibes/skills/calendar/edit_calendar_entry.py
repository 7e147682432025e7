from __future__ import annotations

from datetime import date
from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.calendar.common import (
    ENTRY_FIELDS,
    calendar_context,
    check_date,
    check_duration,
    check_time,
    display_locale,
    local_now,
    week_view,
)
from vibes.skills.views import no_view

log = structlog.get_logger()

description = "Update fields of an existing calendar entry by ID."


def _check_updates(updates: dict[str, Any]) -> str | None:
    if "title" in updates and is_blank(updates["title"]):
        return "Title must be a non-empty string if provided"
    if "date" in updates and (error := check_date(updates["date"])):
        return error
    if "time" in updates and (error := check_time(updates["time"])):
        return error
    if "duration" in updates and (error := check_duration(updates["duration"])):
        return error
    if "description" in updates and not isinstance(updates["description"], str):
        return "Description must be a string if provided"
    return None


@skill_handler("Failed to update calendar entry")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    entry_id = args.get("id")
    if is_blank(entry_id):
        return fail("Entry ID is required for editing")

    updates = {k: args[k] for k in ENTRY_FIELDS if args.get(k) is not None}
    if error := _check_updates(updates):
        return fail(error)
    if not updates:
        return fail("No fields provided to update")
    if "duration" in updates:
        updates["duration"] = int(updates["duration"])

    store = require_store(context, "calendar")
    now, locale = local_now(context), display_locale(context)
    if await store.get(entry_id) is None:
        return fail(f'Calendar entry with ID "{entry_id}" not found')

    entry = await store.update(entry_id, updates)
    if entry is None:
        return fail(f'Calendar entry with ID "{entry_id}" not found')
    log.info("calendar.entry_updated", id=entry.id, fields=sorted(updates))

    view = await week_view(store, date.fromisoformat(entry.date))
    return ok(
        {
            "entry": entry.model_dump(),
            **view,
            "calendar_context": await calendar_context(store, now, locale),
            "message": f'Entry "{entry.title}" updated',
        },
        timestamp=utc_now_iso(),
    )


ui_component = no_view

schema = {
    "id": {"type": "string", "optional": False, "description": "Entry ID to edit"},
    "title": {"type": "string", "optional": True, "description": "New title"},
    "date": {"type": "string", "optional": True, "description": "New date in YYYY-MM-DD format"},
    "time": {"type": "string", "optional": True, "description": "New time in HH:MM format (24-hour)"},
    "duration": {"type": "number", "optional": True, "description": "New duration in minutes"},
    "description": {"type": "string", "optional": True, "description": "New description"},
}
