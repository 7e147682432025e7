from __future__ import annotations

from datetime import date
from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, is_blank, ok, require_store, skill_handler, utc_now_iso
from vibes.skills.calendar.common import (
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

description = "Create a new calendar entry with title, date, start time and duration."


@skill_handler("Failed to create calendar entry")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    title = args.get("title")
    entry_date = args.get("date")
    time = args.get("time")
    duration = args.get("duration")
    note = args.get("description")

    if is_blank(title) or not entry_date or not time or duration is None:
        return fail("Missing required fields: title, date, time, and duration are required")
    if error := check_date(entry_date) or check_time(time) or check_duration(duration):
        return fail(error)
    if note is not None and not isinstance(note, str):
        return fail("Description must be a string if provided")

    store = require_store(context, "calendar")
    now, locale = local_now(context), display_locale(context)
    entry = await store.create(
        {
            "title": title,
            "date": entry_date,
            "time": time,
            "duration": int(duration),
            "description": note or "",
        }
    )
    log.info("calendar.entry_created", id=entry.id, date=entry.date)

    view = await week_view(store, date.fromisoformat(entry.date))
    return ok(
        {
            "entry": entry.model_dump(),
            **view,
            "calendar_context": await calendar_context(store, now, locale),
            "message": f'Entry "{entry.title}" created for {entry.date} at {entry.time}',
        },
        timestamp=utc_now_iso(),
    )


ui_component = no_view

schema = {
    "title": {"type": "string", "optional": False, "description": "Entry title"},
    "date": {"type": "string", "optional": False, "description": "Date in YYYY-MM-DD format"},
    "time": {"type": "string", "optional": False, "description": "Time in HH:MM format (24-hour)"},
    "duration": {"type": "number", "optional": False, "description": "Duration in minutes"},
    "description": {"type": "string", "optional": True, "description": "Optional description"},
}
