"""Show the calendar window starting at a given date."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from babel.dates import format_date

from vibes.skills.base import SkillContext, fail, ok, require_store, skill_handler
from vibes.skills.calendar.common import (
    calendar_context,
    check_date,
    display_locale,
    local_now,
    week_view,
)
from vibes.skills.views import no_view

description = "Show calendar entries for the week starting at a date (defaults to yesterday)."


@skill_handler("Failed to load calendar")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    requested = args.get("date")
    if requested is not None and (error := check_date(requested)):
        return fail(error)

    store = require_store(context, "calendar")
    now = local_now(context)
    locale = display_locale(context)
    # Without a date the window starts yesterday in the agent's timezone.
    start = (
        datetime.fromisoformat(requested).date() if requested else (now - timedelta(days=1)).date()
    )

    view = await week_view(store, start, with_range=requested is not None)
    view["calendar_context"] = await calendar_context(store, now, locale)
    view["current_date"] = {
        "iso": now.date().isoformat(),
        "formatted": format_date(now.date(), format="full", locale=locale),
        "time": now.strftime("%H:%M"),
        "timestamp": now.isoformat(),
    }
    view["timestamp"] = now.astimezone(UTC).isoformat()
    return ok(view)


ui_component = no_view

schema = {
    "date": {
        "type": "string",
        "optional": True,
        "description": "Start date of the week view (YYYY-MM-DD), defaults to yesterday",
    },
}
