from __future__ import annotations

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from babel import Locale

from vibes.config import settings
from vibes.context.formatters import babel_locale, calendar_context_string
from vibes.schemas.calendar import CalendarEntry, is_valid_date, is_valid_time
from vibes.skills.base import SkillContext
from vibes.stores.calendar import CalendarStore, window_end

INVALID_DATE = "Invalid date format. Use YYYY-MM-DD format"
INVALID_TIME = "Invalid time format. Use HH:MM format (24-hour)"
INVALID_DURATION = "Duration must be a positive whole number of minutes"

ENTRY_FIELDS = ("title", "date", "time", "duration", "description")


def check_date(value: Any) -> str | None:
    if not isinstance(value, str) or not is_valid_date(value):
        return INVALID_DATE
    return None


def check_time(value: Any) -> str | None:
    if not isinstance(value, str) or not is_valid_time(value):
        return INVALID_TIME
    return None


def check_duration(value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return INVALID_DURATION
    if value <= 0 or value != int(value):
        return INVALID_DURATION
    return None


def local_now(context: SkillContext | None) -> datetime:
    """Current time in the agent's timezone; raises for an unknown zone."""
    return datetime.now(ZoneInfo(context.timezone if context is not None else "UTC"))


def display_locale(context: SkillContext | None) -> str:
    """Babel locale id for the agent; raises for an unknown locale."""
    locale = babel_locale(context.locale if context is not None else settings.default_locale)
    Locale.parse(locale)
    return locale


def group_by_date(entries: list[CalendarEntry]) -> dict[str, list[dict[str, Any]]]:
    grouped: dict[str, list[dict[str, Any]]] = {}
    for entry in entries:
        grouped.setdefault(entry.date, []).append(entry.model_dump())
    return grouped


async def week_view(
    store: CalendarStore, start: date, *, with_range: bool = True
) -> dict[str, Any]:
    """Entries of the calendar window starting at ``start``, grouped for display."""
    days = settings.calendar_window_days
    entries = await store.window(start, days)
    view: dict[str, Any] = {
        "entries": [e.model_dump() for e in entries],
        "entries_by_date": group_by_date(entries),
    }
    if with_range:
        view["week_start"] = start.isoformat()
        view["week_end"] = (window_end(start, days) or date.max).isoformat()
    return view


async def calendar_context(store: CalendarStore, now: datetime, locale: str) -> str:
    return await calendar_context_string(store, now=now, locale=locale)
