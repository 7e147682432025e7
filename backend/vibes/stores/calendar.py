from __future__ import annotations

from datetime import date, timedelta

from vibes.schemas.calendar import CalendarEntry
from vibes.stores.base import InMemoryStore


def window_end(start: date, days: int) -> date | None:
    """Exclusive end of a ``days`` long window; ``None`` when it runs past ``date.max``."""
    try:
        return start + timedelta(days=days)
    except OverflowError:
        return None


class CalendarStore(InMemoryStore[CalendarEntry]):
    model = CalendarEntry
    id_prefix = "entry"
    name = "calendar"

    async def window(self, start: date, days: int = 7) -> list[CalendarEntry]:
        """Entries with ``start <= date < start + days``, ordered by date then time."""
        end = window_end(start, days)
        entries = [
            e for e in self._items.values() if start <= e.day and (end is None or e.day < end)
        ]
        entries.sort(key=lambda e: (e.date, e.time))
        return entries
