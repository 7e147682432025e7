from __future__ import annotations

import re
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^\d{2}:\d{2}$")


def is_valid_date(value: str) -> bool:
    if not DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def is_valid_time(value: str) -> bool:
    if not TIME_RE.match(value):
        return False
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return False
    return True


class CalendarEntry(BaseModel):
    """A single appointment held by the calendar store."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(..., min_length=1)
    date: str = Field(..., description="Date in YYYY-MM-DD format")
    time: str = Field(..., description="Start time in HH:MM format (24-hour)")
    duration: int = Field(..., gt=0, description="Duration in minutes")
    description: str = ""

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        if not is_valid_date(value):
            raise ValueError("date must be a valid YYYY-MM-DD date")
        return value

    @field_validator("time")
    @classmethod
    def check_time(cls, value: str) -> str:
        if not is_valid_time(value):
            raise ValueError("time must be a valid HH:MM time")
        return value

    @property
    def day(self) -> date:
        return date.fromisoformat(self.date)

    @property
    def end_time(self) -> str:
        """End time as HH:MM, wrapping past midnight."""
        hours, minutes = (int(part) for part in self.time.split(":"))
        end = hours * 60 + minutes + self.duration
        return f"{(end // 60) % 24:02d}:{end % 60:02d}"
