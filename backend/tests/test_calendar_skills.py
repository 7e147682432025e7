"""Tests for the calendar skill handlers."""

import pytest

from vibes.skills.base import SkillContext
from vibes.skills.calendar import (
    create_calendar_entry,
    delete_calendar_entry,
    edit_calendar_entry,
    view_calendar,
)

DENTIST = {"title": "Dentist", "date": "2025-03-04", "time": "10:00", "duration": 45}


@pytest.mark.asyncio
async def test_create_entry_returns_week_view(skill_context, calendar_store):
    result = await create_calendar_entry.handler(DENTIST, skill_context)

    assert result["success"] is True
    data = result["data"]
    assert data["entry"]["title"] == "Dentist"
    assert data["entry"]["description"] == ""
    assert data["week_start"] == "2025-03-04"
    assert data["week_end"] == "2025-03-11"
    assert list(data["entries_by_date"]) == ["2025-03-04"]
    assert data["entry"]["id"] in data["calendar_context"]
    assert "timestamp" in result
    assert len(await calendar_store.list()) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": None}, "Missing required fields"),
        ({"title": "  "}, "Missing required fields"),
        ({"duration": None}, "Missing required fields"),
        ({"date": "04.03.2025"}, "Invalid date format"),
        ({"date": "2025-02-30"}, "Invalid date format"),
        ({"time": "9:00"}, "Invalid time format"),
        ({"time": "25:00"}, "Invalid time format"),
        ({"duration": 0}, "Duration must be a positive"),
        ({"duration": -15}, "Duration must be a positive"),
        ({"duration": "45"}, "Duration must be a positive"),
        ({"duration": True}, "Duration must be a positive"),
        ({"duration": 12.5}, "Duration must be a positive"),
    ],
)
async def test_create_entry_validation(overrides, message, skill_context, calendar_store):
    args = {k: v for k, v in {**DENTIST, **overrides}.items() if v is not None}

    result = await create_calendar_entry.handler(args, skill_context)

    assert result["success"] is False
    assert message in result["error"]
    assert await calendar_store.list() == []


@pytest.mark.asyncio
async def test_edit_entry_updates_fields(skill_context, calendar_store):
    entry = await calendar_store.create(DENTIST)

    result = await edit_calendar_entry.handler(
        {"id": entry.id, "time": "11:30", "description": "bring x-rays"}, skill_context
    )

    assert result["success"] is True
    updated = result["data"]["entry"]
    assert updated["time"] == "11:30"
    assert updated["description"] == "bring x-rays"
    assert updated["title"] == "Dentist"
    assert updated["id"] == entry.id


@pytest.mark.asyncio
async def test_edit_entry_unknown_id(skill_context):
    result = await edit_calendar_entry.handler({"id": "entry_missing", "title": "x"}, skill_context)
    assert result["success"] is False
    assert 'Calendar entry with ID "entry_missing" not found' == result["error"]


@pytest.mark.asyncio
async def test_edit_entry_requires_a_field(skill_context, calendar_store):
    entry = await calendar_store.create(DENTIST)
    result = await edit_calendar_entry.handler({"id": entry.id}, skill_context)
    assert result == {"success": False, "error": "No fields provided to update"}


@pytest.mark.asyncio
async def test_edit_entry_invalid_field_leaves_entry_untouched(skill_context, calendar_store):
    entry = await calendar_store.create(DENTIST)

    result = await edit_calendar_entry.handler(
        {"id": entry.id, "title": "Renamed", "time": "noon"}, skill_context
    )

    assert result["success"] is False
    assert await calendar_store.get(entry.id) == entry


@pytest.mark.asyncio
async def test_delete_entry(skill_context, calendar_store):
    entry = await calendar_store.create(DENTIST)

    result = await delete_calendar_entry.handler({"id": entry.id}, skill_context)
    again = await delete_calendar_entry.handler({"id": entry.id}, skill_context)

    assert result["success"] is True
    assert result["data"]["deleted"]["id"] == entry.id
    assert result["data"]["entries"] == []
    assert again["success"] is False
    assert await calendar_store.list() == []


@pytest.mark.asyncio
async def test_view_calendar_with_date(skill_context, calendar_store):
    await calendar_store.create(DENTIST)
    await calendar_store.create({**DENTIST, "title": "Gym", "date": "2025-03-20"})

    result = await view_calendar.handler({"date": "2025-03-01"}, skill_context)

    assert result["success"] is True
    data = result["data"]
    assert [e["title"] for e in data["entries"]] == ["Dentist"]
    assert data["week_start"] == "2025-03-01"
    assert data["week_end"] == "2025-03-08"
    assert set(data["current_date"]) == {"iso", "formatted", "time", "timestamp"}
    assert "Total: 2 entries" in data["calendar_context"]


@pytest.mark.asyncio
async def test_view_calendar_without_date_omits_range(skill_context):
    result = await view_calendar.handler({}, skill_context)
    assert result["success"] is True
    assert "week_start" not in result["data"]
    assert result["data"]["entries"] == []


@pytest.mark.asyncio
async def test_view_calendar_rejects_bad_date(skill_context):
    result = await view_calendar.handler({"date": "tomorrow"}, skill_context)
    assert result == {"success": False, "error": "Invalid date format. Use YYYY-MM-DD format"}


@pytest.mark.asyncio
async def test_view_calendar_without_store():
    result = await view_calendar.handler({"date": "2025-03-01"}, None)
    assert result["success"] is False
    assert result["error"].startswith("Failed to load calendar")


@pytest.mark.asyncio
async def test_create_entry_at_end_of_calendar(skill_context, calendar_store):
    result = await create_calendar_entry.handler({**DENTIST, "title": "Year end", "date": "9999-12-30"}, skill_context)

    assert result["success"] is True
    assert result["data"]["week_end"] == "9999-12-31"
    assert [e["title"] for e in result["data"]["entries"]] == ["Year end"]
    assert len(calendar_store) == 1


@pytest.fixture
def broken_contexts(calendar_store):
    return [
        SkillContext(calendar=calendar_store, locale="klingon"),
        SkillContext(calendar=calendar_store, timezone="Mars/Olympus_Mons"),
    ]


@pytest.mark.asyncio
async def test_create_entry_with_bad_agent_settings_saves_nothing(broken_contexts, calendar_store):
    for context in broken_contexts:
        result = await create_calendar_entry.handler(DENTIST, context)

        assert result["success"] is False
        assert result["error"].startswith("Failed to create calendar entry")
    assert await calendar_store.list() == []


@pytest.mark.asyncio
async def test_edit_entry_with_bad_agent_settings_changes_nothing(broken_contexts, calendar_store):
    entry = await calendar_store.create(DENTIST)

    for context in broken_contexts:
        result = await edit_calendar_entry.handler({"id": entry.id, "title": "Moved"}, context)
        assert result["success"] is False

    assert await calendar_store.get(entry.id) == entry


@pytest.mark.asyncio
async def test_delete_entry_with_bad_agent_settings_keeps_entry(broken_contexts, calendar_store):
    entry = await calendar_store.create(DENTIST)

    for context in broken_contexts:
        result = await delete_calendar_entry.handler({"id": entry.id}, context)
        assert result["success"] is False

    assert await calendar_store.list() == [entry]


@pytest.mark.asyncio
@pytest.mark.parametrize("zone, offset", [("Pacific/Kiritimati", "+14:00"), ("Etc/GMT+12", "-12:00")])
async def test_view_calendar_uses_agent_timezone(calendar_store, zone, offset):
    context = SkillContext(calendar=calendar_store, locale="en-US", timezone=zone)

    result = await view_calendar.handler({}, context)

    current = result["data"]["current_date"]
    assert current["timestamp"].endswith(offset)
    assert f"- Date: {current['formatted']} ({current['iso']})" in result["data"]["calendar_context"]
    assert result["data"]["timestamp"].endswith("+00:00")
