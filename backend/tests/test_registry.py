"""Tests for skill resolution."""

import sys
import types

import pytest

from vibes.errors import SkillLoadError
from vibes.skills import registry
from vibes.skills.registry import SkillId, list_skill_ids, load_function, resolve
from vibes.skills.views import ViewRef


@pytest.mark.asyncio
@pytest.mark.parametrize("skill_id", list_skill_ids())
async def test_every_skill_resolves(skill_id):
    descriptor = await load_function(skill_id)

    assert descriptor.skill_id == skill_id
    assert callable(descriptor.handler)
    assert callable(descriptor.ui_component)
    assert isinstance(descriptor.schema, dict)
    assert descriptor.description


@pytest.mark.asyncio
async def test_calendar_skills_share_the_calendar_view():
    views = set()
    for skill_id in ["view-calendar", "create-calendar-entry", "edit-calendar-entry", "delete-calendar-entry"]:
        descriptor = await load_function(skill_id)
        views.add((await descriptor.ui_component())["default"])
    assert views == {ViewRef(name="calendar", bundle="views/calendar")}


@pytest.mark.asyncio
async def test_todo_skills_share_the_todo_view():
    views = set()
    for skill_id in ["create-todo", "query-todos", "edit-todo", "toggle-todo", "delete-todo"]:
        descriptor = await load_function(skill_id)
        views.add((await descriptor.ui_component())["default"])
    assert views == {ViewRef(name="todo-list", bundle="views/todo-list")}


def test_every_skill_has_a_bound_view():
    assert set(registry.UI_OVERRIDES) == set(SkillId)


@pytest.mark.asyncio
async def test_unknown_skill_rejected():
    with pytest.raises(SkillLoadError, match="unknown skill id") as exc_info:
        await load_function("launch-rocket")
    assert exc_info.value.skill_id == "launch-rocket"


def _fake_module(monkeypatch, **exports):
    module = types.ModuleType("fake_skill_module")
    for name, value in exports.items():
        setattr(module, name, value)
    monkeypatch.setitem(sys.modules, "fake_skill_module", module)
    monkeypatch.setitem(registry.SKILL_MODULES, SkillId.show_menu, "fake_skill_module")


async def _handler(args, context):
    return {"success": True, "data": None}


async def _ui():
    return {"default": None}


@pytest.mark.asyncio
async def test_missing_schema_names_skill_and_export(monkeypatch):
    _fake_module(monkeypatch, handler=_handler, ui_component=_ui)

    with pytest.raises(SkillLoadError) as exc_info:
        await load_function("show-menu")

    message = str(exc_info.value)
    assert "show-menu" in message
    assert "schema" in message


@pytest.mark.parametrize(
    "exports, missing",
    [
        ({"ui_component": _ui, "schema": {}}, "handler"),
        ({"handler": "not callable", "ui_component": _ui, "schema": {}}, "handler"),
        ({"handler": _handler, "schema": {}}, "ui_component"),
        ({"handler": _handler, "ui_component": _ui, "schema": ["category"]}, "schema"),
    ],
)
def test_bad_exports_rejected(monkeypatch, exports, missing):
    _fake_module(monkeypatch, **exports)
    with pytest.raises(SkillLoadError, match=missing):
        resolve("show-menu")


def test_empty_schema_is_allowed(monkeypatch):
    _fake_module(monkeypatch, handler=_handler, ui_component=_ui, schema={})
    assert resolve("show-menu").schema == {}


def test_missing_module_rejected(monkeypatch):
    monkeypatch.setitem(registry.SKILL_MODULES, SkillId.view_calendar, "vibes.skills.calendar.nope")
    with pytest.raises(SkillLoadError, match="view-calendar"):
        resolve("view-calendar")


def test_resolution_is_cached():
    assert resolve("toggle-todo") is resolve("toggle-todo")


def test_every_skill_id_has_a_module():
    assert set(registry.SKILL_MODULES) == set(SkillId)


def _failing_import(exc):
    def import_module(name):
        raise exc

    return import_module


def test_import_time_error_wrapped(monkeypatch):
    boom = RuntimeError("bad module state")
    monkeypatch.setattr(registry.importlib, "import_module", _failing_import(boom))

    with pytest.raises(SkillLoadError, match="failed to import") as exc_info:
        resolve("show-menu")

    assert exc_info.value.skill_id == "show-menu"
    assert exc_info.value.__cause__ is boom


def test_missing_dependency_is_not_reported_as_missing_module(monkeypatch):
    missing = ModuleNotFoundError("No module named 'somelib'", name="somelib")
    monkeypatch.setattr(registry.importlib, "import_module", _failing_import(missing))

    with pytest.raises(SkillLoadError) as exc_info:
        resolve("show-menu")

    assert "failed to import" in str(exc_info.value)
    assert "not found" not in str(exc_info.value)
    assert exc_info.value.__cause__ is missing
