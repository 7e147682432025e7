"""Resolve a skill id to its handler, UI loader and argument schema.

Skill ids form a closed set. Each id maps to the module that implements it;
the module must export ``handler``, ``ui_component`` and ``schema``. Exports
are checked when a skill is resolved, and a missing or mistyped export is a
wiring defect that raises :class:`SkillLoadError`.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping
from enum import StrEnum

import structlog

from vibes.errors import SkillLoadError
from vibes.skills.base import SkillDescriptor, UILoader
from vibes.skills.views import CALENDAR_VIEW, MENU_VIEW, TODO_VIEW, WELLNESS_VIEW

log = structlog.get_logger()


class SkillId(StrEnum):
    show_menu = "show-menu"
    show_wellness = "show-wellness"
    view_calendar = "view-calendar"
    create_calendar_entry = "create-calendar-entry"
    edit_calendar_entry = "edit-calendar-entry"
    delete_calendar_entry = "delete-calendar-entry"
    create_todo = "create-todo"
    query_todos = "query-todos"
    edit_todo = "edit-todo"
    toggle_todo = "toggle-todo"
    delete_todo = "delete-todo"


SKILL_MODULES: dict[SkillId, str] = {
    SkillId.show_menu: "vibes.skills.catalog.show_menu",
    SkillId.show_wellness: "vibes.skills.catalog.show_wellness",
    SkillId.view_calendar: "vibes.skills.calendar.view_calendar",
    SkillId.create_calendar_entry: "vibes.skills.calendar.create_calendar_entry",
    SkillId.edit_calendar_entry: "vibes.skills.calendar.edit_calendar_entry",
    SkillId.delete_calendar_entry: "vibes.skills.calendar.delete_calendar_entry",
    SkillId.create_todo: "vibes.skills.todos.create_todo",
    SkillId.query_todos: "vibes.skills.todos.query_todos",
    SkillId.edit_todo: "vibes.skills.todos.edit_todo",
    SkillId.toggle_todo: "vibes.skills.todos.toggle_todo",
    SkillId.delete_todo: "vibes.skills.todos.delete_todo",
}

# View bound to each skill, regardless of its module's own export.
UI_OVERRIDES: dict[SkillId, UILoader] = {
    SkillId.show_menu: MENU_VIEW,
    SkillId.show_wellness: WELLNESS_VIEW,
    SkillId.view_calendar: CALENDAR_VIEW,
    SkillId.create_calendar_entry: CALENDAR_VIEW,
    SkillId.edit_calendar_entry: CALENDAR_VIEW,
    SkillId.delete_calendar_entry: CALENDAR_VIEW,
    SkillId.create_todo: TODO_VIEW,
    SkillId.query_todos: TODO_VIEW,
    SkillId.edit_todo: TODO_VIEW,
    SkillId.toggle_todo: TODO_VIEW,
    SkillId.delete_todo: TODO_VIEW,
}

_missing = set(SkillId) - set(SKILL_MODULES)
if _missing:
    raise RuntimeError(f"Skills without a module: {sorted(_missing)}")
_unbound = set(SkillId) - set(UI_OVERRIDES)
if _unbound:
    raise RuntimeError(f"Skills without a view: {sorted(_unbound)}")

_CACHE: dict[SkillId, SkillDescriptor] = {}


def list_skill_ids() -> list[str]:
    return [s.value for s in SkillId]


def _parse_id(function_id: str) -> SkillId:
    try:
        return SkillId(function_id)
    except ValueError:
        raise SkillLoadError(function_id, "unknown skill id") from None


def resolve(function_id: str) -> SkillDescriptor:
    """Import the skill's module and check its exports."""
    skill_id = _parse_id(function_id)
    cached = _CACHE.get(skill_id)
    if cached is not None:
        return cached

    module_path = SKILL_MODULES[skill_id]
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as exc:
        if exc.name != module_path:
            log.exception("registry.module_failed", skill=skill_id.value, module=module_path)
            raise SkillLoadError(skill_id.value, f"module {module_path} failed to import: {exc}") from exc
        log.error("registry.module_missing", skill=skill_id.value, module=module_path)
        raise SkillLoadError(skill_id.value, f"module {module_path} not found") from exc
    except Exception as exc:
        log.exception("registry.module_failed", skill=skill_id.value, module=module_path)
        raise SkillLoadError(skill_id.value, f"module {module_path} failed to import: {exc}") from exc

    handler = getattr(module, "handler", None)
    if handler is None or not callable(handler):
        raise SkillLoadError(skill_id.value, "export 'handler' is missing or not callable")

    ui_component = getattr(module, "ui_component", None)
    if ui_component is None or not callable(ui_component):
        raise SkillLoadError(skill_id.value, "export 'ui_component' is missing or not callable")
    ui_component = UI_OVERRIDES[skill_id]

    schema = getattr(module, "schema", None)
    if schema is None or not isinstance(schema, Mapping):
        raise SkillLoadError(skill_id.value, "export 'schema' is missing or not a mapping")

    descriptor = SkillDescriptor(
        skill_id=skill_id.value,
        handler=handler,
        ui_component=ui_component,
        schema=schema,
        description=getattr(module, "description", ""),
    )
    _CACHE[skill_id] = descriptor
    log.debug("registry.resolved", skill=skill_id.value, module=module_path)
    return descriptor


async def load_function(function_id: str) -> SkillDescriptor:
    """Async entry point used by orchestrators; raises :class:`SkillLoadError`."""
    return resolve(function_id)


def clear_cache() -> None:
    _CACHE.clear()
