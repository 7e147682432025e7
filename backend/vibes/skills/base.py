from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import structlog

from vibes.config import settings
from vibes.schemas.agent import DataContextItem
from vibes.stores.calendar import CalendarStore
from vibes.stores.todos import TodoStore

log = structlog.get_logger()

Result = dict[str, Any]
Handler = Callable[[Mapping[str, Any] | None, "SkillContext | None"], Awaitable[Result]]
UILoader = Callable[[], Awaitable[dict[str, Any]]]
Schema = Mapping[str, Mapping[str, Any]]


@dataclass(frozen=True)
class SkillDescriptor:
    """Everything an orchestrator needs to run and render one skill."""

    skill_id: str
    handler: Handler
    ui_component: UILoader
    schema: Schema
    description: str = ""


def _coerce_items(value: Any) -> list[DataContextItem]:
    if value is None:
        return []
    if not isinstance(value, list | tuple):
        value = [value]
    return [
        item if isinstance(item, DataContextItem) else DataContextItem.model_validate(item)
        for item in value
        if item
    ]


class SkillContext:
    """Runtime context passed to every skill handler.

    Stores are handed in explicitly; a handler never reaches for a global.
    Data lookups check ``skill_data_context`` before ``raw_data_context``.
    """

    def __init__(
        self,
        user_id: str | None = None,
        agent_id: str | None = None,
        skill_data_context: Any = None,
        raw_data_context: Any = None,
        todos: TodoStore | None = None,
        calendar: CalendarStore | None = None,
        locale: str | None = None,
        timezone: str = "UTC",
    ):
        self.user_id = user_id
        self.agent_id = agent_id
        self.skill_data_context = _coerce_items(skill_data_context)
        self.raw_data_context = _coerce_items(raw_data_context)
        self.todos = todos
        self.calendar = calendar
        self.locale = locale or settings.default_locale
        self.timezone = timezone

    def find_data(self, source_id: str) -> tuple[DataContextItem | None, dict[str, Any] | None]:
        """Return ``(item, data)`` for ``source_id``.

        ``item`` is the last matching entry seen even when it carries no data,
        so callers can still read its ``error_message``.
        """
        item = None
        for source in (self.skill_data_context, self.raw_data_context):
            found = next((i for i in source if i.id == source_id), None)
            if found is None:
                continue
            item = found
            if found.data:
                return found, found.data
        return item, None


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat()


def ok(data: Any, **extra: Any) -> Result:
    return {"success": True, "data": data, **extra}


def fail(error: str) -> Result:
    return {"success": False, "error": error}


def skill_handler(failure_prefix: str) -> Callable[[Handler], Handler]:
    """Normalise ``args`` and turn any escaping exception into a failure envelope."""

    def decorator(func: Handler) -> Handler:
        @functools.wraps(func)
        async def wrapper(args: Mapping[str, Any] | None = None, context: SkillContext | None = None) -> Result:
            if args is None:
                args = {}
            elif not isinstance(args, Mapping):
                return fail("Arguments must be an object")
            try:
                return await func(args, context)
            except Exception as exc:
                log.exception("skill.handler_exception", handler=func.__module__)
                return fail(f"{failure_prefix}: {exc}")

        return wrapper

    return decorator


def require_store(context: SkillContext | None, attr: str) -> Any:
    store = getattr(context, attr, None) if context is not None else None
    if store is None:
        raise LookupError(f"{attr} store is not available in the skill context")
    return store


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()
