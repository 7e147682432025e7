"""Best-effort injection of formatted domain context into a model session.

Injection never gates a skill: every failure is logged and reported through
the returned :class:`InjectionOutcome`, never raised.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any
from zoneinfo import ZoneInfo

import structlog

from vibes.context.formatters import calendar_context_string, menu_context_string, wellness_context_string
from vibes.errors import ContextConfigMissing
from vibes.schemas.agent import AgentConfig
from vibes.stores.calendar import CalendarStore
from vibes.stores.catalog import CatalogStore

log = structlog.get_logger()

Formatter = Callable[..., str | Awaitable[str]]
InjectFn = Callable[[dict[str, Any]], Any]
AgentLoader = Callable[[str], Awaitable[AgentConfig]]


@dataclass(frozen=True)
class ContextSource:
    """How to build the context string for one skill.

    With ``get_data`` set, the formatter is called as ``formatter(data, config)``
    and the agent must supply a ``context_config`` for the skill. Otherwise it
    is called as ``formatter(agent)`` when ``needs_agent`` is set, else with no
    arguments.
    """

    formatter: Formatter
    get_data: Callable[[], Awaitable[Any]] | None = None
    needs_agent: bool = False


class InjectionStatus(StrEnum):
    injected = "injected"
    skipped = "skipped"
    failed = "failed"


@dataclass(frozen=True)
class InjectionOutcome:
    skill_id: str
    status: InjectionStatus
    reason: str | None = None
    content: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != InjectionStatus.failed


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class ContextInjectionManager:
    def __init__(
        self,
        agent_loader: AgentLoader,
        sources: dict[str, ContextSource] | None = None,
    ) -> None:
        self._load_agent = agent_loader
        self._sources: dict[str, ContextSource] = dict(sources or {})

    def register(self, skill_id: str, source: ContextSource | Formatter) -> None:
        """Bind a context source for ``skill_id``, replacing any previous one."""
        if not isinstance(source, ContextSource):
            source = ContextSource(formatter=source)
        self._sources[skill_id] = source
        log.debug("context.registered", skill=skill_id, fetches_data=source.get_data is not None)

    def has_formatter(self, skill_id: str) -> bool:
        return skill_id in self._sources

    async def build(self, skill_id: str, agent_id: str) -> str | None:
        """Format the context for ``skill_id``; ``None`` when the skill has none.

        Unlike :meth:`inject`, errors propagate.
        """
        source = self._sources.get(skill_id)
        if source is None:
            return None

        agent = await self._load_agent(agent_id)
        skill = agent.get_skill(skill_id)
        if skill is None:
            log.warning("context.skill_not_in_agent", skill=skill_id, agent=agent_id)
            return None

        if source.get_data is not None:
            data = await source.get_data()
            if skill.context_config is None:
                raise ContextConfigMissing(skill_id, agent_id)
            return await _maybe_await(source.formatter(data, skill.context_config))
        if source.needs_agent:
            return await _maybe_await(source.formatter(agent))
        return await _maybe_await(source.formatter())

    async def inject(
        self,
        skill_id: str,
        agent_id: str,
        inject_fn: InjectFn | None = None,
    ) -> InjectionOutcome:
        try:
            if not self.has_formatter(skill_id):
                return InjectionOutcome(skill_id, InjectionStatus.skipped, "no context formatter")

            content = await self.build(skill_id, agent_id)
            if content is None:
                return InjectionOutcome(skill_id, InjectionStatus.skipped, "skill not configured for agent")
            if not content:
                log.warning("context.empty", skill=skill_id, agent=agent_id)
                return InjectionOutcome(skill_id, InjectionStatus.skipped, "empty context")

            if inject_fn is None:
                return InjectionOutcome(
                    skill_id, InjectionStatus.skipped, "no injection callback", content=content
                )
            await _maybe_await(inject_fn({"turns": content, "turnComplete": True}))
            log.info("context.injected", skill=skill_id, agent=agent_id, chars=len(content))
            return InjectionOutcome(skill_id, InjectionStatus.injected, content=content)
        except Exception as exc:
            log.exception("context.injection_failed", skill=skill_id, agent=agent_id)
            return InjectionOutcome(skill_id, InjectionStatus.failed, reason=str(exc) or type(exc).__name__)


CALENDAR_SKILLS = (
    "view-calendar",
    "create-calendar-entry",
    "edit-calendar-entry",
    "delete-calendar-entry",
)


async def agent_calendar_context(calendar: CalendarStore, agent: AgentConfig) -> str:
    """Calendar context on the agent's clock and in its locale."""
    now = datetime.now(ZoneInfo(agent.timezone))
    return await calendar_context_string(calendar, now=now, locale=agent.locale)


def build_default_sources(calendar: CalendarStore, catalogs: CatalogStore) -> dict[str, ContextSource]:
    sources = {
        "show-menu": ContextSource(formatter=menu_context_string, get_data=catalogs.getter("menu")),
        "show-wellness": ContextSource(
            formatter=wellness_context_string, get_data=catalogs.getter("wellness")
        ),
    }
    calendar_source = ContextSource(
        formatter=functools.partial(agent_calendar_context, calendar), needs_agent=True
    )
    for skill_id in CALENDAR_SKILLS:
        sources[skill_id] = calendar_source
    return sources
