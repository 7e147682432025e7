from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from fastapi import Request

from vibes.agents.loader import AgentConfigLoader
from vibes.context.injection import ContextInjectionManager, build_default_sources
from vibes.core.executor import SkillExecutor
from vibes.stores.calendar import CalendarStore
from vibes.stores.catalog import CatalogStore
from vibes.stores.todos import TodoStore


@dataclass
class Runtime:
    """The stores and services one application instance shares.

    Built once by the application factory; every request sees the same
    stores until the process exits.
    """

    todos: TodoStore
    calendar: CalendarStore
    catalogs: CatalogStore
    agents: AgentConfigLoader
    injection: ContextInjectionManager
    executor: SkillExecutor


def create_runtime(agents_dir: Path | None = None) -> Runtime:
    todos = TodoStore()
    calendar = CalendarStore()
    catalogs = CatalogStore()
    agents = AgentConfigLoader(agents_dir)
    injection = ContextInjectionManager(agents.load, build_default_sources(calendar, catalogs))
    executor = SkillExecutor(agents, injection, todos=todos, calendar=calendar, catalogs=catalogs)
    return Runtime(
        todos=todos,
        calendar=calendar,
        catalogs=catalogs,
        agents=agents,
        injection=injection,
        executor=executor,
    )


def get_runtime(request: Request) -> Runtime:
    return request.app.state.runtime


def get_executor(request: Request) -> SkillExecutor:
    return get_runtime(request).executor
