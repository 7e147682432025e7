from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from vibes.agents.loader import AgentConfigLoader
from vibes.context.injection import ContextInjectionManager, InjectFn, InjectionOutcome, InjectionStatus
from vibes.core.validator import validate_args
from vibes.schemas.agent import AgentConfig, DataContextItem
from vibes.skills.base import SkillContext, fail
from vibes.skills.registry import load_function
from vibes.stores.calendar import CalendarStore
from vibes.stores.catalog import CatalogStore
from vibes.stores.todos import TodoStore

log = structlog.get_logger()


@dataclass(frozen=True)
class SkillInvocation:
    skill_id: str
    result: dict[str, Any]
    injection: InjectionOutcome


class SkillExecutor:
    """Runs one skill end to end: resolve, validate, handle, then inject context.

    Registry and agent lookup errors propagate; handler results are returned
    as-is; context injection is best effort and cannot alter the result.
    """

    def __init__(
        self,
        agents: AgentConfigLoader,
        injection: ContextInjectionManager,
        todos: TodoStore,
        calendar: CalendarStore,
        catalogs: CatalogStore,
    ) -> None:
        self.agents = agents
        self.injection = injection
        self.todos = todos
        self.calendar = calendar
        self.catalogs = catalogs

    async def _fill(self, items: list[DataContextItem]) -> list[DataContextItem]:
        filled = []
        for item in items:
            if item.data is None:
                data = await self.catalogs.get(item.id)
                if data is not None:
                    item = item.model_copy(update={"data": data})
            filled.append(item)
        return filled

    async def build_context(
        self, agent: AgentConfig, skill_id: str, user_id: str | None = None
    ) -> SkillContext:
        skill = agent.get_skill(skill_id)
        return SkillContext(
            user_id=user_id,
            agent_id=agent.id,
            skill_data_context=await self._fill(skill.data_context if skill else []),
            raw_data_context=await self._fill(agent.data_context),
            todos=self.todos,
            calendar=self.calendar,
            locale=agent.locale,
            timezone=agent.timezone,
        )

    async def invoke(
        self,
        skill_id: str,
        args: dict[str, Any] | None,
        *,
        agent_id: str,
        user_id: str | None = None,
        inject_fn: InjectFn | None = None,
    ) -> SkillInvocation:
        descriptor = await load_function(skill_id)
        agent = await self.agents.load(agent_id)

        problems = validate_args(descriptor.schema, args)
        if problems:
            log.info("executor.invalid_args", skill=skill_id, problems=problems)
            return SkillInvocation(
                skill_id=skill_id,
                result=fail("Invalid arguments: " + "; ".join(problems)),
                injection=InjectionOutcome(skill_id, InjectionStatus.skipped, "invalid arguments"),
            )

        context = await self.build_context(agent, skill_id, user_id)
        result = await descriptor.handler(args or {}, context)
        log.info("executor.skill_done", skill=skill_id, agent=agent_id, success=result.get("success"))

        injection = await self.injection.inject(skill_id, agent_id, inject_fn)
        if not injection.ok:
            log.warning("executor.injection_failed", skill=skill_id, reason=injection.reason)
        return SkillInvocation(skill_id=skill_id, result=result, injection=injection)
