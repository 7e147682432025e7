from __future__ import annotations

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from vibes.core.executor import SkillExecutor
from vibes.dependencies import get_executor
from vibes.errors import AgentConfigError, SkillLoadError
from vibes.schemas.invoke import InjectionReport, InvokeRequest, InvokeResponse, SkillSummary
from vibes.skills.registry import list_skill_ids, load_function
from vibes.skills.schema import tool_spec

log = structlog.get_logger()

router = APIRouter()


@router.get("", response_model=list[SkillSummary])
async def list_skills():
    """All registered skills with their LLM tool declarations."""
    summaries = []
    for skill_id in list_skill_ids():
        descriptor = await load_function(skill_id)
        view = (await descriptor.ui_component())["default"]
        summaries.append(
            SkillSummary(
                id=skill_id,
                description=descriptor.description,
                ui_view=view.name if view is not None else None,
                tool=tool_spec(skill_id, descriptor.schema, descriptor.description),
            )
        )
    return summaries


@router.post("/{skill_id}/invoke", response_model=InvokeResponse)
async def invoke_skill(
    skill_id: str,
    body: InvokeRequest,
    executor: Annotated[SkillExecutor, Depends(get_executor)],
):
    if skill_id not in list_skill_ids():
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"Unknown skill: {skill_id}")

    injected: list[dict[str, Any]] = []
    try:
        invocation = await executor.invoke(
            skill_id,
            body.args,
            agent_id=body.agent_id,
            user_id=body.user_id,
            inject_fn=injected.append,
        )
    except AgentConfigError as e:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(e))
    except SkillLoadError as e:
        log.error("skills.wiring_error", skill=skill_id, error=str(e))
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return InvokeResponse(
        skill_id=skill_id,
        result=invocation.result,
        injection=InjectionReport(
            status=invocation.injection.status.value, reason=invocation.injection.reason
        ),
        injected_context=injected,
    )
