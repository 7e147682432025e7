from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class InvokeRequest(BaseModel):
    agent_id: str = Field(..., min_length=1, description="Agent whose configuration applies")
    user_id: str | None = None
    args: dict[str, Any] = Field(default_factory=dict)


class InjectionReport(BaseModel):
    status: str
    reason: str | None = None


class InvokeResponse(BaseModel):
    skill_id: str
    result: dict[str, Any]
    injection: InjectionReport
    injected_context: list[dict[str, Any]] = Field(default_factory=list)


class SkillSummary(BaseModel):
    id: str
    description: str
    ui_view: str | None = None
    tool: dict[str, Any]
