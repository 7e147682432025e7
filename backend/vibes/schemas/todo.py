from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(..., min_length=1)
    completed: bool = False
