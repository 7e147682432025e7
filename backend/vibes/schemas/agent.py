from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from pydantic import BaseModel, ConfigDict, Field, field_validator


def check_locale(value: str) -> str:
    try:
        Locale.parse(value.replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise ValueError(f"unknown locale {value!r}") from exc
    return value


def check_timezone(value: str) -> str:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown timezone {value!r}") from exc
    return value


class CurrencyConfig(BaseModel):
    code: str = "EUR"
    locale: str = "de-DE"

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        return check_locale(value)


class ContextFormatterConfig(BaseModel):
    """Per-skill settings for turning catalog data into model context.

    Every field is optional; the formatter falls back to its own defaults.
    ``category_names`` is ordered and its order drives the output order.
    """

    instructions: list[str] | None = None
    reminder: str | None = None
    category_names: dict[str, str] | None = None
    currency: CurrencyConfig | None = None


class DataContextItem(BaseModel):
    """A named data bag attached to an agent or to one of its skills."""

    model_config = ConfigDict(extra="allow")

    id: str
    data: dict[str, Any] | None = None
    error_message: str | None = None


class AgentSkillConfig(BaseModel):
    id: str
    context_config: ContextFormatterConfig | None = None
    data_context: list[DataContextItem] = Field(default_factory=list)


class AgentConfig(BaseModel):
    id: str
    name: str
    locale: str = "de-DE"
    timezone: str = "UTC"
    skills: list[AgentSkillConfig] = Field(default_factory=list)
    data_context: list[DataContextItem] = Field(
        default_factory=list, description="Agent-wide data, used when a skill has none of its own"
    )

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, value: str) -> str:
        return check_locale(value)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        return check_timezone(value)

    def get_skill(self, skill_id: str) -> AgentSkillConfig | None:
        for skill in self.skills:
            if skill.id == skill_id:
                return skill
        return None
