from __future__ import annotations


class VibesError(Exception):
    """Base class for errors raised by the skill runtime."""


class SkillLoadError(VibesError, LookupError):
    """A skill id could not be resolved to a complete handler/ui/schema triple."""

    def __init__(self, skill_id: str, reason: str) -> None:
        self.skill_id = skill_id
        self.reason = reason
        super().__init__(f"Cannot load skill '{skill_id}': {reason}")


class StoreError(VibesError):
    """An in-memory store rejected an operation; the store is left unchanged."""


class AgentConfigError(VibesError, LookupError):
    """An agent configuration is missing or malformed."""


class ContextConfigMissing(VibesError):
    """A data-backed context formatter was invoked without its config."""

    def __init__(self, skill_id: str, agent_id: str) -> None:
        self.skill_id = skill_id
        self.agent_id = agent_id
        super().__init__(
            f"Skill {skill_id} requires context_config but it is missing in agent {agent_id}"
        )
