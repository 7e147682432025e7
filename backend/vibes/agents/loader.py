from __future__ import annotations

import re
import tomllib
from pathlib import Path

import structlog
from pydantic import ValidationError

from vibes.config import settings
from vibes.errors import AgentConfigError
from vibes.schemas.agent import AgentConfig

log = structlog.get_logger()

_AGENT_ID_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class AgentConfigLoader:
    """Reads ``<agent_id>.toml`` files from a directory and caches the result.

    File layout::

        [agent]
        id = "charles"
        name = "Charles"

        [[skills]]
        id = "show-menu"

        [skills.context_config]
        instructions = ["..."]
    """

    def __init__(self, agents_dir: Path | None = None) -> None:
        self.agents_dir = Path(agents_dir or settings.agents_dir)
        self._cache: dict[str, AgentConfig] = {}

    def available(self) -> list[str]:
        if not self.agents_dir.is_dir():
            return []
        return sorted(p.stem for p in self.agents_dir.glob("*.toml"))

    async def load(self, agent_id: str) -> AgentConfig:
        cached = self._cache.get(agent_id)
        if cached is not None:
            return cached

        if not _AGENT_ID_RE.match(agent_id):
            raise AgentConfigError(f"Invalid agent id: {agent_id!r}")

        path = self.agents_dir / f"{agent_id}.toml"
        if not path.exists():
            raise AgentConfigError(f"Agent not found: {agent_id}")

        with open(path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise AgentConfigError(f"Agent {agent_id} has invalid TOML: {exc}") from exc

        try:
            config = AgentConfig.model_validate(
                {
                    **data.get("agent", {}),
                    "skills": data.get("skills", []),
                    "data_context": data.get("data_context", []),
                }
            )
        except ValidationError as exc:
            raise AgentConfigError(f"Agent {agent_id} is invalid: {exc}") from exc

        if config.id != agent_id:
            raise AgentConfigError(f"Agent file {path.name} declares id {config.id!r}")

        self._cache[agent_id] = config
        log.debug("agents.loaded", agent=agent_id, skills=[s.id for s in config.skills])
        return config

    def clear(self) -> None:
        self._cache.clear()
