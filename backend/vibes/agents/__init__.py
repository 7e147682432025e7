from vibes.agents.loader import AgentConfigLoader

__all__ = ["AgentConfigLoader"]
