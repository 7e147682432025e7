from vibes.skills.base import SkillContext, SkillDescriptor
from vibes.skills.registry import SkillId, load_function, resolve

__all__ = ["SkillContext", "SkillDescriptor", "SkillId", "load_function", "resolve"]
