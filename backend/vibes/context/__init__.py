from vibes.context.injection import (
    ContextInjectionManager,
    ContextSource,
    InjectionOutcome,
    InjectionStatus,
    build_default_sources,
)

__all__ = [
    "ContextInjectionManager",
    "ContextSource",
    "InjectionOutcome",
    "InjectionStatus",
    "build_default_sources",
]
