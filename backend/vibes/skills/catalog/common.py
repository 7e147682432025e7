from __future__ import annotations

from typing import Any

import structlog

from vibes.skills.base import SkillContext, fail, ok, utc_now_iso

log = structlog.get_logger()


def show_catalog(
    args: dict[str, Any],
    context: SkillContext | None,
    *,
    source_id: str,
    default_error: str,
) -> dict[str, Any]:
    """Read a category → items catalog from the injected data context.

    The skill-scoped data context wins over the agent-wide one; when neither
    has data the failure message may come from the matching context item.
    """
    category = args.get("category")
    if category is not None and not isinstance(category, str):
        return fail("Category must be a string if provided")

    item, catalog = context.find_data(source_id) if context is not None else (None, None)
    if not catalog:
        log.warning("catalog.not_found", source=source_id, agent=getattr(context, "agent_id", None))
        return fail((item.error_message if item else None) or default_error)

    selected = {category: catalog.get(category, [])} if category else catalog
    return ok(
        {
            source_id: selected,
            "category": category or "all",
            "timestamp": utc_now_iso(),
        }
    )
