from __future__ import annotations

from typing import Any

from vibes.skills.base import SkillContext, skill_handler
from vibes.skills.catalog.common import show_catalog
from vibes.skills.views import no_view

description = "Show wellness and spa services grouped by category."

CATEGORIES = ["massages", "treatments", "packages", "facilities"]


@skill_handler("Failed to load wellness services")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    return show_catalog(
        args,
        context,
        source_id="wellness",
        default_error="Wellness data not found in agent configuration",
    )


ui_component = no_view

schema = {
    "category": {
        "type": "string",
        "optional": True,
        "enum": CATEGORIES,
        "description": "Wellness category filter",
    },
}
