"""Show the restaurant menu, optionally a single category."""

from __future__ import annotations

from typing import Any

from vibes.skills.base import SkillContext, skill_handler
from vibes.skills.catalog.common import show_catalog
from vibes.skills.views import no_view

description = "Show the restaurant menu grouped by category."

CATEGORIES = ["appetizers", "mains", "desserts", "drinks"]


@skill_handler("Failed to load menu")
async def handler(args: dict[str, Any], context: SkillContext | None) -> dict[str, Any]:
    return show_catalog(
        args,
        context,
        source_id="menu",
        default_error="Menu data not found in agent configuration",
    )


ui_component = no_view

schema = {
    "category": {
        "type": "string",
        "optional": True,
        "enum": CATEGORIES,
        "description": "Menu category filter",
    },
}
