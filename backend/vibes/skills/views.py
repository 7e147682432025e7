from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vibes.skills.base import UILoader


@dataclass(frozen=True)
class ViewRef:
    """Opaque handle to a client-side view; the renderer owns what it means."""

    name: str
    bundle: str


def view_loader(name: str, bundle: str | None = None) -> UILoader:
    view = ViewRef(name=name, bundle=bundle or f"views/{name}")

    async def load() -> dict[str, Any]:
        return {"default": view}

    load.__qualname__ = f"load_{name.replace('-', '_')}_view"
    return load


async def no_view() -> dict[str, Any]:
    """Default for skills whose view is bound by the registry instead."""
    return {"default": None}


CALENDAR_VIEW = view_loader("calendar")
MENU_VIEW = view_loader("menu")
WELLNESS_VIEW = view_loader("wellness")
TODO_VIEW = view_loader("todo-list")
