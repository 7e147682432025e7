from __future__ import annotations

from vibes.schemas.todo import Todo
from vibes.stores.base import InMemoryStore


class TodoStore(InMemoryStore[Todo]):
    model = Todo
    id_prefix = "todo"
    name = "todos"

    async def toggle(self, item_id: str) -> Todo | None:
        current = self._items.get(item_id)
        if current is None:
            return None
        return self._replace(item_id, {"completed": not current.completed})
