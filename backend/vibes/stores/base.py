from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from vibes.errors import StoreError

log = structlog.get_logger()

ItemT = TypeVar("ItemT", bound=BaseModel)


def _normalize(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v.strip() if isinstance(v, str) else v for k, v in fields.items() if k != "id"}


class InMemoryStore(Generic[ItemT]):
    """Process-lifetime collection of items keyed by a generated id.

    Nothing is persisted: a fresh store starts empty and everything is gone
    when the owning process exits. Each mutation completes without awaiting,
    so concurrent coroutines on one event loop never observe a half-applied
    change.
    """

    model: ClassVar[type[BaseModel]]
    id_prefix: ClassVar[str] = "item"
    name: ClassVar[str] = "store"

    def __init__(self, items: Iterable[ItemT] = ()) -> None:
        self._items: dict[str, ItemT] = {}
        for item in items:
            if item.id in self._items:
                raise StoreError(f"Duplicate id in {self.name}: {item.id}")
            self._items[item.id] = item

    def _new_id(self) -> str:
        while True:
            item_id = f"{self.id_prefix}_{uuid.uuid4().hex}"
            if item_id not in self._items:
                return item_id

    def _build(self, data: dict[str, Any]) -> ItemT:
        try:
            return self.model.model_validate(data)  # type: ignore[return-value]
        except ValidationError as exc:
            raise StoreError(f"Invalid {self.name} item: {exc.errors()[0]['msg']}") from exc

    def _replace(self, item_id: str, patch: Mapping[str, Any]) -> ItemT | None:
        current = self._items.get(item_id)
        if current is None:
            return None
        data = current.model_dump()
        data.update(_normalize(patch))
        data["id"] = item_id
        updated = self._build(data)
        self._items[item_id] = updated
        log.debug("store.updated", store=self.name, id=item_id, fields=sorted(patch))
        return updated

    async def list(self) -> list[ItemT]:
        """Snapshot of all items in insertion order."""
        return list(self._items.values())

    async def get(self, item_id: str) -> ItemT | None:
        return self._items.get(item_id)

    async def create(self, fields: Mapping[str, Any]) -> ItemT:
        item = self._build({**_normalize(fields), "id": self._new_id()})
        self._items[item.id] = item
        log.debug("store.created", store=self.name, id=item.id, size=len(self))
        return item

    async def update(self, item_id: str, patch: Mapping[str, Any]) -> ItemT | None:
        """Replace the item with its fields merged with ``patch``; ``None`` if unknown."""
        return self._replace(item_id, patch)

    async def delete(self, item_id: str) -> bool:
        if self._items.pop(item_id, None) is None:
            return False
        log.debug("store.deleted", store=self.name, id=item_id, size=len(self))
        return True

    def __len__(self) -> int:
        return len(self._items)
