from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

import structlog

from vibes.stores.seed import CATALOGS

log = structlog.get_logger()

Catalog = dict[str, list[dict[str, Any]]]


class CatalogStore:
    """Named category → items catalogs (menu, wellness), held in memory."""

    def __init__(self, catalogs: Mapping[str, Catalog] | None = None) -> None:
        source = CATALOGS if catalogs is None else catalogs
        self._catalogs: dict[str, Catalog] = copy.deepcopy(dict(source))

    def catalog_ids(self) -> list[str]:
        return list(self._catalogs)

    async def get(self, catalog_id: str) -> Catalog | None:
        catalog = self._catalogs.get(catalog_id)
        return copy.deepcopy(catalog) if catalog is not None else None

    async def put(self, catalog_id: str, catalog: Catalog) -> None:
        self._catalogs[catalog_id] = copy.deepcopy(catalog)
        log.debug("catalog.replaced", catalog=catalog_id, categories=list(catalog))

    def getter(self, catalog_id: str):
        """Zero-argument coroutine function returning one catalog."""

        async def get_data() -> Catalog | None:
            return await self.get(catalog_id)

        return get_data
