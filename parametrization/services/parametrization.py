"""
Parametrization service.

CRUD over toggles with a read-through, write-invalidate cache.

Read paths go through ``CacheBackend.get_or_compute``:
- list_all   -> COLLECTION_CACHE["all"]
- get_by_id  -> RECORD_CACHE["id:<id>"]
- get_by_key -> RECORD_CACHE["key:<key>"]

Write paths always hit the store first and evict afterwards, whole
namespaces at a time:

    operation         store call              evicts
    ---------------   ---------------------   --------------------
    save              save                    collection
    set_enabled       update_enabled_state    record, collection
    delete            delete_by_id            record, collection
    delete_no_cache   delete_by_id            nothing

``save`` leaves per-record entries alone, so a cached get_by_id/get_by_key
can return the previous version of a record after it is updated.
``delete_no_cache`` leaves every entry alone, so a deleted record stays
readable from the cache until some other write evicts the namespaces.
Both gaps are part of the contract.
"""

from typing import Optional

import structlog

from parametrization.core.cache import CacheNamespace, business_key, id_key
from parametrization.core.interfaces import CacheBackend, RecordStore
from parametrization.schemas.parametrization import ToggleRecord

logger = structlog.get_logger()


RECORD_CACHE = CacheNamespace("record", Optional[ToggleRecord])
COLLECTION_CACHE = CacheNamespace("collection", list[ToggleRecord])

COLLECTION_KEY = "all"


class ParametrizationService:
    """Toggle management over a record store and a cache."""

    def __init__(self, store: RecordStore, cache: CacheBackend):
        self.store = store
        self.cache = cache

    # ============================================================
    # READS
    # ============================================================

    async def list_all(self) -> list[ToggleRecord]:
        """All toggles, served from the collection cache when present."""
        records = await self.cache.get_or_compute(
            COLLECTION_CACHE,
            COLLECTION_KEY,
            self.store.find_all,
        )
        # The memory backend hands out the cached list itself
        return list(records)

    async def get_by_id(self, id: int) -> ToggleRecord | None:
        """Toggle by numeric ID, or None."""
        return await self.cache.get_or_compute(
            RECORD_CACHE,
            id_key(id),
            lambda: self.store.find_by_id(id),
        )

    async def get_by_key(self, key: str) -> ToggleRecord | None:
        """Toggle by business key, or None."""
        return await self.cache.get_or_compute(
            RECORD_CACHE,
            business_key(key),
            lambda: self.store.find_by_key(key),
        )

    # ============================================================
    # WRITES
    # ============================================================

    async def save(self, record: ToggleRecord) -> ToggleRecord:
        """
        Create or replace a toggle.

        Only the collection cache is evicted. Raises ConstraintViolation
        when the key is taken by another toggle.
        """
        saved = await self.store.save(record)
        await self.cache.evict_all(COLLECTION_CACHE)

        logger.info(
            "parametrization.saved",
            id=saved.id,
            key=saved.key,
            created=record.id is None,
            evicted=[COLLECTION_CACHE.name],
        )
        return saved

    async def set_enabled(self, enabled: bool, id: int) -> None:
        """
        Turn a toggle on or off.

        There is no existence check: for an unknown ID the store updates
        nothing and both namespaces are still evicted.
        """
        rows = await self.store.update_enabled_state(id, enabled)
        await self._evict_everything()

        logger.info(
            "parametrization.enabled_state_updated",
            id=id,
            enabled=enabled,
            rows=rows,
            evicted=[RECORD_CACHE.name, COLLECTION_CACHE.name],
        )

    async def delete(self, id: int) -> None:
        """Delete a toggle and evict both namespaces."""
        rows = await self.store.delete_by_id(id)
        await self._evict_everything()

        logger.info(
            "parametrization.deleted",
            id=id,
            rows=rows,
            evicted=[RECORD_CACHE.name, COLLECTION_CACHE.name],
        )

    async def delete_no_cache(self, id: int) -> None:
        """
        Delete a toggle without touching the cache.

        Cached reads keep returning the deleted toggle until another write
        evicts the namespaces.
        """
        rows = await self.store.delete_by_id(id)

        logger.warning(
            "parametrization.deleted_without_eviction",
            id=id,
            rows=rows,
        )

    async def _evict_everything(self) -> None:
        await self.cache.evict_all(RECORD_CACHE)
        await self.cache.evict_all(COLLECTION_CACHE)
