"""
In-memory cache backend for single-instance deployments and tests.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, Awaitable, TypeVar
from datetime import datetime, timedelta, timezone
from dataclasses import dataclass

from parametrization.core.cache import CacheNamespace

T = TypeVar("T")


@dataclass
class CacheEntry:
    """Cache entry with value and expiration."""
    value: Any
    expires_at: datetime | None = None

    @property
    def is_expired(self) -> bool:
        if self.expires_at is None:
            return False
        return datetime.now(timezone.utc) >= self.expires_at


@dataclass
class _KeyLock:
    lock: asyncio.Lock
    users: int = 0


class MemoryCacheBackend:
    """
    In-process cache backend.

    Note: Not shared between processes. Only suitable when a single
    instance of the service is running.

    Values are held by reference, so they must be immutable
    (``ToggleRecord`` is frozen). Concurrent misses on the same key are
    serialized so the supplier runs once. A key's lock lives only while
    some task is filling or waiting on that key.

    Usage:
        cache = MemoryCacheBackend()
        record = await cache.get_or_compute(RECORDS, "id:1", lambda: store.find_by_id(1))
        await cache.evict_all(RECORDS)
    """

    name = "memory"

    def __init__(self, default_ttl: int | None = None):
        self.default_ttl = default_ttl
        self._store: dict[str, dict[str, CacheEntry]] = {}
        self._locks: dict[tuple[str, str], _KeyLock] = {}

    def _entries(self, namespace: CacheNamespace) -> dict[str, CacheEntry]:
        return self._store.setdefault(namespace.name, {})

    @asynccontextmanager
    async def _filling(self, namespace: CacheNamespace, key: str) -> AsyncIterator[None]:
        lock_key = (namespace.name, key)
        key_lock = self._locks.setdefault(lock_key, _KeyLock(asyncio.Lock()))
        key_lock.users += 1
        try:
            async with key_lock.lock:
                yield
        finally:
            key_lock.users -= 1
            if key_lock.users == 0:
                del self._locks[lock_key]

    def _lookup(self, entries: dict[str, CacheEntry], key: str) -> CacheEntry | None:
        entry = entries.get(key)
        if entry is not None and entry.is_expired:
            del entries[key]
            return None
        return entry

    async def get_or_compute(
        self,
        namespace: CacheNamespace,
        key: str,
        supplier: Callable[[], Awaitable[T]],
    ) -> T:
        entries = self._entries(namespace)
        entry = self._lookup(entries, key)
        if entry is not None:
            return entry.value

        async with self._filling(namespace, key):
            # Another task may have filled it while we waited
            entry = self._lookup(entries, key)
            if entry is not None:
                return entry.value

            value = await supplier()

            expires_at = None
            if self.default_ttl:
                expires_at = datetime.now(timezone.utc) + timedelta(seconds=self.default_ttl)
            entries[key] = CacheEntry(value=value, expires_at=expires_at)
            return value

    async def evict(self, namespace: CacheNamespace, key: str) -> bool:
        return self._entries(namespace).pop(key, None) is not None

    async def evict_all(self, namespace: CacheNamespace) -> int:
        entries = self._entries(namespace)
        count = len(entries)
        entries.clear()
        return count

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    def keys(self, namespace: CacheNamespace) -> list[str]:
        """Keys currently held in a namespace (for inspection and tests)."""
        entries = self._entries(namespace)
        return [k for k in list(entries) if self._lookup(entries, k) is not None]
