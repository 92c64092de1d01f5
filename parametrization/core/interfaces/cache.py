"""
Cache backend protocol.
Implementations: RedisCacheBackend, MemoryCacheBackend
"""
from __future__ import annotations

from typing import Protocol, TypeVar, Callable, Awaitable

from parametrization.core.cache import CacheNamespace


T = TypeVar("T")


class CacheBackend(Protocol):
    """
    Protocol for namespaced cache backends.

    Every backend honours the same read/write contract so the service can
    run against either without changes:

    - RedisCacheBackend: shared by all instances of the service
    - MemoryCacheBackend: in-process, single instance only
    """

    async def get_or_compute(
        self,
        namespace: CacheNamespace,
        key: str,
        supplier: Callable[[], Awaitable[T]],
    ) -> T:
        """
        Return the cached value for ``key`` or await ``supplier`` and cache it.

        A cached ``None`` counts as a hit. If ``supplier`` raises, nothing
        is stored and the exception propagates.
        """
        ...

    async def evict(self, namespace: CacheNamespace, key: str) -> bool:
        """Remove one entry. Returns True if it existed."""
        ...

    async def evict_all(self, namespace: CacheNamespace) -> int:
        """Remove every entry in the namespace. Returns count removed."""
        ...

    async def connect(self) -> None:
        """Open connections (no-op for in-process backends)."""
        ...

    async def disconnect(self) -> None:
        """Close connections (no-op for in-process backends)."""
        ...
