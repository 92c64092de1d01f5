"""
Redis cache backend implementation.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Awaitable, Iterator, TypeVar

import redis.asyncio as redis
from pydantic import ValidationError
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from parametrization.core.cache import CacheNamespace
from parametrization.core.exceptions import StoreUnavailable

T = TypeVar("T")

logger = logging.getLogger(__name__)


@contextmanager
def _unavailable_on_error() -> Iterator[None]:
    """Re-raise connection level redis errors as StoreUnavailable."""
    try:
        yield
    except (RedisConnectionError, RedisTimeoutError) as e:
        raise StoreUnavailable("cache", f"Redis unavailable: {e}") from e


class RedisCacheBackend:
    """
    Redis cache backend, shared by every instance of the service.

    Entries live under ``<prefix><namespace>::<key>`` and hold the JSON
    produced by the namespace codec, so they can be read with redis-cli.

    Usage:
        cache = RedisCacheBackend(redis_url="redis://localhost:6379/0", prefix="parametrization:")
        await cache.connect()

        record = await cache.get_or_compute(RECORDS, "id:1", lambda: store.find_by_id(1))
        await cache.evict_all(RECORDS)   # SCAN + DEL of parametrization:record::*
    """

    name = "redis"

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "",
        default_ttl: int | None = None,
        max_connections: int = 10,
    ):
        self.redis_url = redis_url
        self.prefix = prefix
        self.default_ttl = default_ttl
        self.max_connections = max_connections
        self._client: redis.Redis | None = None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self._client is None:
            self._client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                max_connections=self.max_connections,
            )

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            raise RuntimeError("Cache not connected. Call connect() first.")
        return self._client

    def _key(self, namespace: CacheNamespace, key: str) -> str:
        return f"{self.prefix}{namespace.name}::{key}"

    async def get_or_compute(
        self,
        namespace: CacheNamespace,
        key: str,
        supplier: Callable[[], Awaitable[T]],
    ) -> T:
        full_key = self._key(namespace, key)

        with _unavailable_on_error():
            raw = await self.client.get(full_key)

        if raw is not None:
            try:
                return namespace.decode(raw)
            except ValidationError:
                # Written by an incompatible version; recompute and overwrite
                logger.warning("Discarding undecodable cache entry %s", full_key)

        value = await supplier()

        with _unavailable_on_error():
            await self.client.set(full_key, namespace.encode(value), ex=self.default_ttl)
        return value

    async def evict(self, namespace: CacheNamespace, key: str) -> bool:
        with _unavailable_on_error():
            result = await self.client.delete(self._key(namespace, key))
        return result > 0

    async def evict_all(self, namespace: CacheNamespace) -> int:
        pattern = self._key(namespace, "*")
        with _unavailable_on_error():
            keys = [key async for key in self.client.scan_iter(match=pattern)]
            if keys:
                return await self.client.delete(*keys)
        return 0
