"""
Register all backend implementations with their registries.

Import this module in app startup to register all implementations.
"""

from parametrization.core.plugins.registry import cache_backends
from parametrization.core.config import settings


def register_backends() -> None:
    """Register all backend implementations."""

    # ============ Cache Backends ============

    def create_redis_cache(**config):
        from parametrization.implementations.cache.redis import RedisCacheBackend
        return RedisCacheBackend(
            redis_url=config.get("url", str(settings.redis.url)),
            prefix=config.get("prefix", settings.cache.prefix),
            default_ttl=config.get("default_ttl", settings.cache.default_ttl),
            max_connections=config.get("max_connections", settings.redis.max_connections),
        )

    def create_memory_cache(**config):
        from parametrization.implementations.cache.memory import MemoryCacheBackend
        return MemoryCacheBackend(
            default_ttl=config.get("default_ttl", settings.cache.default_ttl),
        )

    cache_backends.register("redis", create_redis_cache, default=True)
    cache_backends.register("memory", create_memory_cache)
