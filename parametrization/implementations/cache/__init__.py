"""Cache backend implementations."""

from parametrization.implementations.cache.redis import RedisCacheBackend
from parametrization.implementations.cache.memory import MemoryCacheBackend

__all__ = ["RedisCacheBackend", "MemoryCacheBackend"]
