"""
Registry of cache backend factories.

Backends register under the name ``CACHE_BACKEND`` resolves to
(see ``CACHE_BACKEND_ALIASES``); the container asks for one by that name.
"""
from __future__ import annotations

from typing import Any, Callable
import logging

from parametrization.core.interfaces import CacheBackend

logger = logging.getLogger(__name__)

CacheFactory = Callable[..., CacheBackend]


class CacheBackendRegistry:
    """
    Maps backend names to factories.

    Example usage:
    ```python
    cache_backends.register("redis", create_redis_cache, default=True)
    cache_backends.register("memory", create_memory_cache)

    cache = cache_backends.get("memory", config={"default_ttl": 60})
    ```
    """

    def __init__(self) -> None:
        self._factories: dict[str, CacheFactory] = {}
        self.default: str | None = None

    def register(self, name: str, factory: CacheFactory, *, default: bool = False) -> None:
        """Register (or replace) the factory for ``name``."""
        self._factories[name] = factory
        if default or self.default is None:
            self.default = name
        logger.debug(f"Registered cache backend: {name}")

    def get(self, name: str | None = None, *, config: dict[str, Any] | None = None) -> CacheBackend:
        """
        Build a new backend.

        Raises:
            ValueError: nothing is registered under ``name``
        """
        name = name or self.default
        if name not in self._factories:
            available = ", ".join(self._factories) or "none"
            raise ValueError(f"Unknown cache backend: {name}. Available: {available}")
        return self._factories[name](**(config or {}))

    @property
    def names(self) -> list[str]:
        return list(self._factories)


cache_backends = CacheBackendRegistry()
