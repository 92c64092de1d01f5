"""
Dependency injection container.
Centralizes backend instantiation and configuration.
"""

import logging
from typing import Any
from dataclasses import dataclass, field

from .interfaces import CacheBackend
from .plugins.registry import cache_backends

logger = logging.getLogger(__name__)


@dataclass
class Container:
    """
    Dependency injection container.

    Holds backend instances and provides easy access.
    Configure backends via settings, get instances here.

    Example:
    ```python
    from parametrization.core.container import container

    container.configure(settings.get_backends_config())
    cache = container.cache      # RedisCacheBackend or MemoryCacheBackend
    service = ParametrizationService(store, cache)
    ```
    """

    _config: dict[str, Any] = field(default_factory=dict)
    _instances: dict[str, Any] = field(default_factory=dict)

    # Backend type selection (from config)
    cache_type: str = "redis"

    def configure(self, config: dict[str, Any]) -> None:
        """Configure the container from settings."""
        self._config = config

        backends = config.get("backends", {})
        self.cache_type = backends.get("cache", "redis")

    @property
    def cache(self) -> CacheBackend:
        """Get configured cache backend."""
        if "cache" not in self._instances:
            config = self._config.get("cache", {})
            self._instances["cache"] = cache_backends.get(
                self.cache_type,
                config=config,
            )
        return self._instances["cache"]

    def get(self, name: str) -> Any:
        """Get any registered instance by name."""
        return self._instances.get(name)

    async def initialize(self) -> None:
        """Initialize backends that need async setup."""
        await self.cache.connect()
        logger.info(f"Cache backend ready: {self.cache_type}")

    async def shutdown(self) -> None:
        """Shutdown backends gracefully."""
        if "cache" in self._instances:
            await self._instances["cache"].disconnect()


# Global container instance
container = Container()


# FastAPI dependency functions
async def get_cache() -> CacheBackend:
    """FastAPI dependency for cache."""
    return container.cache
