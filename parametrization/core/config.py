"""
Application configuration using Pydantic Settings.
"""

from functools import lru_cache
from pydantic import Field, field_validator, RedisDsn
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration."""

    model_config = SettingsConfigDict(env_prefix="DB_")

    url: str = Field(
        default="sqlite+aiosqlite:///./parametrization.db",
        description="Async SQLAlchemy URL (sqlite+aiosqlite or postgresql+asyncpg)",
    )
    pool_size: int = Field(default=5, ge=1, le=100)
    pool_overflow: int = Field(default=10, ge=0, le=100)
    pool_timeout: int = Field(default=30, ge=1)
    echo: bool = Field(default=False, description="Echo SQL queries")

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class RedisSettings(BaseSettings):
    """Redis configuration."""

    model_config = SettingsConfigDict(env_prefix="REDIS_")

    url: RedisDsn = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    max_connections: int = Field(default=10, ge=1)


# Accepted spellings for the cache backend, mapped to registry names.
CACHE_BACKEND_ALIASES = {
    "redis": "redis",
    "distributed": "redis",
    "memory": "memory",
    "local": "memory",
}


class CacheSettings(BaseSettings):
    """
    Cache backend configuration.

    - redis (alias: distributed): shared by every instance of the service
    - memory (alias: local): confined to one process, single-instance only
    """

    model_config = SettingsConfigDict(env_prefix="CACHE_")

    backend: str = Field(
        default="redis",
        description="redis | distributed | memory | local",
    )
    prefix: str = Field(default="parametrization:")
    default_ttl: int | None = Field(
        default=None,
        ge=1,
        description="Optional expiry for cached entries (seconds). None keeps entries until evicted.",
    )

    @field_validator("backend")
    @classmethod
    def normalize_backend(cls, v: str) -> str:
        normalized = CACHE_BACKEND_ALIASES.get(v.strip().lower())
        if normalized is None:
            raise ValueError(f"cache backend must be one of {sorted(CACHE_BACKEND_ALIASES)}")
        return normalized


class SeedSettings(BaseSettings):
    """Seed data configuration."""

    model_config = SettingsConfigDict(env_prefix="SEED_")

    enabled: bool = Field(
        default=True,
        description="Insert the default toggles on startup when the store is empty",
    )


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Parametrization API")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    workers: int = Field(default=1)
    reload: bool = Field(default=False)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json", description="json or text")

    # Nested settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    seed: SeedSettings = Field(default_factory=SeedSettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production", "testing"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"json", "text"}:
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def get_backends_config(self) -> dict:
        """Get configuration for DI container."""
        return {
            "backends": {
                "cache": self.cache.backend,
            },
            "cache": {
                "url": str(self.redis.url),
                "prefix": self.cache.prefix,
                "default_ttl": self.cache.default_ttl,
                "max_connections": self.redis.max_connections,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Shorthand
settings = get_settings()
