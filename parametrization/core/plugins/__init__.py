"""
Backend registration by name.
"""

from .registry import CacheBackendRegistry, cache_backends

__all__ = [
    "CacheBackendRegistry",
    "cache_backends",
]
