"""
Core interfaces (protocols) for extensibility.
All backends must implement these protocols to be swappable.
"""

from .cache import CacheBackend
from .store import RecordStore

__all__ = [
    "CacheBackend",
    "RecordStore",
]
