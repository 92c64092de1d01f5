"""
Cache namespaces and value codec.

A namespace is a group of entries that is evicted together. It also knows
the type of the values it holds, which lets distributed backends store
plain JSON and still hand typed values back:

    RECORDS = CacheNamespace("record", Optional[ToggleRecord])
    raw = RECORDS.encode(record)   # '{"id":1,"key":"DARK_MODE",...}'
    RECORDS.decode(raw)            # ToggleRecord(id=1, ...)

JSON produced here uses field aliases (camelCase), drops null fields and
writes datetimes as ISO-8601 strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import TypeAdapter


@dataclass(frozen=True)
class CacheNamespace:
    """Named group of cache entries holding values of one type."""

    name: str
    value_type: Any

    @cached_property
    def adapter(self) -> TypeAdapter:
        return TypeAdapter(self.value_type)

    def encode(self, value: Any) -> str:
        """Serialize a value to JSON text."""
        return self.adapter.dump_json(value, by_alias=True, exclude_none=True).decode()

    def decode(self, raw: str | bytes) -> Any:
        """Deserialize JSON text produced by ``encode``."""
        return self.adapter.validate_json(raw)

    def __str__(self) -> str:
        return self.name


def id_key(id: int) -> str:
    """Cache key for a lookup by numeric id."""
    return f"id:{id}"


def business_key(key: str) -> str:
    """Cache key for a lookup by toggle key."""
    return f"key:{key}"
