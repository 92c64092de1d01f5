"""
Record store protocol.
Implementation: ParametrizationRepository (SQLAlchemy)
"""
from __future__ import annotations

from typing import Protocol, Sequence

from parametrization.schemas.parametrization import ToggleRecord


class RecordStore(Protocol):
    """
    Durable storage of toggle records.

    This is the source of truth; the cache only ever holds copies of what
    these methods return.
    """

    async def find_by_id(self, id: int) -> ToggleRecord | None:
        ...

    async def find_by_key(self, key: str) -> ToggleRecord | None:
        ...

    async def find_all(self) -> list[ToggleRecord]:
        ...

    async def save(self, record: ToggleRecord) -> ToggleRecord:
        """Insert when ``record.id`` is None, else replace. Raises ConstraintViolation."""
        ...

    async def save_all(self, records: Sequence[ToggleRecord]) -> list[ToggleRecord]:
        ...

    async def update_enabled_state(self, id: int, enabled: bool) -> int:
        """Set only ``enabled``. Returns rows affected; 0 for a missing id."""
        ...

    async def delete_by_id(self, id: int) -> int:
        """Physically delete. Returns rows affected; 0 for a missing id."""
        ...

    async def count(self) -> int:
        ...
