"""
Parametrization repository - the durable record store.
"""

from typing import Sequence
from sqlalchemy import Select, update
from sqlalchemy.exc import IntegrityError

from parametrization.core.exceptions import ConstraintViolation
from parametrization.models.base import utc_now
from parametrization.models.parametrization import ParametrizationModel
from parametrization.schemas.parametrization import ToggleRecord

from .base import BaseRepository, store_errors

# SQLite names the column, PostgreSQL the constraint; both contain it
KEY_COLUMN = "key_ref"


class ParametrizationRepository(BaseRepository[ParametrizationModel]):
    """SQLAlchemy-backed record store for toggles."""

    model = ParametrizationModel

    def _base_query(self) -> Select:
        return super()._base_query().order_by(ParametrizationModel.id)

    @staticmethod
    def _to_record(model: ParametrizationModel) -> ToggleRecord:
        return ToggleRecord.model_validate(model)

    async def find_by_id(self, id: int) -> ToggleRecord | None:
        model = await self.get_by_id(id)
        return self._to_record(model) if model else None

    async def find_by_key(self, key: str) -> ToggleRecord | None:
        model = await self.get_one(key=key)
        return self._to_record(model) if model else None

    async def find_all(self) -> list[ToggleRecord]:
        return [self._to_record(m) for m in await self.all()]

    async def save(self, record: ToggleRecord) -> ToggleRecord:
        """
        Insert or fully replace a toggle.

        - ``record.id`` is None: insert, the database assigns the ID
        - ``record.id`` set and row exists: replace key, description, enabled
        - ``record.id`` set and no row: insert with that ID

        ``created_at`` is never changed on an existing row.

        Raises:
            ConstraintViolation: another toggle already uses ``record.key``
        """
        with store_errors():
            model = None
            if record.id is not None:
                model = await self.db.get(ParametrizationModel, record.id)

            if model is None:
                model = self._new_model(record)
                self.db.add(model)
            else:
                model.key = record.key
                model.description = record.description
                model.enabled = record.enabled

            await self._commit(record.key)

        return self._to_record(model)

    async def save_all(self, records: Sequence[ToggleRecord]) -> list[ToggleRecord]:
        """Insert several toggles in one transaction."""
        models = [self._new_model(r) for r in records]
        with store_errors():
            self.db.add_all(models)
            await self._commit(", ".join(r.key for r in records))
        return [self._to_record(m) for m in models]

    async def update_enabled_state(self, id: int, enabled: bool) -> int:
        """
        Set ``enabled`` without touching any other column.

        No existence check: a missing ID updates zero rows and returns 0.
        """
        stmt = (
            update(ParametrizationModel)
            .where(ParametrizationModel.id == id)
            .values(enabled=enabled)
        )
        with store_errors():
            result = await self.db.execute(stmt)
            await self.db.commit()
        return result.rowcount

    @staticmethod
    def _new_model(record: ToggleRecord) -> ParametrizationModel:
        return ParametrizationModel(
            id=record.id,
            key=record.key,
            description=record.description,
            enabled=record.enabled,
            created_at=record.created_at or utc_now(),
        )

    async def _commit(self, key: str) -> None:
        """
        Commit, reporting a clash on the unique key column as ConstraintViolation.

        Other integrity errors (e.g. a duplicate primary key) propagate as is.
        """
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if KEY_COLUMN in str(e.orig):
                raise ConstraintViolation(key) from e
            raise
