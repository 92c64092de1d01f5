"""
Parametrization schemas.

``ToggleRecord`` is the value that flows between store, cache and API.
It is immutable so a cached instance can never be changed under a reader.
"""

from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ToggleRecord(BaseModel):
    """A named boolean feature toggle."""
    model_config = ConfigDict(
        from_attributes=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: int | None = None
    key: str = Field(min_length=1, max_length=255)
    description: str = Field(max_length=1000)
    enabled: bool
    created_at: datetime | None = None

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        # SQLite hands back naive datetimes
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class ParametrizationCreate(BaseModel):
    """Parametrization creation schema."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    key: str = Field(min_length=1, max_length=255)
    description: str = Field(max_length=1000)
    enabled: bool
    created_at: datetime | None = None

    def to_record(self, id: int | None = None) -> ToggleRecord:
        return ToggleRecord(id=id, **self.model_dump())


class ParametrizationUpdate(ParametrizationCreate):
    """Full-replace update schema. Same fields as creation."""
