"""
Parametrization table.
"""

from datetime import datetime
from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, utc_now


class ParametrizationModel(Base):
    """
    One feature toggle.

    ``key`` is the human-readable business identifier and is unique.
    ``created_at`` is written once on insert.
    """

    __tablename__ = "parametrization"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    key: Mapped[str] = mapped_column(
        "key_ref",
        String(255),
        unique=True,
        nullable=False,
    )
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        status = "ON" if self.enabled else "OFF"
        return f"<Parametrization {self.id}:{self.key} [{status}]>"
