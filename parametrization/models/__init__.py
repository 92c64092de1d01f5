"""
Database models.
"""

from .base import Base, utc_now
from .parametrization import ParametrizationModel

__all__ = [
    "Base",
    "utc_now",
    "ParametrizationModel",
]
