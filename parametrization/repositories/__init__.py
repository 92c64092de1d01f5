"""
Repository pattern for data access.
"""

from parametrization.repositories.base import BaseRepository
from parametrization.repositories.parametrization import ParametrizationRepository

__all__ = ["BaseRepository", "ParametrizationRepository"]
