"""
FastAPI dependencies.
"""

from .database import get_db
from .services import get_parametrization_service

__all__ = ["get_db", "get_parametrization_service"]
