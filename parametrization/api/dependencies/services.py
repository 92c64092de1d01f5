"""
Service dependencies.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from .database import get_db
from parametrization.core.container import get_cache
from parametrization.core.interfaces import CacheBackend
from parametrization.repositories.parametrization import ParametrizationRepository
from parametrization.services.parametrization import ParametrizationService


async def get_parametrization_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheBackend = Depends(get_cache),
) -> ParametrizationService:
    """Get parametrization service bound to this request's session."""
    return ParametrizationService(ParametrizationRepository(db), cache)
