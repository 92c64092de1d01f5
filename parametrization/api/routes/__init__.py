"""
API routes aggregation.
"""

from fastapi import APIRouter

from .parametrizations import router as parametrizations_router

router = APIRouter()

router.include_router(
    parametrizations_router,
    prefix="/parametrizations",
    tags=["parametrizations"],
)
