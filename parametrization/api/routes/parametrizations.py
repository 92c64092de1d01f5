"""
Parametrization routes.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from parametrization.schemas.parametrization import (
    ToggleRecord,
    ParametrizationCreate,
    ParametrizationUpdate,
)
from parametrization.services.parametrization import ParametrizationService
from parametrization.api.dependencies.services import get_parametrization_service

router = APIRouter()


@router.get("", response_model=list[ToggleRecord])
async def list_parametrizations(
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """List all parametrizations (feature flags)."""
    return await service.list_all()


@router.get("/key/{key}", response_model=ToggleRecord)
async def get_parametrization_by_key(
    key: str,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Get parametrization by its business key."""
    record = await service.get_by_key(key)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return record


@router.get("/{id}", response_model=ToggleRecord)
async def get_parametrization(
    id: int,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Get parametrization by ID."""
    record = await service.get_by_id(id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return record


@router.post("", response_model=ToggleRecord)
async def create_parametrization(
    data: ParametrizationCreate,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Create a parametrization."""
    return await service.save(data.to_record())


@router.put("/{id}", response_model=ToggleRecord)
async def update_parametrization(
    id: int,
    data: ParametrizationUpdate,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """
    Replace a parametrization.

    Existence is checked through the (possibly cached) ID lookup.
    """
    if await service.get_by_id(id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return await service.save(data.to_record(id=id))


@router.patch("/{id}/enable", status_code=status.HTTP_204_NO_CONTENT)
async def update_parametrization_enabled_state(
    id: int,
    enable: bool = Query(...),
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Enable or disable a parametrization. Unknown IDs are a silent no-op."""
    await service.set_enabled(enable, id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parametrization(
    id: int,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Delete a parametrization and evict cached entries."""
    await service.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{id}/nocache", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parametrization_no_cache(
    id: int,
    service: ParametrizationService = Depends(get_parametrization_service),
):
    """Delete a parametrization WITHOUT evicting cached entries."""
    await service.delete_no_cache(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
