"""
Manufacturer Handler

    POST   /api/manufacturer        → create (admin)           201
    PUT    /api/manufacturer/{id}   → update (admin or owner)  200
    GET    /api/manufacturer/{id}   → read                     200
    GET    /api/manufacturer        → list                     200
    DELETE /api/manufacturer/{id}   → delete (admin or owner)  204
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taproom.api.dependencies.auth import CurrentPrincipal
from taproom.api.dependencies.pagination import Paging, Sorting
from taproom.api.dependencies.services import get_manufacturer_service
from taproom.shared.query.composer import FilterSpec
from taproom.shared.schemas.common import PageResponse
from taproom.shared.schemas.manufacturer import (
    ManufacturerReadResponse,
    ManufacturerUpsertRequest,
    ManufacturerUpsertResponse,
)
from taproom.shared.services.manufacturer_service import ManufacturerService


router = APIRouter()


@router.post(
    "",
    response_model=ManufacturerUpsertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_manufacturer(
    request: ManufacturerUpsertRequest,
    principal: CurrentPrincipal,
    service: ManufacturerService = Depends(get_manufacturer_service),
):
    """Create a manufacturer together with its login account."""
    return await service.create(request, principal)


@router.put("/{manufacturer_id}", response_model=ManufacturerUpsertResponse)
async def update_manufacturer(
    manufacturer_id: int,
    request: ManufacturerUpsertRequest,
    principal: CurrentPrincipal,
    service: ManufacturerService = Depends(get_manufacturer_service),
):
    """Update only the fields present in the body."""
    return await service.update(manufacturer_id, request, principal)


@router.get("/{manufacturer_id}", response_model=ManufacturerReadResponse)
async def read_manufacturer(
    manufacturer_id: int,
    service: ManufacturerService = Depends(get_manufacturer_service),
):
    return await service.read(manufacturer_id)


@router.get("", response_model=PageResponse[ManufacturerReadResponse])
async def list_manufacturers(
    paging: Paging,
    sorting: Sorting,
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
    country: Optional[str] = Query(None, description="Country contains (case-insensitive)"),
    service: ManufacturerService = Depends(get_manufacturer_service),
):
    page = await service.list(FilterSpec.of(name=name, country=country), sorting, paging)
    return PageResponse[ManufacturerReadResponse].from_page(page)


@router.delete("/{manufacturer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_manufacturer(
    manufacturer_id: int,
    principal: CurrentPrincipal,
    service: ManufacturerService = Depends(get_manufacturer_service),
):
    """Delete a manufacturer that has no beers, and its login account."""
    await service.delete(manufacturer_id, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
