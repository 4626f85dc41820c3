"""
Beer Handler

    POST   /api/beer/{manufacturerId} → create (admin or owner)  201
    PUT    /api/beer/{id}             → update (admin or owner)  200
    GET    /api/beer/{id}             → read                     200
    GET    /api/beer                  → list                     200
    DELETE /api/beer/{id}             → delete (admin or owner)  204
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from taproom.api.dependencies.auth import CurrentPrincipal
from taproom.api.dependencies.pagination import Paging, Sorting
from taproom.api.dependencies.services import get_beer_service
from taproom.shared.query.composer import FilterSpec
from taproom.shared.schemas.beer import BeerReadResponse, BeerUpsertRequest, BeerUpsertResponse
from taproom.shared.schemas.common import PageResponse
from taproom.shared.services.beer_service import BeerService


router = APIRouter()


@router.post(
    "/{manufacturer_id}",
    response_model=BeerUpsertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_beer(
    manufacturer_id: int,
    request: BeerUpsertRequest,
    principal: CurrentPrincipal,
    service: BeerService = Depends(get_beer_service),
):
    """Add a beer to the given manufacturer."""
    return await service.create(manufacturer_id, request, principal)


@router.put("/{beer_id}", response_model=BeerUpsertResponse)
async def update_beer(
    beer_id: int,
    request: BeerUpsertRequest,
    principal: CurrentPrincipal,
    service: BeerService = Depends(get_beer_service),
):
    return await service.update(beer_id, request, principal)


@router.get("/{beer_id}", response_model=BeerReadResponse)
async def read_beer(
    beer_id: int,
    service: BeerService = Depends(get_beer_service),
):
    return await service.read(beer_id)


@router.get("", response_model=PageResponse[BeerReadResponse])
async def list_beers(
    paging: Paging,
    sorting: Sorting,
    name: Optional[str] = Query(None, description="Name contains (case-insensitive)"),
    style: Optional[str] = Query(None, description="Style contains (case-insensitive)"),
    manufacturer_id: Optional[int] = Query(None, alias="manufacturerId"),
    abv_min: Optional[float] = Query(None, alias="abvMin"),
    abv_max: Optional[float] = Query(None, alias="abvMax"),
    service: BeerService = Depends(get_beer_service),
):
    filters = FilterSpec.of(
        name=name,
        style=style,
        manufacturer_id=manufacturer_id,
        abv_min=abv_min,
        abv_max=abv_max,
    )
    page = await service.list(filters, sorting, paging)
    return PageResponse[BeerReadResponse].from_page(page)


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_beer(
    beer_id: int,
    principal: CurrentPrincipal,
    service: BeerService = Depends(get_beer_service),
):
    await service.delete(beer_id, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
