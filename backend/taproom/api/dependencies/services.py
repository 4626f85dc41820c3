"""
Service Dependencies

FastAPI dependencies for service injection.

These dependencies create service instances with proper database session injection.
Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session
- No shared state between requests

Usage:
======
    from taproom.api.dependencies.services import get_beer_service

    @router.get("/{beer_id}")
    async def read(beer_id: int, service: BeerService = Depends(get_beer_service)):
        return await service.read(beer_id)
"""

from typing import Annotated

from fastapi import Depends

from taproom.api.dependencies.database import DbSession, SessionFactory
from taproom.shared.query.assembler import PageAssembler
from taproom.shared.security.guard import OwnershipGuard
from taproom.shared.services.auth_service import AuthService
from taproom.shared.services.beer_service import BeerService
from taproom.shared.services.manufacturer_service import ManufacturerService


_guard = OwnershipGuard()


def get_page_assembler(factory: SessionFactory) -> PageAssembler:
    return PageAssembler(factory)


async def get_auth_service(db: DbSession) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_manufacturer_service(
    db: DbSession,
    pages: Annotated[PageAssembler, Depends(get_page_assembler)],
) -> ManufacturerService:
    """
    Dependency to get ManufacturerService instance.
    """
    return ManufacturerService(db, pages, _guard)


async def get_beer_service(
    db: DbSession,
    pages: Annotated[PageAssembler, Depends(get_page_assembler)],
) -> BeerService:
    """
    Dependency to get BeerService instance.
    """
    return BeerService(db, pages, _guard)
