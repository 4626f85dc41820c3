"""
Manufacturer Repository

Listing profile:
================
    sort:    id, name, country, createdAt, updatedAt   (fallback: id)
    filters: name    → CONTAINS (case-insensitive)
             country → CONTAINS (case-insensitive)
"""

from sqlalchemy.ext.asyncio import AsyncSession

from taproom.shared.models.manufacturer import Manufacturer
from taproom.shared.query.composer import FilterField, FilterKind, ListProfile
from taproom.shared.repositories.base import BaseRepository


MANUFACTURER_PROFILE = ListProfile.build(
    Manufacturer,
    sortable={
        "id": Manufacturer.id,
        "name": Manufacturer.name,
        "country": Manufacturer.country,
        "createdAt": Manufacturer.created_at,
        "updatedAt": Manufacturer.updated_at,
    },
    filters=(
        FilterField("name", Manufacturer.name, FilterKind.CONTAINS),
        FilterField("country", Manufacturer.country, FilterKind.CONTAINS),
    ),
)


class ManufacturerRepository(BaseRepository[Manufacturer]):
    """Repository for Manufacturer database operations."""

    list_profile = MANUFACTURER_PROFILE

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Manufacturer, session)
