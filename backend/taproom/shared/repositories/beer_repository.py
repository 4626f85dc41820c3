"""
Beer Repository

Listing profile:
================
    sort:    id, name, abv, style, manufacturerId, createdAt, updatedAt
             (fallback: id)
    filters: name            → CONTAINS (case-insensitive)
             style           → CONTAINS (case-insensitive)
             manufacturer_id → EQUALS
             abv_min         → abv >= value
             abv_max         → abv <= value
"""

from sqlalchemy.ext.asyncio import AsyncSession

from taproom.shared.models.beer import Beer
from taproom.shared.query.composer import FilterField, FilterKind, ListProfile
from taproom.shared.repositories.base import BaseRepository


BEER_PROFILE = ListProfile.build(
    Beer,
    sortable={
        "id": Beer.id,
        "name": Beer.name,
        "abv": Beer.abv,
        "style": Beer.style,
        "manufacturerId": Beer.manufacturer_id,
        "createdAt": Beer.created_at,
        "updatedAt": Beer.updated_at,
    },
    filters=(
        FilterField("name", Beer.name, FilterKind.CONTAINS),
        FilterField("style", Beer.style, FilterKind.CONTAINS),
        FilterField("manufacturer_id", Beer.manufacturer_id, FilterKind.EQUALS),
        FilterField("abv_min", Beer.abv, FilterKind.MIN),
        FilterField("abv_max", Beer.abv, FilterKind.MAX),
    ),
)


class BeerRepository(BaseRepository[Beer]):
    """Repository for Beer database operations."""

    list_profile = BEER_PROFILE

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(Beer, session)

    async def exists_by_manufacturer(self, manufacturer_id: int) -> bool:
        """
        Check whether any beer references the manufacturer.

        Used to refuse deleting a manufacturer that still has beers.
        """
        return await self.exists_by("manufacturer_id", manufacturer_id)
