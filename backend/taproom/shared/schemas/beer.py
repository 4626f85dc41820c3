"""
Beer Schemas

Request/response models for /api/beer.
"""

from typing import Optional

from taproom.shared.schemas.common import BaseSchema


class BeerUpsertRequest(BaseSchema):
    """Schema for beer create and update. Name is required on create."""

    name: Optional[str] = None
    abv: Optional[float] = None
    style: Optional[str] = None
    description: Optional[str] = None


class BeerUpsertResponse(BaseSchema):
    id: int
    name: str


class BeerReadResponse(BaseSchema):
    id: int
    name: str
    abv: Optional[float] = None
    style: Optional[str] = None
    description: Optional[str] = None
    manufacturer_id: int
