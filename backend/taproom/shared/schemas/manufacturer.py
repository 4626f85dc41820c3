"""
Manufacturer Schemas

Request/response models for /api/manufacturer.

    POST/PUT body (ManufacturerUpsertRequest):
        {"userName": "brew1", "password": "s3cret", "userEnabled": true,
         "name": "Brew One", "country": "DE"}

Every field is optional at the schema level: create requires userName,
password and name (checked by ManufacturerService so the error has the
same shape as the other 400s); update applies only the fields sent.
"""

from typing import Optional

from taproom.shared.schemas.common import BaseSchema


class ManufacturerUpsertRequest(BaseSchema):
    """Schema for manufacturer create and update."""

    user_name: Optional[str] = None
    password: Optional[str] = None
    user_enabled: Optional[bool] = None
    name: Optional[str] = None
    country: Optional[str] = None


class ManufacturerUpsertResponse(BaseSchema):
    """Schema returned by create and update."""

    id: int
    name: str


class ManufacturerReadResponse(BaseSchema):
    """Schema for single read and list items."""

    id: int
    name: str
    country: Optional[str] = None
