"""
Pydantic Schemas

Request validation and response serialization for the HTTP API.

Modules:
========
- common:       BaseSchema, PageResponse, ErrorResponse, HealthResponse
- auth:         Login and principal schemas
- manufacturer: Manufacturer upsert/read schemas
- beer:         Beer upsert/read schemas
"""

from taproom.shared.schemas.common import (
    BaseSchema,
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    PageMeta,
    PageResponse,
)
from taproom.shared.schemas.auth import LoginRequest, PrincipalResponse, TokenResponse
from taproom.shared.schemas.manufacturer import (
    ManufacturerReadResponse,
    ManufacturerUpsertRequest,
    ManufacturerUpsertResponse,
)
from taproom.shared.schemas.beer import BeerReadResponse, BeerUpsertRequest, BeerUpsertResponse

__all__ = [
    "BaseSchema",
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "PageMeta",
    "PageResponse",
    "LoginRequest",
    "PrincipalResponse",
    "TokenResponse",
    "ManufacturerReadResponse",
    "ManufacturerUpsertRequest",
    "ManufacturerUpsertResponse",
    "BeerReadResponse",
    "BeerUpsertRequest",
    "BeerUpsertResponse",
]
