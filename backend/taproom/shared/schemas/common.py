"""
Common Schemas

Shared schemas used across the application for consistent API responses.

Schema Types:
=============
- BaseSchema: Base with common config (camelCase aliases, from_attributes)
- Pagination: PageMeta + PageResponse[T]
- Generic Responses: ErrorResponse, HealthResponse

Wire Naming:
============
Fields are snake_case in Python and camelCase on the wire:

    user_name      ↔  "userName"
    total_elements ↔  "totalElements"

Both spellings are accepted on input (populate_by_name); responses always
use camelCase (FastAPI serializes response models by alias).

Usage:
======
    from taproom.shared.schemas.common import BaseSchema, PageResponse

    class BeerReadResponse(BaseSchema):
        id: int
        manufacturer_id: int

    return PageResponse[BeerReadResponse].from_page(page)
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from taproom.shared.query.assembler import PageResult


# Generic type for paginated responses
DataT = TypeVar("DataT")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All request and response schemas inherit from this class.
    Provides:
    - alias_generator: camelCase names on the wire
    - from_attributes: Allow creating from ORM models
    - populate_by_name: Accept snake_case names as well
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# PAGINATION
# ═══════════════════════════════════════════════════════════════════════════════


class PageMeta(BaseSchema):
    """
    Pagination metadata in response.

    Page numbers are zero-based.
    """

    size: int = Field(description="Requested page size")
    number: int = Field(description="Current page number (0-indexed)")
    total_elements: int = Field(description="Total number of items")
    total_pages: int = Field(description="Total number of pages")


class PageResponse(BaseSchema, Generic[DataT]):
    """
    Generic paginated response.

    Example:
        {
            "content": [{"id": 1, "name": "Hop Storm"}],
            "page": {"size": 10, "number": 0, "totalElements": 1, "totalPages": 1}
        }
    """

    content: list[DataT]
    page: PageMeta

    @classmethod
    def from_page(cls, result: PageResult[Any]) -> "PageResponse[DataT]":
        return cls(
            content=list(result.content),
            page=PageMeta(
                size=result.page.size,
                number=result.page.index,
                total_elements=result.total_elements,
                total_pages=result.total_pages,
            ),
        )


# ═══════════════════════════════════════════════════════════════════════════════
# STANDARD RESPONSES
# ═══════════════════════════════════════════════════════════════════════════════


class ErrorDetail(BaseModel):
    """Error detail structure in error responses."""

    code: str = Field(description="Machine-readable error code")
    description: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error context",
    )


class ErrorResponse(BaseModel):
    """
    Standard error response schema.

    All API errors return this format for consistency.

    Example:
        {
            "error": {
                "code": "NOT_FOUND",
                "description": "Beer with id 7 not found",
                "details": {}
            }
        }
    """

    error: ErrorDetail


# ═══════════════════════════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = "healthy"
    service: str = "taproom"
    version: str = "1.0.0"
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    database: Optional[str] = None
