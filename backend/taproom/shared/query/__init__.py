"""
Listing Queries

- composer:  filters + sort + page → (RowQuery, CountQuery)
- assembler: runs both concurrently → PageResult
"""

from taproom.shared.query.composer import (
    CountQuery,
    FilterField,
    FilterKind,
    FilterSpec,
    ListProfile,
    PageRequest,
    RowQuery,
    SortSpec,
    compose,
)
from taproom.shared.query.assembler import PageAssembler, PageResult

__all__ = [
    "CountQuery",
    "FilterField",
    "FilterKind",
    "FilterSpec",
    "ListProfile",
    "PageRequest",
    "RowQuery",
    "SortSpec",
    "compose",
    "PageAssembler",
    "PageResult",
]
