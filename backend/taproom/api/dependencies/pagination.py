"""
Pagination dependency.

    GET /api/beer?page=0&size=10&sort=abv,desc

page is zero-based. Range checks happen in the query composer, so bad values
get the same 400 body as every other validation error.
"""

from typing import Annotated, Optional

from fastapi import Depends, Query

from taproom.config.settings import settings
from taproom.shared.query.composer import PageRequest, SortSpec


DEFAULT_SORT = "name"


async def get_page_request(
    page: int = Query(0, description="Page number (0-indexed)"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, description="Items per page"),
) -> PageRequest:
    """Pagination parameters dependency."""
    return PageRequest(index=page, size=size)


async def get_sort(
    sort: Optional[str] = Query(
        DEFAULT_SORT,
        description='Sort as "<column>[,asc|desc]"; unknown columns sort by id',
    ),
) -> SortSpec:
    """Sort parameter dependency."""
    return SortSpec.parse(sort, default_column=DEFAULT_SORT)


Paging = Annotated[PageRequest, Depends(get_page_request)]
Sorting = Annotated[SortSpec, Depends(get_sort)]
