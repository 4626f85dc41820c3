"""
Page Assembler

Executes a RowQuery and its CountQuery and combines them into one PageResult.

Concurrency:
============
    assemble()
        │
        ├── _fetch_rows(row_query)    ──┐   each in its own AsyncSession
        │                              ├── asyncio.gather
        └── _fetch_count(count_query) ──┘
        │
        ▼
    PageResult(content=[mapper(row) ...], total_elements=count, page=...)

An AsyncSession must not be used by two operations at once, so the assembler
takes a session factory and opens one short-lived session per query.
If either query fails the whole call fails and the other query is cancelled;
no partial page is returned.
"""

import asyncio
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taproom.shared.db.errors import storage_errors
from taproom.shared.query.composer import CountQuery, PageRequest, RowQuery


T = TypeVar("T")


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """
    One page of mapped rows plus the total across all pages.

    Attributes:
        content: Mapped rows, in query order, at most page.size of them
        total_elements: Rows matching the filters, ignoring paging
        page: The request this page answers
    """

    content: Sequence[T]
    total_elements: int
    page: PageRequest

    @property
    def total_pages(self) -> int:
        if self.page.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.page.size)


class PageAssembler:
    """Runs row and count queries concurrently and builds PageResult."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    async def assemble(
        self,
        row_query: RowQuery,
        count_query: CountQuery,
        mapper: Callable[[Any], T],
    ) -> PageResult[T]:
        """
        Fetch one page.

        Args:
            row_query: Sorted, limited row descriptor
            count_query: Count descriptor with the same predicate
            mapper: Converts each ORM row into the response shape

        Raises:
            StorageUnavailableError: either query failed
        """
        tasks = (
            asyncio.ensure_future(self._fetch_rows(row_query)),
            asyncio.ensure_future(self._fetch_count(count_query)),
        )
        try:
            rows, total = await asyncio.gather(*tasks)
        except BaseException:
            # gather() leaves the sibling running; release its session now.
            for task in tasks:
                task.cancel()
            raise
        return PageResult(
            content=[mapper(row) for row in rows],
            total_elements=total,
            page=row_query.page,
        )

    async def _fetch_rows(self, query: RowQuery) -> list[Any]:
        with storage_errors(f"{query.model.__tablename__}.page"):
            async with self.session_factory() as session:
                result = await session.execute(query.statement())
                return list(result.scalars().all())

    async def _fetch_count(self, query: CountQuery) -> int:
        with storage_errors(f"{query.model.__tablename__}.count"):
            async with self.session_factory() as session:
                result = await session.execute(query.statement())
                return int(result.scalar_one())
