"""
Database Dependency

FastAPI dependencies for database sessions.

- get_db:              one AsyncSession per request, committed on success and
                       rolled back on error (used by services for writes)
- get_session_factory: the session factory, used by the page assembler to
                       open one session per concurrent list query

Usage:
======
    from taproom.api.dependencies.database import DbSession

    @router.get("/beer/{beer_id}")
    async def read(beer_id: int, db: DbSession):
        return await BeerRepository(db).get(beer_id)

Tests replace both through app.dependency_overrides.
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from taproom.shared.db import get_db as _get_db
from taproom.shared.db import get_session_factory as _get_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields an async database session for the duration of the request.
    The session is automatically:
    - Committed on success
    - Rolled back on exception
    - Closed after the request

    Yields:
        AsyncSession: Database session for the current request
    """
    async for session in _get_db():
        yield session


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """FastAPI dependency returning the process-wide session factory."""
    return _get_session_factory()


# Type aliases for cleaner route signatures
DbSession = Annotated[AsyncSession, Depends(get_db)]
SessionFactory = Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)]
