"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession, get_session_factory(), SessionFactory
- Authentication: get_current_principal(), CurrentPrincipal
- Pagination: Paging, Sorting
- Services: get_*_service() functions

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        principal: Principal = Depends(get_current_principal)
    ):

    # Write this:
    async def handler(db: DbSession, principal: CurrentPrincipal):
"""

from taproom.api.dependencies.database import (
    get_db,
    get_session_factory,
    DbSession,
    SessionFactory,
)
from taproom.api.dependencies.auth import (
    get_current_principal,
    CurrentPrincipal,
)
from taproom.api.dependencies.pagination import Paging, Sorting

__all__ = [
    # Database
    "get_db",
    "get_session_factory",
    "DbSession",
    "SessionFactory",
    # Authentication
    "get_current_principal",
    "CurrentPrincipal",
    # Pagination
    "Paging",
    "Sorting",
]
