"""
Base Repository

This module provides a generic base repository with common CRUD operations.
All entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)                 → Fetch single record by id
- exists(id)              → Check if record exists
- exists_by(field, value) → Uniqueness / dependency checks
- create(**fields)        → Insert new record
- save(instance)          → Flush changes made to a loaded record
- delete(instance)        → Hard delete record

Listing is not done here: list endpoints go through the query composer
and page assembler (taproom.shared.query), driven by each repository's
list_profile.

Generic Type Pattern:
=====================
    class BeerRepository(BaseRepository[Beer]):
        list_profile = BEER_PROFILE

    repo = BeerRepository(db)
    beer = await repo.get(42)  # Returns Beer, not Any!

Error Translation:
==================
Every database call runs inside storage_errors() (taproom.shared.db.errors),
so callers only ever see ConflictError or StorageUnavailableError.

flush() vs commit():
====================
Repository methods flush() so generated ids are available immediately.
The request's get_db() dependency commits (or rolls back) once at the end.
"""

from typing import Any, ClassVar, Generic, Optional, Type, TypeVar

from sqlalchemy import exists as sql_exists
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taproom.shared.db.errors import storage_errors
from taproom.shared.models.base import Base
from taproom.shared.query.composer import ListProfile


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
        list_profile: Sort allowlist and filters for list endpoints
    """

    list_profile: ClassVar[Optional[ListProfile]] = None

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., Manufacturer, Beer)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    @property
    def _label(self) -> str:
        return self.model.__tablename__

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: int) -> Optional[ModelType]:
        """
        Get a single record by its id.

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM beers WHERE id = :id
        """
        with storage_errors(f"{self._label}.get"):
            result = await self.session.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()

    async def exists(self, record_id: int) -> bool:
        """
        Check if a record exists without loading it.

        SQL Generated:
            SELECT EXISTS (SELECT * FROM beers WHERE id = :id)
        """
        return await self.exists_by("id", record_id)

    async def exists_by(
        self,
        field: str,
        value: Any,
        exclude_id: Optional[int] = None,
    ) -> bool:
        """
        Check whether any record has field == value.

        Args:
            field: Column attribute name on the model
            value: Value to match (bound parameter)
            exclude_id: Ignore the record with this id (update-time uniqueness)

        Example:
            # Would renaming user 7 to "brew1" clash with someone else?
            await users.exists_by("name", "brew1", exclude_id=7)

        SQL Generated:
            SELECT EXISTS (SELECT * FROM users WHERE name = :v AND id != :id)
        """
        column = getattr(self.model, field)
        condition = column == value
        if exclude_id is not None:
            condition = condition & (self.model.id != exclude_id)

        with storage_errors(f"{self._label}.exists_by"):
            result = await self.session.execute(select(sql_exists().where(condition)))
            return bool(result.scalar())

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Adds the instance, flushes to obtain the generated id, and refreshes
        to load server defaults (timestamps).

        SQL Generated:
            INSERT INTO beers (name, abv, ...) VALUES (...) RETURNING id, ...
        """
        instance = self.model(**kwargs)
        self.session.add(instance)

        with storage_errors(f"{self._label}.create"):
            await self.session.flush()
            await self.session.refresh(instance)

        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """
        Persist changes made to a loaded instance.

        SQL Generated:
            UPDATE beers SET name = :name, updated_at = :now WHERE id = :id
        """
        with storage_errors(f"{self._label}.save"):
            await self.session.flush()
            await self.session.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """
        Hard delete a loaded record.

        SQL Generated:
            DELETE FROM beers WHERE id = :id
        """
        with storage_errors(f"{self._label}.delete"):
            await self.session.delete(instance)
            await self.session.flush()
