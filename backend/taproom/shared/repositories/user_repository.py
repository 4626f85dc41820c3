"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_name()            → Find user by login name
- name_exists()            → Uniqueness check, optionally excluding one user
- get_with_manufacturer()  → User plus the id of the manufacturer it owns

Usage Example:
==============
    async def authenticate(db: AsyncSession, name: str, password: str):
        repo = UserRepository(db)
        user = await repo.get_by_name(name)
        if not user:
            raise AuthenticationError("Invalid username or password")
        # Verify password...
        return user
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taproom.shared.db.errors import storage_errors
from taproom.shared.models.manufacturer import Manufacturer
from taproom.shared.models.user import User
from taproom.shared.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by login name
    - Checking name availability
    - Resolving the owner scope of an account
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_name(self, name: str) -> Optional[User]:
        """
        Get user by login name. Names are matched exactly.

        SQL Generated:
            SELECT * FROM users WHERE name = 'brew1'
        """
        with storage_errors("users.get_by_name"):
            result = await self.session.execute(select(User).where(User.name == name))
            return result.scalar_one_or_none()

    async def name_exists(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """
        Check if a login name is taken.

        Args:
            name: Login name to check
            exclude_id: User allowed to hold the name already (on update)

        Example:
            if await repo.name_exists("brew1"):
                raise DuplicateResourceError("User with name brew1 already exists")
        """
        return await self.exists_by("name", name, exclude_id=exclude_id)

    async def get_with_manufacturer(self, user_id: int) -> tuple[Optional[User], Optional[int]]:
        """
        Load a user and the id of the manufacturer it owns.

        Returns:
            (user, manufacturer_id); (None, None) if the user does not exist,
            (user, None) if the user owns no manufacturer

        SQL Generated:
            SELECT users.*, manufacturers.id FROM users
            LEFT OUTER JOIN manufacturers ON manufacturers.user_id = users.id
            WHERE users.id = :id
        """
        stmt = (
            select(User, Manufacturer.id)
            .outerjoin(Manufacturer, Manufacturer.user_id == User.id)
            .where(User.id == user_id)
        )
        with storage_errors("users.get_with_manufacturer"):
            result = await self.session.execute(stmt)
            row = result.first()
        if row is None:
            return None, None
        return row[0], row[1]
