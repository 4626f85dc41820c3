"""
Repository Pattern Implementations

This module provides the Repository pattern for database operations.
Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Login name lookups, owner scope
         ├── ManufacturerRepository     ← Manufacturer listing profile
         └── BeerRepository             ← Beer listing profile, dependency check

Usage Example:
==============
    from taproom.shared.repositories import BeerRepository, ManufacturerRepository

    async def add_beer(db: AsyncSession, manufacturer_id: int, name: str):
        manufacturers = ManufacturerRepository(db)
        if not await manufacturers.exists(manufacturer_id):
            raise ManufacturerNotFoundError(manufacturer_id)
        return await BeerRepository(db).create(name=name, manufacturer_id=manufacturer_id)
"""

from taproom.shared.repositories.base import BaseRepository
from taproom.shared.repositories.user_repository import UserRepository
from taproom.shared.repositories.manufacturer_repository import (
    MANUFACTURER_PROFILE,
    ManufacturerRepository,
)
from taproom.shared.repositories.beer_repository import BEER_PROFILE, BeerRepository

__all__ = [
    # Base class
    "BaseRepository",
    # Entity-specific repositories
    "UserRepository",
    "ManufacturerRepository",
    "BeerRepository",
    # Listing profiles
    "MANUFACTURER_PROFILE",
    "BEER_PROFILE",
]
