"""
Taproom SQLAlchemy Models

Model Hierarchy:
================
    User
       └── manufacturer (Manufacturer, optional)
              └── beers (Beer[])

Models Overview:
================
- Base: Base class and mixins (integer id, timestamps)
- User: Login account (admin or manufacturer owner)
- Manufacturer: Brewery, owner scope for itself and its beers
- Beer: Catalog item belonging to one manufacturer
"""

from taproom.shared.models.base import Base, IdMixin, TimestampMixin
from taproom.shared.models.enums import Role, SortDirection
from taproom.shared.models.user import User
from taproom.shared.models.manufacturer import Manufacturer
from taproom.shared.models.beer import Beer

__all__ = [
    # Base classes and mixins
    "Base",
    "IdMixin",
    "TimestampMixin",
    # Enums
    "Role",
    "SortDirection",
    # Core models
    "User",
    "Manufacturer",
    "Beer",
]
