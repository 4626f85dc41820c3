"""
Manufacturer Entity Model

A brewery. Owns beers and is owned by one user account.

Model Hierarchy:
================
    User ──1:1── Manufacturer ──1:N── Beer

A manufacturer's own id is the owner scope for itself and for its beers:
an account whose principal carries scope_id=12 may edit manufacturer 12
and every beer with manufacturer_id=12.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taproom.shared.models.base import Base, IdMixin, TimestampMixin


if TYPE_CHECKING:
    from taproom.shared.models.beer import Beer
    from taproom.shared.models.user import User


class Manufacturer(Base, IdMixin, TimestampMixin):
    """
    Manufacturer model.

    Attributes:
        id: Auto-increment identifier, also the owner scope
        name: Display name
        country: Country of origin (optional)
        user_id: Owning account

    Relationships:
        user: Owning account
        beers: Beers referencing this manufacturer. Deletion is refused
               by the service while any exist, so no cascade is configured.
    """

    __tablename__ = "manufacturers"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    country: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    user: Mapped[Optional["User"]] = relationship(
        "User",
        back_populates="manufacturer",
    )

    beers: Mapped[list["Beer"]] = relationship(
        "Beer",
        back_populates="manufacturer",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Manufacturer(id={self.id}, name={self.name})>"
