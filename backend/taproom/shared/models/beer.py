"""
Beer Entity Model

SAMPLE BEER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 3                                                         │
│ name             │ "Hop Storm"                                               │
│ abv              │ 6.5                                                       │
│ style            │ "India Pale Ale"                                          │
│ description      │ "Resinous, bitter, dry finish"                            │
│ manufacturer_id  │ 12                                                        │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taproom.shared.models.base import Base, IdMixin, TimestampMixin


if TYPE_CHECKING:
    from taproom.shared.models.manufacturer import Manufacturer


class Beer(Base, IdMixin, TimestampMixin):
    """
    Beer model.

    Attributes:
        name: Beer name (required)
        abv: Alcohol by volume, percent
        style: Free-text style, e.g. "Stout"
        description: Free-text description
        manufacturer_id: Owning manufacturer, the beer's owner scope
    """

    __tablename__ = "beers"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    abv: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True,
    )

    style: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )

    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    manufacturer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("manufacturers.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    manufacturer: Mapped["Manufacturer"] = relationship(
        "Manufacturer",
        back_populates="beers",
    )

    def __repr__(self) -> str:
        return f"<Beer(id={self.id}, name={self.name}, manufacturer_id={self.manufacturer_id})>"
