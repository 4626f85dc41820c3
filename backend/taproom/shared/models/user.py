"""
User Entity Model

Represents an account that can log in: the administrator, or the account
owning a manufacturer.

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 7                                                         │
│ name             │ "brew1"                                                   │
│ password         │ "$2b$12$..."                                              │
│ roles            │ "MANUFACTURER"                                            │
│ enabled          │ true                                                      │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from taproom.shared.models.base import Base, IdMixin, TimestampMixin
from taproom.shared.models.enums import Role


if TYPE_CHECKING:
    from taproom.shared.models.manufacturer import Manufacturer


class User(Base, IdMixin, TimestampMixin):
    """
    User account.

    Attributes:
        id: Auto-increment identifier
        name: Login name (unique)
        password: Bcrypt hash, never the plain text
        roles: Comma-separated Role values
        enabled: Disabled accounts cannot log in

    Relationships:
        manufacturer: The manufacturer owned by this account, if any
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    roles: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default=Role.MANUFACTURER.value,
    )

    enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )

    manufacturer: Mapped[Optional["Manufacturer"]] = relationship(
        "Manufacturer",
        back_populates="user",
        uselist=False,
    )

    @property
    def role_set(self) -> frozenset[Role]:
        """Parse the stored roles string, skipping blanks and unknown names."""
        known = {role.value for role in Role}
        return frozenset(
            Role(part.strip().upper())
            for part in (self.roles or "").split(",")
            if part.strip().upper() in known
        )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name}, roles={self.roles})>"
