"""
Base Model Classes

Foundational classes for all SQLAlchemy models in Taproom: the declarative
base, an integer primary key mixin and automatic timestamps.

Model Hierarchy:
================
    Base                    ← SQLAlchemy declarative base
       │
       ├── IdMixin          ← Auto-increment integer primary key
       │
       └── TimestampMixin   ← Automatic created_at/updated_at

Usage:
======
    from taproom.shared.models.base import Base, IdMixin, TimestampMixin

    class Beer(Base, IdMixin, TimestampMixin):
        __tablename__ = "beers"
        name: Mapped[str] = mapped_column(String(255))
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All models in the application inherit from this class either
    directly or through one of the mixin classes.
    """


class IdMixin:
    """
    Integer surrogate key.

    Catalog resources are addressed as /api/beer/42, so ids are plain
    auto-incremented integers rather than UUIDs.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class TimestampMixin:
    """
    Mixin that adds automatic timestamp tracking to models.

    Database Behavior:
    ==================
    - created_at: Set by the database on INSERT via server_default
    - updated_at: Set on INSERT, updated by SQLAlchemy on UPDATE via onupdate
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
