# pylint: skip-file
# ruff: noqa
"""Catalog schema - users, manufacturers, beers

Revision ID: 001
Revises:
Create Date: 2026-01-01 00:00:00

Tables created:
- users: Login accounts (administrator and manufacturer owners)
- manufacturers: Breweries, each owned by at most one account
- beers: Catalog items, each belonging to one manufacturer

Foreign keys:
- manufacturers.user_id → users.id (SET NULL)
- beers.manufacturer_id → manufacturers.id (RESTRICT: a manufacturer with
  beers cannot be deleted)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("roles", sa.String(255), nullable=False, server_default="MANUFACTURER"),
        sa.Column("enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_users_name", "users", ["name"], unique=True)

    # Create manufacturers table
    op.create_table(
        "manufacturers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("country", sa.String(255), nullable=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
            unique=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_manufacturers_name", "manufacturers", ["name"])

    # Create beers table
    op.create_table(
        "beers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("abv", sa.Float(), nullable=True),
        sa.Column("style", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "manufacturer_id",
            sa.Integer(),
            sa.ForeignKey("manufacturers.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_beers_name", "beers", ["name"])
    op.create_index("ix_beers_manufacturer_id", "beers", ["manufacturer_id"])


def downgrade() -> None:
    op.drop_index("ix_beers_manufacturer_id", table_name="beers")
    op.drop_index("ix_beers_name", table_name="beers")
    op.drop_table("beers")
    op.drop_index("ix_manufacturers_name", table_name="manufacturers")
    op.drop_table("manufacturers")
    op.drop_index("ix_users_name", table_name="users")
    op.drop_table("users")
