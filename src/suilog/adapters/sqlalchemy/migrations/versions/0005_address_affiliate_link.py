"""Add aquarium.address and aquarium.affiliate_link.

Revision ID: 0005_address_affiliate_link
Revises: 0004_column_defaults
Create Date: 2024-11-18 12:05:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0005_address_affiliate_link"
down_revision: str | None = "0004_column_defaults"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("aquarium") as batch_op:
        batch_op.add_column(sa.Column("address", sa.String(), nullable=True))
        batch_op.add_column(sa.Column("affiliate_link", sa.String(), nullable=True))


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
