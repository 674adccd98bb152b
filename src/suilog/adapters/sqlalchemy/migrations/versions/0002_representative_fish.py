"""Add aquarium.representative_fish.

Revision ID: 0002_representative_fish
Revises: 0001_initial
Create Date: 2024-06-11 09:30:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0002_representative_fish"
down_revision: str | None = "0001_initial"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("aquarium") as batch_op:
        batch_op.add_column(
            sa.Column("representative_fish", sa.String(), nullable=False, server_default="fish.fill")
        )


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
