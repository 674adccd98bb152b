"""Add aquarium.fish_icon_size.

Revision ID: 0003_fish_icon_size
Revises: 0002_representative_fish
Create Date: 2024-07-20 18:15:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0003_fish_icon_size"
down_revision: str | None = "0002_representative_fish"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("aquarium") as batch_op:
        batch_op.add_column(
            sa.Column("fish_icon_size", sa.Integer(), nullable=False, server_default="3")
        )


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
