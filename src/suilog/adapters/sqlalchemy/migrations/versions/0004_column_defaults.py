"""Supply server defaults everywhere and allow visits without an aquarium.

Revision ID: 0004_column_defaults
Revises: 0003_fish_icon_size
Create Date: 2024-09-03 21:40:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0004_column_defaults"
down_revision: str | None = "0003_fish_icon_size"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("aquarium") as batch_op:
        batch_op.alter_column("name", existing_type=sa.String(), server_default="")
        batch_op.alter_column("latitude", existing_type=sa.Float(), server_default="0")
        batch_op.alter_column("longitude", existing_type=sa.Float(), server_default="0")
        batch_op.alter_column("description", existing_type=sa.Text(), server_default="")
        batch_op.alter_column("region", existing_type=sa.String(), server_default="")

    with op.batch_alter_table("visit_record") as batch_op:
        batch_op.alter_column("aquarium_id", existing_type=sa.Uuid(), nullable=True)
        batch_op.alter_column("memo", existing_type=sa.Text(), server_default="")
        batch_op.alter_column(
            "check_in_type",
            existing_type=sa.Enum("location", "manual", name="checkintype", native_enum=False),
            server_default="manual",
        )


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
