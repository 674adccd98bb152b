"""Add aquarium.stable_id.

Revision ID: 0006_stable_id
Revises: 0005_address_affiliate_link
Create Date: 2025-02-07 08:50:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0006_stable_id"
down_revision: str | None = "0005_address_affiliate_link"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    with op.batch_alter_table("aquarium") as batch_op:
        batch_op.add_column(
            sa.Column("stable_id", sa.String(), nullable=False, server_default="")
        )


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
