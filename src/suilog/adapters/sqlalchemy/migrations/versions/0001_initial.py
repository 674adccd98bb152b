"""Create aquarium and visit_record tables.

Revision ID: 0001_initial
Revises:
Create Date: 2024-05-02 10:00:00
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "aquarium",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("region", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_aquarium")),
    )
    op.create_table(
        "visit_record",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("aquarium_id", sa.Uuid(), nullable=False),
        sa.Column("visit_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("memo", sa.Text(), nullable=False),
        sa.Column("photo", sa.LargeBinary(), nullable=True),
        sa.Column(
            "check_in_type",
            sa.Enum("location", "manual", name="checkintype", native_enum=False),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["aquarium_id"],
            ["aquarium.id"],
            name=op.f("fk_visit_record_aquarium_id_aquarium"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_visit_record")),
    )
    op.create_index(
        op.f("ix_visit_record_aquarium_id"), "visit_record", ["aquarium_id"], unique=False
    )


def downgrade() -> None:
    raise NotImplementedError("Downgrades are not supported")
