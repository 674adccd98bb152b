"""SQLAlchemy mapping metadata for the Suilog domain model."""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from functools import cache

from sqlalchemy import (
    Column,
    DateTime,
    Dialect,
    Enum,
    Float,
    ForeignKey,
    Integer,
    LargeBinary,
    String,
    Table,
    Text,
    TypeDecorator,
    Uuid,
    orm,
)
from sqlalchemy.orm import configure_mappers, relationship

from suilog.domain.model import Aquarium, CheckInType, VisitRecord

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


class UTCDateTime(TypeDecorator[datetime]):
    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    def process_result_value(self, value: datetime | None, dialect: Dialect) -> datetime | None:
        _ = dialect
        if value is None:
            return None
        return value if value.tzinfo else value.replace(tzinfo=UTC)


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

aquarium_table = Table(
    "aquarium",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("name", String, nullable=False, server_default=""),
    Column("latitude", Float, nullable=False, server_default="0"),
    Column("longitude", Float, nullable=False, server_default="0"),
    Column("description", Text, nullable=False, server_default=""),
    Column("region", String, nullable=False, server_default=""),
    Column("representative_fish", String, nullable=False, server_default="fish.fill"),
    Column("fish_icon_size", Integer, nullable=False, server_default="3"),
    Column("address", String, nullable=True),
    Column("affiliate_link", String, nullable=True),
    Column("stable_id", String, nullable=False, server_default=""),
    Column("created_at", UTCDateTime, nullable=True),
)

visit_record_table = Table(
    "visit_record",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column(
        "aquarium_id",
        UUIDColumnType,
        ForeignKey("aquarium.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    ),
    Column("visit_date", UTCDateTime, nullable=False),
    Column("memo", Text, nullable=False, server_default=""),
    Column("photo", LargeBinary, nullable=True),
    Column(
        "check_in_type",
        Enum(CheckInType, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        server_default=CheckInType.MANUAL.value,
    ),
)

sync_state_table = Table(
    "sync_state",
    mapper_registry.metadata,
    Column("key", String, primary_key=True),
    Column("value", Integer, nullable=False),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(
        Aquarium,
        aquarium_table,
        properties={
            "_visits": relationship(
                VisitRecord,
                cascade="all, delete-orphan",
                order_by=visit_record_table.c.visit_date,
                foreign_keys=[visit_record_table.c.aquarium_id],
            ),
        },
    )

    mapper_registry.map_imperatively(
        VisitRecord,
        visit_record_table,
        properties={
            # the aquarium owns its visits through ``_visits``
            "aquarium": relationship(
                Aquarium,
                viewonly=True,
                lazy="selectin",
                foreign_keys=[visit_record_table.c.aquarium_id],
            ),
        },
    )

    configure_mappers()
    return mapper_registry
