"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import delete, func, select
from sqlalchemy.orm import selectinload

from suilog.adapters.sqlalchemy.mappings import (
    aquarium_table,
    sync_state_table,
    visit_record_table,
)
from suilog.domain.model import Aquarium, VisitRecord
from suilog.domain.ports.persistence import SYNC_VERSION_KEY

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from sqlalchemy.orm import QueryableAttribute, Session


def _visits_attribute() -> QueryableAttribute[object]:
    return cast("QueryableAttribute[object]", Aquarium._visits)  # noqa: SLF001  # pyright: ignore[reportPrivateUsage]


class SqlAlchemyAquariumRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Aquarium) -> None:
        self.session.add(entity)

    def get(self, aquarium_id: UUID) -> Aquarium | None:
        stmt = (
            select(Aquarium)
            .options(selectinload(_visits_attribute()))
            .where(aquarium_table.c.id == aquarium_id)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def find_by_name(self, name: str) -> Aquarium | None:
        stmt = (
            select(Aquarium)
            .options(selectinload(_visits_attribute()))
            .where(aquarium_table.c.name == name)
            .order_by(aquarium_table.c.created_at.asc().nulls_first(), aquarium_table.c.id)
            .limit(1)
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def list_all(self) -> Sequence[Aquarium]:
        """All aquariums with visits loaded, oldest first."""

        stmt = (
            select(Aquarium)
            .options(selectinload(_visits_attribute()))
            .order_by(aquarium_table.c.created_at.asc().nulls_first(), aquarium_table.c.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def count(self) -> int:
        stmt = select(func.count()).select_from(aquarium_table)
        return int(self.session.execute(stmt).scalar_one())

    def visit_count(self, aquarium_id: UUID) -> int:
        stmt = (
            select(func.count())
            .select_from(visit_record_table)
            .where(visit_record_table.c.aquarium_id == aquarium_id)
        )
        return int(self.session.execute(stmt).scalar_one())

    def remove(self, aquarium: Aquarium) -> None:
        """Delete ``aquarium`` and any visit rows keyed to it."""

        self.session.execute(
            delete(visit_record_table).where(visit_record_table.c.aquarium_id == aquarium.id)
        )
        self.session.delete(aquarium)

    def get_visit(self, visit_id: UUID) -> VisitRecord | None:
        return self.session.get(VisitRecord, visit_id)


class SqlAlchemySyncStateRepository:
    """Key/value row holding the last applied catalog version."""

    def __init__(self, session: Session, key: str = SYNC_VERSION_KEY) -> None:
        self.session = session
        self.key = key

    def get_version(self) -> int:
        stmt = select(sync_state_table.c.value).where(sync_state_table.c.key == self.key)
        value = self.session.execute(stmt).scalar_one_or_none()
        return int(value) if value is not None else 0

    def set_version(self, version: int) -> None:
        current = self.get_version()
        if version < current:
            raise ValueError(f"Refusing to lower catalog version from {current} to {version}")
        exists = self.session.execute(
            select(sync_state_table.c.key).where(sync_state_table.c.key == self.key)
        ).scalar_one_or_none()
        if exists is None:
            self.session.execute(sync_state_table.insert().values(key=self.key, value=version))
        else:
            self.session.execute(
                sync_state_table.update()
                .where(sync_state_table.c.key == self.key)
                .values(value=version)
            )
