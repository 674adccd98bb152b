"""Persistence gateway that applies reconciliation plans through a unit of work."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from suilog.domain.ports.persistence import CatalogSaveError, CatalogStore

from .unit_of_work import SqlAlchemyCatalogUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from suilog.domain.model import Aquarium
    from suilog.domain.ports.unit_of_work import CatalogUnitOfWork
    from suilog.domain.reconciliation.plan import ReconciliationPlan

log = getLogger(__name__)


@dataclass(slots=True)
class SqlAlchemyCatalogStore:
    """Reads snapshots and commits plans, each in its own unit of work."""

    unit_of_work_factory: Callable[[], CatalogUnitOfWork] = SqlAlchemyCatalogUnitOfWork

    def snapshot(self) -> Sequence[Aquarium]:
        with self.unit_of_work_factory() as uow:
            return list(uow.repositories.aquariums.list_all())

    def stored_version(self) -> int:
        with self.unit_of_work_factory() as uow:
            return uow.repositories.sync_state.get_version()

    def commit(self, plan: ReconciliationPlan, *, version: int) -> None:
        try:
            with self.unit_of_work_factory() as uow:
                self._apply(uow, plan, version=version)
                uow.commit()
        except (SQLAlchemyError, ValueError) as exc:
            raise CatalogSaveError(f"Failed to save catalog v{version}: {exc}") from exc
        log.info(
            "Saved catalog v%s: %s created, %s updated, %s deleted, %s kept with visits",
            version,
            len(plan.creates),
            len(plan.updates),
            len(plan.deletes),
            len(plan.orphans),
        )

    def _apply(self, uow: CatalogUnitOfWork, plan: ReconciliationPlan, *, version: int) -> None:
        aquariums = uow.repositories.aquariums

        for update in plan.updates:
            target = aquariums.get(update.aquarium_id)
            if target is None:
                raise CatalogSaveError(f"Aquarium {update.aquarium_id} disappeared during sync")
            update.apply(target)

        for created in plan.creates:
            aquariums.add(created)

        for candidate in plan.deletes:
            target = aquariums.get(candidate.id)
            if target is None:
                continue
            # a visit logged since the snapshot keeps the aquarium alive
            if aquariums.visit_count(target.id) or target.has_visited:
                log.info("Keeping %s: visits were logged during sync", target.name)
                continue
            aquariums.remove(target)

        uow.repositories.sync_state.set_version(version)


if TYPE_CHECKING:
    _store_check: CatalogStore = SqlAlchemyCatalogStore()
