"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from suilog.adapters.catalog import HttpCatalogFetcher
from suilog.adapters.geofence import HaversineGeofence
from suilog.adapters.sqlalchemy import SqlAlchemyCatalogStore, SqlAlchemyCatalogUnitOfWork
from suilog.adapters.sqlalchemy.unit_of_work import is_started, startup
from suilog.config import get_check_in_config
from suilog.domain import check_in as check_in_rules
from suilog.domain.catalog_queries import filter_aquariums, sort_aquariums
from suilog.domain.model import CheckInType, VisitStatusFilter
from suilog.domain.ports.unit_of_work import CatalogUnitOfWork
from suilog.domain.reconciliation import CatalogReconciler
from suilog.domain.statistics import collection_stats

if TYPE_CHECKING:
    from collections.abc import Collection
    from datetime import datetime
    from uuid import UUID

    from suilog.adapters.sqlalchemy import StoreStartup
    from suilog.config import CheckInConfig
    from suilog.domain.model import Aquarium, VisitRecord
    from suilog.domain.ports.fetching import CatalogFetcher
    from suilog.domain.ports.geofence import Coordinate, Geofence
    from suilog.domain.ports.persistence import CatalogStore
    from suilog.domain.reconciliation import SyncOutcome
    from suilog.domain.statistics import CollectionStats

UnitOfWorkFactory = Callable[[], CatalogUnitOfWork]


log = getLogger(__name__)


class AquariumNotFoundError(LookupError):
    """Raised when no stored aquarium matches the requested name."""


class VisitNotFoundError(LookupError):
    """Raised when no stored visit matches the requested id."""


def prepare_local_store() -> StoreStartup | None:
    """Start the SQLite store once per process. Returns ``None`` if it was already running."""

    if is_started():
        return None
    result = startup()
    if result.fell_back:
        log.warning("%s", result.warning)
    return result


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    prepare_local_store()
    return SqlAlchemyCatalogUnitOfWork


def build_catalog_reconciler(
    *,
    fetcher: CatalogFetcher | None = None,
    store: CatalogStore | None = None,
    catalog_url: str | None = None,
) -> CatalogReconciler:
    if store is None:
        store = SqlAlchemyCatalogStore(_default_unit_of_work_factory())
    return CatalogReconciler(
        fetcher=fetcher or HttpCatalogFetcher(),
        store=store,
        catalog_url=catalog_url,
    )


def sync_catalog(
    *,
    reconciler: CatalogReconciler | None = None,
    fetcher: CatalogFetcher | None = None,
    store: CatalogStore | None = None,
    catalog_url: str | None = None,
) -> SyncOutcome:
    """Bring the local catalog up to date with the remote feed."""

    effective = reconciler or build_catalog_reconciler(
        fetcher=fetcher,
        store=store,
        catalog_url=catalog_url,
    )
    log.info("Starting catalog sync from %s", catalog_url or "the configured catalog URL")
    outcome = effective.reconcile()
    log.info(
        "Finished catalog sync: status=%s, stored=%s, remote=%s",
        outcome.status.value,
        outcome.stored_version,
        outcome.remote_version,
    )
    return outcome


def list_aquariums(
    *,
    search_text: str = "",
    regions: Collection[str] = (),
    visit_status: VisitStatusFilter = VisitStatusFilter.ALL,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Aquarium]:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        aquariums = uow.repositories.aquariums.list_all()
    filtered = filter_aquariums(
        aquariums,
        search_text=search_text,
        regions=regions,
        visit_status=visit_status,
    )
    return sort_aquariums(filtered)


def get_collection_stats(*, unit_of_work_factory: UnitOfWorkFactory | None = None) -> CollectionStats:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        aquariums = uow.repositories.aquariums.list_all()
    return collection_stats(aquariums)


def check_in_aquarium(  # noqa: PLR0913
    name: str,
    *,
    check_in_type: CheckInType = CheckInType.MANUAL,
    coordinate: Coordinate | None = None,
    visit_date: datetime | None = None,
    memo: str = "",
    photo: bytes | None = None,
    config: CheckInConfig | None = None,
    geofence: Geofence | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> VisitRecord:
    """Log a visit to the aquarium called ``name``.

    Raises :class:`AquariumNotFoundError` for an unknown name and
    :class:`~suilog.domain.check_in.CheckInNotAllowedError` when a location
    check-in is out of range.
    """

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    effective_config = config or get_check_in_config()
    with effective_uow() as uow:
        aquarium = uow.repositories.aquariums.find_by_name(name)
        if aquarium is None:
            raise AquariumNotFoundError(f"No aquarium named {name!r}")
        visit = check_in_rules.check_in(
            aquarium,
            check_in_type=check_in_type,
            config=effective_config,
            geofence=geofence or HaversineGeofence(),
            coordinate=coordinate,
            visit_date=visit_date,
            memo=memo,
            photo=photo,
        )
        uow.commit()
    log.info("Checked in at %s (%s)", aquarium.name, check_in_type.value)
    return visit


def edit_visit(
    visit_id: UUID,
    *,
    memo: str | None = None,
    visit_date: datetime | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> VisitRecord:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        visit = uow.repositories.aquariums.get_visit(visit_id)
        if visit is None:
            raise VisitNotFoundError(f"No visit with id {visit_id}")
        check_in_rules.edit_visit(visit, memo=memo, visit_date=visit_date)
        uow.commit()
    return visit


def remove_visit(
    visit_id: UUID,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> None:
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        visit = uow.repositories.aquariums.get_visit(visit_id)
        if visit is None:
            raise VisitNotFoundError(f"No visit with id {visit_id}")
        check_in_rules.remove_visit(visit)
        uow.commit()
    log.info("Removed visit %s", visit_id)
