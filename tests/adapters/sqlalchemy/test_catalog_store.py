from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy.exc import OperationalError

from suilog.adapters.sqlalchemy import SqlAlchemyCatalogStore
from suilog.domain.model import CheckInType
from suilog.domain.ports.persistence import CatalogSaveError
from suilog.domain.reconciliation import build_reconciliation_plan
from tests.helpers.aquariums import make_aquarium, make_entry

if TYPE_CHECKING:
    from collections.abc import Callable

    from suilog.adapters.sqlalchemy import SqlAlchemyCatalogUnitOfWork
    from suilog.domain.model import Aquarium


def _seed(
    factory: Callable[[], SqlAlchemyCatalogUnitOfWork],
    *aquariums: Aquarium,
    version: int = 0,
) -> None:
    with factory() as uow:
        for aquarium in aquariums:
            uow.repositories.aquariums.add(aquarium)
        if version:
            uow.repositories.sync_state.set_version(version)
        uow.commit()


def test_snapshot_loads_visits_oldest_first(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    _seed(
        sqlite_unit_of_work,
        make_aquarium("Second", created_offset=2, visits=2),
        make_aquarium("First", created_offset=1),
        version=5,
    )
    store = SqlAlchemyCatalogStore(sqlite_unit_of_work)

    snapshot = store.snapshot()

    assert [aquarium.name for aquarium in snapshot] == ["First", "Second"]
    assert snapshot[1].visit_count == 2
    assert store.stored_version() == 5


def test_commit_applies_plan_and_version_together(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    _seed(
        sqlite_unit_of_work,
        make_aquarium("Old Name", stable_id="a-1", visits=1),
        make_aquarium("Legacy"),
        make_aquarium("Gone", stable_id="gone"),
        make_aquarium("Orphan", stable_id="orphan", visits=1),
        version=1,
    )
    store = SqlAlchemyCatalogStore(sqlite_unit_of_work)
    snapshot = store.snapshot()
    renamed_id = next(a.id for a in snapshot if a.stable_id == "a-1")
    plan = build_reconciliation_plan(
        snapshot,
        [
            make_entry("New Name", stable_id="a-1", fish_icon_size=5),
            make_entry("Legacy", stable_id="legacy"),
            make_entry("Brand New", stable_id="new"),
        ],
    )

    store.commit(plan, version=2)

    after = {aquarium.name: aquarium for aquarium in store.snapshot()}
    assert set(after) == {"New Name", "Legacy", "Brand New", "Orphan"}
    assert after["New Name"].id == renamed_id
    assert after["New Name"].fish_icon_size == 5
    assert after["New Name"].visit_count == 1
    assert after["Legacy"].stable_id == "legacy"
    assert after["Orphan"].visit_count == 1
    assert store.stored_version() == 2


def test_delete_is_skipped_when_a_visit_arrives_after_the_snapshot(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    _seed(sqlite_unit_of_work, make_aquarium("Late Visit", stable_id="late"), version=1)
    store = SqlAlchemyCatalogStore(sqlite_unit_of_work)
    plan = build_reconciliation_plan(store.snapshot(), [])
    assert [aquarium.name for aquarium in plan.deletes] == ["Late Visit"]

    with sqlite_unit_of_work() as uow:
        aquarium = uow.repositories.aquariums.find_by_name("Late Visit")
        assert aquarium is not None
        aquarium.log_visit(check_in_type=CheckInType.MANUAL)
        uow.commit()

    store.commit(plan, version=2)

    (survivor,) = store.snapshot()
    assert survivor.name == "Late Visit"
    assert survivor.visit_count == 1
    assert store.stored_version() == 2


def test_failed_commit_rolls_back_everything(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _seed(sqlite_unit_of_work, make_aquarium("Kept", stable_id="kept"), version=1)
    store = SqlAlchemyCatalogStore(sqlite_unit_of_work)
    plan = build_reconciliation_plan(
        store.snapshot(),
        [make_entry("Renamed", stable_id="kept"), make_entry("Added")],
    )

    def broken_set_version(self: object, version: int) -> None:
        _ = self
        raise OperationalError("UPDATE sync_state", {"value": version}, Exception("disk I/O error"))

    monkeypatch.setattr(
        "suilog.adapters.sqlalchemy.repositories.SqlAlchemySyncStateRepository.set_version",
        broken_set_version,
    )

    with pytest.raises(CatalogSaveError, match="disk I/O error"):
        store.commit(plan, version=2)

    monkeypatch.undo()
    names = [aquarium.name for aquarium in store.snapshot()]
    assert names == ["Kept"]
    assert store.stored_version() == 1


def test_lowering_the_version_is_a_save_error(
    sqlite_unit_of_work: Callable[[], SqlAlchemyCatalogUnitOfWork],
) -> None:
    _seed(sqlite_unit_of_work, version=7)
    store = SqlAlchemyCatalogStore(sqlite_unit_of_work)

    with pytest.raises(CatalogSaveError):
        store.commit(build_reconciliation_plan([], []), version=5)

    assert store.stored_version() == 7
