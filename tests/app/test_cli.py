from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from suilog.domain.model import CheckInType, VisitStatusFilter
from suilog.domain.ports.geofence import Coordinate
from suilog.domain.reconciliation import SyncOutcome
from suilog.domain.statistics import collection_stats
from suilog.ui import cli as cli_module
from tests.helpers.aquariums import make_aquarium


def test_sync_passes_url_override(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_sync(**kwargs: object) -> SyncOutcome:
        captured.update(kwargs)
        return SyncOutcome.success(stored_version=3, remote_version=3)

    monkeypatch.setattr(cli_module, "sync_catalog", fake_sync)

    cli_module.main(["sync", "--url", "https://example.com/aquariums.json"])

    assert captured["catalog_url"] == "https://example.com/aquariums.json"


def test_sync_error_outcome_exits_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_sync(**_: object) -> SyncOutcome:
        return SyncOutcome.error_no_data("Could not reach the catalog.")

    monkeypatch.setattr(cli_module, "sync_catalog", fake_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["sync"])

    assert excinfo.value.code == 1


def test_list_forwards_filters_and_prints(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    captured: dict[str, object] = {}

    def fake_list(**kwargs: object) -> list[object]:
        captured.update(kwargs)
        return [make_aquarium("Otaru", region="北海道", visits=2)]

    monkeypatch.setattr(cli_module, "list_aquariums", fake_list)

    cli_module.main(
        ["list", "--search", "ota", "--region", "北海道", "--region", "東北", "--status", "visited"]
    )

    assert captured["search_text"] == "ota"
    assert captured["regions"] == {"北海道", "東北"}
    assert captured["visit_status"] is VisitStatusFilter.VISITED
    assert "* [北海道] Otaru (2)" in capsys.readouterr().out


def test_stats_prints_achievement_rate(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    stats = collection_stats([make_aquarium("Otaru", visits=1), make_aquarium("Sunshine")])
    monkeypatch.setattr(cli_module, "get_collection_stats", lambda: stats)

    cli_module.main(["stats"])

    assert "Visited 1/2 (50%)" in capsys.readouterr().out


def test_check_in_with_location(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_check_in(name: str, **kwargs: object) -> object:
        captured["name"] = name
        captured.update(kwargs)
        return make_aquarium(name).log_visit()

    monkeypatch.setattr(cli_module, "check_in_at", fake_check_in)

    cli_module.main(
        [
            "check-in",
            "Otaru",
            "--lat",
            "43.23",
            "--lon",
            "141.0",
            "--memo",
            "seals",
            "--date",
            "2024-07-01T09:00:00+09:00",
        ]
    )

    assert captured["name"] == "Otaru"
    assert captured["check_in_type"] is CheckInType.LOCATION
    assert captured["coordinate"] == Coordinate(43.23, 141.0)
    assert captured["memo"] == "seals"
    assert captured["visit_date"] == datetime(2024, 7, 1, 0, 0, tzinfo=UTC)


def test_manual_check_in_has_no_coordinate(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_check_in(name: str, **kwargs: object) -> object:
        captured.update(kwargs)
        return make_aquarium(name).log_visit()

    monkeypatch.setattr(cli_module, "check_in_at", fake_check_in)

    cli_module.main(["check-in", "Otaru", "--manual"])

    assert captured["check_in_type"] is CheckInType.MANUAL
    assert captured["coordinate"] is None


def test_latitude_without_longitude_is_a_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "check_in_at", lambda *_, **__: None)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["check-in", "Otaru", "--lat", "43.2"])

    assert excinfo.value.code == 2


def test_remove_visit_rejects_invalid_uuid() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["remove-visit", "not-a-uuid"])

    assert excinfo.value.code == 2


def test_edit_visit_forwards_changes(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}
    visit_id = uuid4()

    def fake_edit(received_id: object, **kwargs: object) -> None:
        captured["id"] = received_id
        captured.update(kwargs)

    monkeypatch.setattr(cli_module, "edit_visit", fake_edit)

    cli_module.main(["edit-visit", str(visit_id), "--memo", "rainy day"])

    assert captured == {"id": visit_id, "memo": "rainy day", "visit_date": None}


def test_missing_command_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2
