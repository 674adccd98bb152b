from __future__ import annotations

from datetime import UTC, datetime

import pytest

from suilog.adapters.geofence import HaversineGeofence
from suilog.config import CheckInConfig
from suilog.domain.check_in import (
    CheckInNotAllowedError,
    can_check_in,
    check_in,
    edit_visit,
    remove_visit,
)
from suilog.domain.model import CheckInType
from suilog.domain.ports.geofence import Coordinate
from tests.helpers.aquariums import make_aquarium

SUNSHINE = Coordinate(35.7289, 139.7197)
# roughly 5 km away, near Shinjuku
SHINJUKU = Coordinate(35.6896, 139.7006)


def test_location_check_in_inside_radius_logs_visit() -> None:
    aquarium = make_aquarium("Sunshine")

    visit = check_in(
        aquarium,
        check_in_type=CheckInType.LOCATION,
        config=CheckInConfig(),
        geofence=HaversineGeofence(),
        coordinate=SUNSHINE,
        memo="penguins",
    )

    assert aquarium.visits == (visit,)
    assert visit.check_in_type is CheckInType.LOCATION
    assert visit.memo == "penguins"


def test_location_check_in_outside_radius_is_refused() -> None:
    aquarium = make_aquarium("Sunshine")

    with pytest.raises(CheckInNotAllowedError, match="1000 m"):
        check_in(
            aquarium,
            check_in_type=CheckInType.LOCATION,
            config=CheckInConfig(),
            geofence=HaversineGeofence(),
            coordinate=SHINJUKU,
        )

    assert not aquarium.has_visited


def test_location_check_in_without_position_is_refused() -> None:
    assert not can_check_in(
        make_aquarium(),
        None,
        config=CheckInConfig(),
        geofence=HaversineGeofence(),
    )


def test_larger_radius_and_always_allow_override_the_geofence() -> None:
    aquarium = make_aquarium("Sunshine")
    geofence = HaversineGeofence()

    assert can_check_in(aquarium, SHINJUKU, config=CheckInConfig(radius_m=10_000), geofence=geofence)
    assert can_check_in(aquarium, None, config=CheckInConfig(always_allow=True), geofence=geofence)


def test_manual_check_in_ignores_distance() -> None:
    aquarium = make_aquarium("Sunshine")

    visit = check_in(
        aquarium,
        check_in_type=CheckInType.MANUAL,
        config=CheckInConfig(),
        geofence=HaversineGeofence(),
        coordinate=SHINJUKU,
    )

    assert visit.check_in_type is CheckInType.MANUAL


def test_edit_and_remove_visit() -> None:
    aquarium = make_aquarium(visits=2)
    first, second = aquarium.visits
    new_date = datetime(2025, 2, 2, tzinfo=UTC)

    edit_visit(first, memo="edited", visit_date=new_date)
    remove_visit(second)

    assert first.memo == "edited"
    assert first.visit_date == new_date
    assert aquarium.visits == (first,)
