from __future__ import annotations

import pytest

from suilog.adapters.geofence import HaversineGeofence, haversine_distance_m
from suilog.domain.ports.geofence import Coordinate
from tests.helpers.aquariums import make_aquarium


def test_distance_between_tokyo_and_osaka() -> None:
    tokyo = Coordinate(35.6812, 139.7671)
    osaka = Coordinate(34.7025, 135.4959)

    assert haversine_distance_m(tokyo, osaka) == pytest.approx(403_000, rel=0.01)


def test_distance_to_self_is_zero() -> None:
    point = Coordinate(43.2308, 141.0044)

    assert haversine_distance_m(point, point) == 0.0


def test_geofence_uses_radius_boundary() -> None:
    aquarium = make_aquarium(latitude=35.0, longitude=139.0)
    # 0.005 degrees of latitude is about 556 m
    nearby = Coordinate(35.005, 139.0)
    geofence = HaversineGeofence()

    assert geofence.is_within_range(aquarium, nearby, radius_m=1000)
    assert not geofence.is_within_range(aquarium, nearby, radius_m=500)


def test_coordinate_rejects_out_of_range_values() -> None:
    with pytest.raises(ValueError, match="Latitude"):
        Coordinate(91.0, 0.0)
    with pytest.raises(ValueError, match="Longitude"):
        Coordinate(0.0, 181.0)
