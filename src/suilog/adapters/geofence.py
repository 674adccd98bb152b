"""Great-circle distance geofence."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Final

from suilog.domain.ports.geofence import Coordinate, Geofence

if TYPE_CHECKING:
    from suilog.domain.model import Aquarium

EARTH_RADIUS_M: Final[float] = 6_371_000.0


def haversine_distance_m(origin: Coordinate, target: Coordinate) -> float:
    lat1 = math.radians(origin.latitude)
    lat2 = math.radians(target.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(target.longitude - origin.longitude)
    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


class HaversineGeofence:
    def is_within_range(
        self,
        aquarium: Aquarium,
        coordinate: Coordinate,
        *,
        radius_m: float,
    ) -> bool:
        target = Coordinate(aquarium.latitude, aquarium.longitude)
        return haversine_distance_m(coordinate, target) <= radius_m


if TYPE_CHECKING:
    _geofence_check: Geofence = HaversineGeofence()
