"""Port for check-in eligibility based on the user's position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from suilog.domain.model import Aquarium


@dataclass(frozen=True, slots=True)
class Coordinate:
    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:  # noqa: PLR2004
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:  # noqa: PLR2004
            raise ValueError(f"Longitude out of range: {self.longitude}")


@runtime_checkable
class Geofence(Protocol):
    """Decides whether ``coordinate`` is close enough to ``aquarium``."""

    def is_within_range(
        self,
        aquarium: Aquarium,
        coordinate: Coordinate,
        *,
        radius_m: float,
    ) -> bool: ...
