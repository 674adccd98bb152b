"""Logging, editing and removing visits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from suilog.domain.model import CheckInType

if TYPE_CHECKING:
    from datetime import datetime

    from suilog.config.check_in import CheckInConfig
    from suilog.domain.model import Aquarium, VisitRecord
    from suilog.domain.ports.geofence import Coordinate, Geofence


class CheckInNotAllowedError(RuntimeError):
    """Raised when a location check-in is attempted out of range."""


def can_check_in(
    aquarium: Aquarium,
    coordinate: Coordinate | None,
    *,
    config: CheckInConfig,
    geofence: Geofence,
) -> bool:
    if config.always_allow:
        return True
    if coordinate is None:
        return False
    return geofence.is_within_range(aquarium, coordinate, radius_m=config.radius_m)


def check_in(  # noqa: PLR0913
    aquarium: Aquarium,
    *,
    check_in_type: CheckInType,
    config: CheckInConfig,
    geofence: Geofence,
    coordinate: Coordinate | None = None,
    visit_date: datetime | None = None,
    memo: str = "",
    photo: bytes | None = None,
) -> VisitRecord:
    """Log a visit. Location check-ins must pass the geofence; manual ones always succeed."""

    if check_in_type is CheckInType.LOCATION and not can_check_in(
        aquarium,
        coordinate,
        config=config,
        geofence=geofence,
    ):
        raise CheckInNotAllowedError(
            f"Not within {config.radius_m:.0f} m of {aquarium.name}"
        )
    return aquarium.log_visit(
        check_in_type=check_in_type,
        visit_date=visit_date,
        memo=memo,
        photo=photo,
    )


def edit_visit(
    visit: VisitRecord,
    *,
    memo: str | None = None,
    visit_date: datetime | None = None,
) -> VisitRecord:
    if memo is not None:
        visit.memo = memo
    if visit_date is not None:
        visit.visit_date = visit_date
    return visit


def remove_visit(visit: VisitRecord) -> None:
    if visit.aquarium is None:
        raise ValueError("Visit is not attached to an aquarium")
    visit.aquarium.remove_visit(visit)
