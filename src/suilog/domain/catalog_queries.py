"""Filtering and ordering of the local catalog for display."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from suilog.domain.model import VisitStatusFilter

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from suilog.domain.model import Aquarium

# north to south
REGION_ORDER: Final[tuple[str, ...]] = (
    "北海道",
    "東北",
    "関東",
    "中部",
    "近畿",
    "中国・四国",
    "九州・沖縄",
)


def region_rank(region: str) -> int:
    try:
        return REGION_ORDER.index(region)
    except ValueError:
        return len(REGION_ORDER)


def filter_aquariums(
    aquariums: Iterable[Aquarium],
    *,
    search_text: str = "",
    regions: Collection[str] = (),
    visit_status: VisitStatusFilter = VisitStatusFilter.ALL,
) -> list[Aquarium]:
    """Apply search, region and visit-status filters; empty filters match everything."""

    needle = search_text.strip().casefold()
    result: list[Aquarium] = []
    for aquarium in aquariums:
        if needle and needle not in aquarium.name.casefold():
            continue
        if regions and aquarium.region not in regions:
            continue
        if visit_status is VisitStatusFilter.VISITED and not aquarium.has_visited:
            continue
        if visit_status is VisitStatusFilter.NOT_VISITED and aquarium.has_visited:
            continue
        result.append(aquarium)
    return result


def sort_aquariums(aquariums: Iterable[Aquarium]) -> list[Aquarium]:
    """Visited first, then by region north to south, then by name."""

    return sorted(
        aquariums,
        key=lambda aquarium: (
            not aquarium.has_visited,
            region_rank(aquarium.region),
            aquarium.name,
        ),
    )
