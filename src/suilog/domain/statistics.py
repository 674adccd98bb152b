"""Visit statistics over the local catalog."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from suilog.domain.catalog_queries import REGION_ORDER, region_rank
from suilog.domain.model import CheckInType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from suilog.domain.model import Aquarium

DEFAULT_TOP_LIMIT = 5


@dataclass(frozen=True, slots=True)
class RegionProgress:
    region: str
    visited: int
    total: int


@dataclass(frozen=True, slots=True)
class AquariumVisitCount:
    aquarium: Aquarium
    visits: int


@dataclass(frozen=True, slots=True)
class CollectionStats:
    visited: int
    total: int
    total_visits: int
    regions: tuple[RegionProgress, ...]
    monthly_visits: dict[tuple[int, int], int] = field(default_factory=dict[tuple[int, int], int])
    top_aquariums: tuple[AquariumVisitCount, ...] = ()
    top_region: tuple[str, int] | None = None
    check_in_types: dict[CheckInType, int] = field(default_factory=dict[CheckInType, int])

    @property
    def achievement_rate(self) -> float:
        if self.total == 0:
            return 0.0
        return self.visited / self.total


def region_progress(aquariums: Sequence[Aquarium]) -> tuple[RegionProgress, ...]:
    """Per-region visited/total counts in display order; unknown regions follow the known ones."""

    known = list(REGION_ORDER)
    extra = sorted({a.region for a in aquariums} - set(known))
    progress: list[RegionProgress] = []
    for region in (*known, *extra):
        in_region = [a for a in aquariums if a.region == region]
        progress.append(
            RegionProgress(
                region=region,
                visited=sum(1 for a in in_region if a.has_visited),
                total=len(in_region),
            )
        )
    return tuple(progress)


def monthly_visits(aquariums: Sequence[Aquarium]) -> dict[tuple[int, int], int]:
    counts: Counter[tuple[int, int]] = Counter()
    for aquarium in aquariums:
        for visit in aquarium.visits:
            counts[(visit.visit_date.year, visit.visit_date.month)] += 1
    return dict(sorted(counts.items()))


def top_aquariums(
    aquariums: Sequence[Aquarium],
    *,
    limit: int = DEFAULT_TOP_LIMIT,
) -> tuple[AquariumVisitCount, ...]:
    visited = [AquariumVisitCount(a, a.visit_count) for a in aquariums if a.has_visited]
    visited.sort(key=lambda item: (-item.visits, item.aquarium.name))
    return tuple(visited[:limit])


def top_region(aquariums: Sequence[Aquarium]) -> tuple[str, int] | None:
    counts: Counter[str] = Counter()
    for aquarium in aquariums:
        if aquarium.visit_count:
            counts[aquarium.region] += aquarium.visit_count
    if not counts:
        return None
    # ties go to the northern-most region
    region, visits = min(counts.items(), key=lambda item: (-item[1], region_rank(item[0])))
    return region, visits


def check_in_type_counts(aquariums: Sequence[Aquarium]) -> dict[CheckInType, int]:
    counts = dict.fromkeys(CheckInType, 0)
    for aquarium in aquariums:
        for visit in aquarium.visits:
            counts[visit.check_in_type] += 1
    return counts


def collection_stats(aquariums: Sequence[Aquarium]) -> CollectionStats:
    return CollectionStats(
        visited=sum(1 for a in aquariums if a.has_visited),
        total=len(aquariums),
        total_visits=sum(a.visit_count for a in aquariums),
        regions=region_progress(aquariums),
        monthly_visits=monthly_visits(aquariums),
        top_aquariums=top_aquariums(aquariums),
        top_region=top_region(aquariums),
        check_in_types=check_in_type_counts(aquariums),
    )
