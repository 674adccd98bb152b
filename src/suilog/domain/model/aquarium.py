"""Aquariums and the visits users log against them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from suilog.domain.model.base import Entity, utcnow
from suilog.domain.model.enums import CheckInType

if TYPE_CHECKING:
    from datetime import datetime

    from suilog.domain.model.catalog import CatalogEntry

DEFAULT_REPRESENTATIVE_FISH: Final[str] = "fish.fill"
DEFAULT_FISH_ICON_SIZE: Final[int] = 3


@dataclass(eq=False, kw_only=True)
class Aquarium(Entity):
    """Local mirror of a catalog entry that owns the user's visit history.

    ``stable_id`` is empty until the catalog assigns one. Once set it is only
    ever written again by an explicit :meth:`promote_stable_id` from empty.
    """

    name: str
    latitude: float
    longitude: float
    description: str = ""
    region: str = ""
    representative_fish: str = DEFAULT_REPRESENTATIVE_FISH
    fish_icon_size: int = DEFAULT_FISH_ICON_SIZE
    address: str | None = None
    affiliate_link: str | None = None
    stable_id: str = ""
    created_at: datetime | None = field(default_factory=utcnow)

    _visits: list[VisitRecord] = field(default_factory=list["VisitRecord"], repr=False)

    @classmethod
    def from_catalog_entry(cls, entry: CatalogEntry) -> Aquarium:
        return cls(
            name=entry.name,
            latitude=entry.latitude,
            longitude=entry.longitude,
            description=entry.description,
            region=entry.region,
            representative_fish=entry.representative_fish,
            fish_icon_size=entry.fish_icon_size,
            address=entry.address,
            affiliate_link=entry.affiliate_link,
            stable_id=entry.stable_id or "",
        )

    def apply_catalog_entry(self, entry: CatalogEntry) -> None:
        """Overwrite every catalog-owned field. Identity and visits are untouched."""
        self.name = entry.name
        self.latitude = entry.latitude
        self.longitude = entry.longitude
        self.description = entry.description
        self.region = entry.region
        self.representative_fish = entry.representative_fish
        self.fish_icon_size = entry.fish_icon_size
        self.address = entry.address
        self.affiliate_link = entry.affiliate_link

    def promote_stable_id(self, stable_id: str) -> bool:
        """Backfill ``stable_id`` if it is still empty. Returns whether it changed."""
        if not stable_id or self.stable_id:
            return False
        self.stable_id = stable_id
        return True

    @property
    def visits(self) -> tuple[VisitRecord, ...]:
        return tuple(self._visits)

    @property
    def visit_count(self) -> int:
        return len(self._visits)

    @property
    def has_visited(self) -> bool:
        return bool(self._visits)

    @property
    def last_visit_date(self) -> datetime | None:
        if not self._visits:
            return None
        return max(visit.visit_date for visit in self._visits)

    def log_visit(
        self,
        *,
        check_in_type: CheckInType = CheckInType.MANUAL,
        visit_date: datetime | None = None,
        memo: str = "",
        photo: bytes | None = None,
    ) -> VisitRecord:
        visit = VisitRecord(
            aquarium=self,
            visit_date=visit_date or utcnow(),
            memo=memo,
            photo=photo,
            check_in_type=check_in_type,
        )
        self._visits.append(visit)
        return visit

    def remove_visit(self, visit: VisitRecord) -> None:
        if visit not in self._visits:
            raise ValueError("Visit does not belong to this aquarium")
        self._visits.remove(visit)


@dataclass(eq=False, kw_only=True)
class VisitRecord(Entity):
    """A single logged visit.

    ``aquarium`` is a navigational back-reference only; the aquarium owns the
    visit through its ``visits`` collection.
    """

    aquarium: Aquarium | None = field(default=None, repr=False)
    visit_date: datetime = field(default_factory=utcnow)
    memo: str = ""
    photo: bytes | None = field(default=None, repr=False)
    check_in_type: CheckInType = CheckInType.MANUAL
