"""Reconciliation plan: the contract between matching and persistence.

Building a plan is read-only with respect to the snapshot it was given. The
persistence gateway is the only stage that mutates stored aquariums, and it
applies the whole plan in a single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from suilog.domain.model import Aquarium

from .resolve import AquariumIndex, MatchKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from uuid import UUID

    from suilog.domain.model import CatalogEntry

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AquariumUpdate:
    """Overwrite a matched aquarium with a catalog entry."""

    target: Aquarium
    entry: CatalogEntry
    match_kind: MatchKind
    promote_stable_id: str | None = None

    @property
    def aquarium_id(self) -> UUID:
        return self.target.id

    def apply(self, aquarium: Aquarium) -> None:
        aquarium.apply_catalog_entry(self.entry)
        if self.promote_stable_id:
            aquarium.promote_stable_id(self.promote_stable_id)


@dataclass(frozen=True, slots=True)
class PlanSummary:
    created: int
    updated: int
    deleted: int
    orphaned: int


@dataclass(slots=True)
class ReconciliationPlan:
    updates: list[AquariumUpdate] = field(default_factory=list[AquariumUpdate])
    creates: list[Aquarium] = field(default_factory=list[Aquarium])
    # unmatched aquariums without visits
    deletes: list[Aquarium] = field(default_factory=list[Aquarium])
    # unmatched aquariums kept because they own visits
    orphans: list[Aquarium] = field(default_factory=list[Aquarium])

    @property
    def summary(self) -> PlanSummary:
        return PlanSummary(
            created=len(self.creates),
            updated=len(self.updates),
            deleted=len(self.deletes),
            orphaned=len(self.orphans),
        )


def build_reconciliation_plan(
    existing: Sequence[Aquarium],
    entries: Iterable[CatalogEntry],
) -> ReconciliationPlan:
    """Match ``entries`` against ``existing`` and decide every create/update/delete."""

    index = AquariumIndex.build(existing)
    plan = ReconciliationPlan()
    seen: set[UUID] = set()

    for entry in entries:
        match = index.resolve(entry)
        if match is None:
            plan.creates.append(Aquarium.from_catalog_entry(entry))
            log.debug("Create: %s", entry.name)
            continue

        target = match.aquarium
        promote = entry.stable_id if entry.stable_id and not target.stable_id else None
        plan.updates.append(
            AquariumUpdate(
                target=target,
                entry=entry,
                match_kind=match.kind,
                promote_stable_id=promote,
            )
        )
        seen.add(target.id)
        log.debug("Update (%s): %s -> %s", match.kind.value, target.name, entry.name)

    for aquarium in existing:
        if aquarium.id in seen:
            continue
        if aquarium.has_visited:
            plan.orphans.append(aquarium)
            log.debug("Keep orphan with %s visit(s): %s", aquarium.visit_count, aquarium.name)
        else:
            plan.deletes.append(aquarium)
            log.debug("Delete: %s", aquarium.name)

    return plan
