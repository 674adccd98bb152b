"""Identity resolution of catalog entries against local aquariums.

Two keys are tried per entry, in order:

1. ``stable_id``: survives renames, but legacy local rows may not have one.
2. exact ``name``: the only key available for stores that predate stable ids.

Entries are resolved independently; they are never matched against each
other. When several local aquariums share a key the first one indexed wins
(the snapshot is ordered oldest first) and the collision is logged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from suilog.domain.model import Aquarium, CatalogEntry

log = getLogger(__name__)


class MatchKind(StrEnum):
    STABLE_ID = "stable_id"
    NAME = "name"


@dataclass(frozen=True, slots=True)
class Match:
    aquarium: Aquarium
    kind: MatchKind


@dataclass(slots=True)
class AquariumIndex:
    """Lookup tables built once per reconciliation pass."""

    by_stable_id: dict[str, Aquarium] = field(default_factory=dict[str, "Aquarium"])
    by_name: dict[str, Aquarium] = field(default_factory=dict[str, "Aquarium"])

    @classmethod
    def build(cls, existing: Iterable[Aquarium]) -> AquariumIndex:
        index = cls()
        for aquarium in existing:
            if aquarium.stable_id:
                _index_first(index.by_stable_id, aquarium.stable_id, aquarium, MatchKind.STABLE_ID)
            _index_first(index.by_name, aquarium.name, aquarium, MatchKind.NAME)
        return index

    def resolve(self, entry: CatalogEntry) -> Match | None:
        if entry.stable_id:
            by_stable_id = self.by_stable_id.get(entry.stable_id)
            if by_stable_id is not None:
                return Match(by_stable_id, MatchKind.STABLE_ID)

        by_name = self.by_name.get(entry.name)
        if by_name is not None:
            return Match(by_name, MatchKind.NAME)
        return None


def resolve_entry(existing: Iterable[Aquarium], entry: CatalogEntry) -> Aquarium | None:
    """Resolve a single entry without keeping the index around."""

    match = AquariumIndex.build(existing).resolve(entry)
    return match.aquarium if match is not None else None


def _index_first(
    table: dict[str, Aquarium],
    key: str,
    aquarium: Aquarium,
    kind: MatchKind,
) -> None:
    current = table.get(key)
    if current is None:
        table[key] = aquarium
        return
    log.warning(
        "Duplicate local %s %r: keeping aquarium %s, ignoring %s",
        kind.value,
        key,
        current.id,
        aquarium.id,
    )
