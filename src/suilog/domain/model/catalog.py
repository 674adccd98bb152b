"""Transient catalog feed values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

MIN_FISH_ICON_SIZE: Final[int] = 1
MAX_FISH_ICON_SIZE: Final[int] = 5


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntry:
    """One aquarium descriptor as published by the remote catalog."""

    name: str
    latitude: float
    longitude: float
    description: str
    region: str
    representative_fish: str
    fish_icon_size: int
    address: str | None = None
    affiliate_link: str | None = None
    stable_id: str | None = None

    def __post_init__(self) -> None:
        if not MIN_FISH_ICON_SIZE <= self.fish_icon_size <= MAX_FISH_ICON_SIZE:
            raise ValueError(
                f"fish_icon_size must be between {MIN_FISH_ICON_SIZE} and {MAX_FISH_ICON_SIZE}"
            )


@dataclass(frozen=True, slots=True)
class CatalogResponse:
    """A full catalog revision."""

    version: int
    entries: tuple[CatalogEntry, ...] = field(default_factory=tuple)
