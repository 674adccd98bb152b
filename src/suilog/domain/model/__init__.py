"""Domain model for aquariums, visits and the remote catalog."""

from __future__ import annotations

from .aquarium import DEFAULT_FISH_ICON_SIZE, DEFAULT_REPRESENTATIVE_FISH, Aquarium, VisitRecord
from .base import Entity, new_id, utcnow
from .catalog import MAX_FISH_ICON_SIZE, MIN_FISH_ICON_SIZE, CatalogEntry, CatalogResponse
from .enums import CheckInType, VisitStatusFilter

__all__ = [
    "DEFAULT_FISH_ICON_SIZE",
    "DEFAULT_REPRESENTATIVE_FISH",
    "MAX_FISH_ICON_SIZE",
    "MIN_FISH_ICON_SIZE",
    "Aquarium",
    "CatalogEntry",
    "CatalogResponse",
    "CheckInType",
    "Entity",
    "VisitRecord",
    "VisitStatusFilter",
    "new_id",
    "utcnow",
]
