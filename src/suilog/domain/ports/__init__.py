"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import CatalogFetcher, CatalogFetchError, FetchErrorKind
from .geofence import Coordinate, Geofence
from .persistence import (
    SYNC_VERSION_KEY,
    AquariumRepository,
    CatalogSaveError,
    CatalogStore,
    Repository,
    SyncStateRepository,
)
from .unit_of_work import (
    CatalogRepositories,
    CatalogUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "SYNC_VERSION_KEY",
    "AquariumRepository",
    "CatalogFetchError",
    "CatalogFetcher",
    "CatalogRepositories",
    "CatalogSaveError",
    "CatalogStore",
    "CatalogUnitOfWork",
    "Coordinate",
    "FetchErrorKind",
    "Geofence",
    "Repository",
    "RepositoryCollection",
    "SyncStateRepository",
    "UnitOfWork",
]
