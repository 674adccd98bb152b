"""SQLAlchemy adapter package for Suilog."""

from __future__ import annotations

from .catalog_store import SqlAlchemyCatalogStore
from .mappings import mapper_registry, start_mappers
from .repositories import SqlAlchemyAquariumRepository, SqlAlchemySyncStateRepository
from .unit_of_work import (
    SqlAlchemyCatalogUnitOfWork,
    StartupError,
    StoreStartup,
    prepare_store,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyAquariumRepository",
    "SqlAlchemyCatalogStore",
    "SqlAlchemyCatalogUnitOfWork",
    "SqlAlchemySyncStateRepository",
    "StartupError",
    "StoreStartup",
    "mapper_registry",
    "prepare_store",
    "shutdown",
    "start_mappers",
    "startup",
]
