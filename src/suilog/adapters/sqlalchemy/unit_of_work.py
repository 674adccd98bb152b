"""SQLAlchemy-backed units of work and store start-up."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Generic, Literal, TypeVar

from alembic.util import CommandError
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from suilog.adapters.sqlalchemy.mappings import start_mappers
from suilog.adapters.sqlalchemy.migrations import upgrade_head
from suilog.adapters.sqlalchemy.repositories import (
    SqlAlchemyAquariumRepository,
    SqlAlchemySyncStateRepository,
)
from suilog.config import get_database_config
from suilog.domain.ports.unit_of_work import CatalogRepositories, RepositoryCollection

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine

log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when a SQLAlchemy unit of work is used before initialisation."""


@dataclass(frozen=True, slots=True)
class StoreStartup:
    """Outcome of preparing the store. ``warning`` is set when the store was rebuilt."""

    engine: Engine
    fell_back: bool = False
    warning: str | None = None


@dataclass(slots=True)
class _AdapterState:
    _engine: Engine | None = None
    _session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine | None:
        return self._engine

    @engine.setter
    def engine(self, value: Engine | None) -> None:
        self._session_factory = None
        self._engine = value

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._engine is None:
            raise StartupError(
                "SQLAlchemy adapter not initialised. Call suilog.adapters.sqlalchemy."
                "unit_of_work.startup() before requesting a unit of work."
            )
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)
        return self._session_factory


_STATE = _AdapterState()


def _is_memory_database(engine: Engine) -> bool:
    database = engine.url.database
    return not database or database == ":memory:"


def _set_aside(path: Path) -> Path:
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    target = path.with_name(f"{path.name}.broken-{stamp}")
    path.rename(target)
    return target


def _fresh_engine(engine: Engine) -> Engine:
    url = engine.url
    engine.dispose()
    if url.get_backend_name() != "sqlite":
        raise StartupError(f"Cannot rebuild a {url.get_backend_name()} store automatically")
    if _is_memory_database(engine):
        return create_engine(url, poolclass=StaticPool, future=True)

    path = Path(str(url.database))
    if path.exists():
        moved = _set_aside(path)
        log.warning("Moved unreadable store %s to %s", path, moved)
    return create_engine(url, future=True)


def prepare_store(engine: Engine) -> StoreStartup:
    """Upgrade ``engine`` to the latest schema, rebuilding an empty store if that fails.

    A failed migration never stops the application from starting: the old
    SQLite file is moved aside and a fresh store is created at head instead.
    """

    try:
        upgrade_head(engine=engine)
    except (SQLAlchemyError, CommandError) as exc:
        warning = f"Local data could not be migrated and was reset: {exc}"
        log.warning("Store migration failed; falling back to a fresh store: %s", exc)
        fresh = _fresh_engine(engine)
        upgrade_head(engine=fresh)
        return StoreStartup(engine=fresh, fell_back=True, warning=warning)
    return StoreStartup(engine=engine)


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> StoreStartup:
    """Initialise the SQLAlchemy engine, schema, and session factory."""

    if _STATE.engine is not None and not force:
        raise StartupError(
            "SQLAlchemy adapter already initialised. Pass force=True to reconfigure."
        )

    resolved_engine = engine or create_engine(
        database_uri or get_database_config().uri, future=True
    )
    start_mappers()
    result = prepare_store(resolved_engine)
    _STATE.engine = result.engine
    return result


def configured_engine() -> Engine | None:
    """Return the engine currently managed by the adapter (if any)."""

    return _STATE.engine


def is_started() -> bool:
    """Return whether the adapter has been initialised."""

    return _STATE.engine is not None


def shutdown() -> None:
    """Dispose the managed engine and reset state (primarily for tests)."""

    if _STATE.engine is not None:
        _STATE.engine.dispose()
    _STATE.engine = None


TRepositories = TypeVar("TRepositories", bound=RepositoryCollection)


class BaseSqlAlchemyUnitOfWork(ABC, Generic[TRepositories]):
    """Generic SQLAlchemy unit of work with pluggable repository collections."""

    def __init__(self) -> None:
        self.session_factory: sessionmaker[Session] = _STATE.session_factory
        self._session: Session | None = None

    @abstractmethod
    def _build_repositories(self, session: Session) -> TRepositories: ...

    def __enter__(self) -> BaseSqlAlchemyUnitOfWork[TRepositories]:
        self.session = self.session_factory()
        self._repositories = self._build_repositories(self.session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self.session.close()
        self.session = None
        return False

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    @property
    def repositories(self) -> TRepositories:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._repositories

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work session not initialised")
        return self._session

    @session.setter
    def session(self, session: Session | None) -> None:
        if self._session is not None and session is not None:
            raise StartupError("Unit of work session already initialised")
        self._session = session


class SqlAlchemyCatalogUnitOfWork(BaseSqlAlchemyUnitOfWork[CatalogRepositories]):
    """Unit of work over aquariums, visits and sync state."""

    def _build_repositories(self, session: Session) -> CatalogRepositories:
        return CatalogRepositories(
            aquariums=SqlAlchemyAquariumRepository(session),
            sync_state=SqlAlchemySyncStateRepository(session),
        )


if TYPE_CHECKING:
    from suilog.domain.ports.unit_of_work import CatalogUnitOfWork

    _uow_check: CatalogUnitOfWork = SqlAlchemyCatalogUnitOfWork()
