"""Ports for persisting aquariums, visits and sync state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from suilog.domain.model import Aquarium

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from suilog.domain.model import VisitRecord
    from suilog.domain.reconciliation.plan import ReconciliationPlan

SYNC_VERSION_KEY = "AquariumDataVersion"

TEntity = TypeVar("TEntity")


class CatalogSaveError(RuntimeError):
    """Raised when a reconciliation plan could not be committed."""


@runtime_checkable
class Repository(Protocol[TEntity]):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class AquariumRepository(Repository[Aquarium], Protocol):
    """Persistence contract for aquariums (and, through them, their visits)."""

    def get(self, aquarium_id: UUID) -> Aquarium | None: ...

    def find_by_name(self, name: str) -> Aquarium | None: ...

    def list_all(self) -> Sequence[Aquarium]: ...

    def count(self) -> int: ...

    def visit_count(self, aquarium_id: UUID) -> int: ...

    def remove(self, aquarium: Aquarium) -> None: ...

    def get_visit(self, visit_id: UUID) -> VisitRecord | None: ...


@runtime_checkable
class SyncStateRepository(Protocol):
    """Single integer recording the last applied catalog version."""

    def get_version(self) -> int: ...

    def set_version(self, version: int) -> None: ...


@runtime_checkable
class CatalogStore(Protocol):
    """Gateway the reconciler uses to read the local catalog and commit a plan.

    ``commit`` is all-or-nothing and raises :class:`CatalogSaveError` on failure.
    """

    def snapshot(self) -> Sequence[Aquarium]: ...

    def stored_version(self) -> int: ...

    def commit(self, plan: ReconciliationPlan, *, version: int) -> None: ...
