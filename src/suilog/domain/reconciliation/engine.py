"""Catalog reconciler: fetch, version gate, merge and commit.

One run walks ``IDLE -> FETCHING -> {SKIPPED, FAILED, MERGING} -> {COMMITTED,
SAVE_FAILED}``. Fetch and save errors never escape a run; they are turned into
a :class:`SyncOutcome`. Only one run may be in flight per reconciler.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from suilog.domain.ports.fetching import CatalogFetchError
from suilog.domain.ports.persistence import CatalogSaveError

from .contracts import (
    ALLOWED_TRANSITIONS,
    ReconcilerState,
    ReconciliationInProgressError,
    SyncOutcome,
)
from .plan import build_reconciliation_plan

if TYPE_CHECKING:
    from suilog.domain.model import CatalogResponse
    from suilog.domain.ports.fetching import CatalogFetcher
    from suilog.domain.ports.persistence import CatalogStore

log = getLogger(__name__)


@dataclass(slots=True)
class CatalogReconciler:
    fetcher: CatalogFetcher
    store: CatalogStore
    catalog_url: str | None = None
    state: ReconcilerState = field(default=ReconcilerState.IDLE, init=False)
    last_outcome: SyncOutcome | None = field(default=None, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    def reconcile(self) -> SyncOutcome:
        """Run one reconciliation pass. Safe to call again as a retry."""

        if not self._lock.acquire(blocking=False):
            raise ReconciliationInProgressError("A catalog reconciliation is already running")
        try:
            outcome = self._run()
        except Exception:
            # unexpected failure (e.g. store unreadable); leave the reconciler retryable
            self.state = ReconcilerState.IDLE
            raise
        finally:
            self._lock.release()
        self.last_outcome = outcome
        return outcome

    def _run(self) -> SyncOutcome:
        self._transition(ReconcilerState.FETCHING)
        try:
            response = self.fetcher(self.catalog_url)
        except CatalogFetchError as exc:
            return self._on_fetch_failure(exc)

        stored_version = self.store.stored_version()
        if response.version <= stored_version:
            log.info(
                "Catalog is up to date (stored v%s, remote v%s)",
                stored_version,
                response.version,
            )
            self._transition(ReconcilerState.COMMITTED)
            return SyncOutcome.success(
                stored_version=stored_version,
                remote_version=response.version,
            )

        self._transition(ReconcilerState.MERGING)
        return self._merge(response, stored_version=stored_version)

    def _on_fetch_failure(self, exc: CatalogFetchError) -> SyncOutcome:
        existing = self.store.snapshot()
        if existing:
            log.warning(
                "Catalog fetch failed (%s), keeping %s local aquariums: %s",
                exc.kind.value,
                len(existing),
                exc,
            )
            self._transition(ReconcilerState.SKIPPED)
            return SyncOutcome.skipped_offline(stored_version=self.store.stored_version())

        log.error("Catalog fetch failed on an empty store (%s): %s", exc.kind.value, exc)
        self._transition(ReconcilerState.FAILED)
        return SyncOutcome.error_no_data(exc.user_message)

    def _merge(self, response: CatalogResponse, *, stored_version: int) -> SyncOutcome:
        existing = self.store.snapshot()
        log.info(
            "Merging catalog v%s into %s local aquariums (stored v%s)",
            response.version,
            len(existing),
            stored_version,
        )
        plan = build_reconciliation_plan(existing, response.entries)

        try:
            self.store.commit(plan, version=response.version)
        except CatalogSaveError as exc:
            log.exception("Failed to commit catalog v%s", response.version)
            self._transition(ReconcilerState.SAVE_FAILED)
            return SyncOutcome.error_save_failed(
                f"Failed to save catalog data: {exc}",
                stored_version=stored_version,
                remote_version=response.version,
            )

        summary = plan.summary
        log.info(
            "Committed catalog v%s: created=%s, updated=%s, deleted=%s, orphaned=%s",
            response.version,
            summary.created,
            summary.updated,
            summary.deleted,
            summary.orphaned,
        )
        self._transition(ReconcilerState.COMMITTED)
        return SyncOutcome.success(
            stored_version=response.version,
            remote_version=response.version,
            summary=summary,
        )

    def _transition(self, new_state: ReconcilerState) -> None:
        if new_state not in ALLOWED_TRANSITIONS[self.state]:
            raise RuntimeError(f"Invalid reconciler transition {self.state} -> {new_state}")
        log.debug("Reconciler %s -> %s", self.state.value, new_state.value)
        self.state = new_state
