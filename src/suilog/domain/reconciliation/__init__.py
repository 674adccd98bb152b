"""Reconciliation of the remote aquarium catalog into the local store.

Flow of one pass:
1) fetch the catalog revision
2) version gate against the stored version
3) resolve each entry to a local aquarium (stable id, then name)
4) build a plan of updates, creates, deletes and retained orphans
5) commit the plan and the new version atomically
"""

from __future__ import annotations

from .contracts import (
    ReconcilerState,
    ReconciliationInProgressError,
    SyncOutcome,
    SyncStatus,
)
from .engine import CatalogReconciler
from .plan import AquariumUpdate, PlanSummary, ReconciliationPlan, build_reconciliation_plan
from .resolve import AquariumIndex, Match, MatchKind, resolve_entry

__all__ = [
    "AquariumIndex",
    "AquariumUpdate",
    "CatalogReconciler",
    "Match",
    "MatchKind",
    "PlanSummary",
    "ReconcilerState",
    "ReconciliationInProgressError",
    "ReconciliationPlan",
    "SyncOutcome",
    "SyncStatus",
    "build_reconciliation_plan",
    "resolve_entry",
]
