"""Outcome and state types shared by the reconciliation stages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .plan import PlanSummary


class ReconciliationInProgressError(RuntimeError):
    """Raised when a reconciliation is requested while another one is running."""


class ReconcilerState(StrEnum):
    IDLE = "idle"
    FETCHING = "fetching"
    SKIPPED = "skipped"
    FAILED = "failed"
    MERGING = "merging"
    COMMITTED = "committed"
    SAVE_FAILED = "save_failed"


ALLOWED_TRANSITIONS: dict[ReconcilerState, frozenset[ReconcilerState]] = {
    ReconcilerState.IDLE: frozenset({ReconcilerState.FETCHING}),
    ReconcilerState.FETCHING: frozenset(
        {
            ReconcilerState.SKIPPED,
            ReconcilerState.FAILED,
            ReconcilerState.MERGING,
            ReconcilerState.COMMITTED,
        }
    ),
    ReconcilerState.MERGING: frozenset({ReconcilerState.COMMITTED, ReconcilerState.SAVE_FAILED}),
    # a finished run may be retried
    ReconcilerState.SKIPPED: frozenset({ReconcilerState.FETCHING}),
    ReconcilerState.FAILED: frozenset({ReconcilerState.FETCHING}),
    ReconcilerState.COMMITTED: frozenset({ReconcilerState.FETCHING}),
    ReconcilerState.SAVE_FAILED: frozenset({ReconcilerState.FETCHING}),
}


class SyncStatus(StrEnum):
    SUCCESS = "success"
    SKIPPED_OFFLINE = "skipped_offline"
    ERROR_NO_DATA = "error_no_data"
    ERROR_SAVE_FAILED = "error_save_failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class SyncOutcome:
    """Result of one reconciliation attempt, as handed to the caller.

    Only the two error statuses are meant to be shown to the user; they carry
    a human readable ``message`` and are safe to retry.
    """

    status: SyncStatus
    message: str | None = None
    stored_version: int | None = None
    remote_version: int | None = None
    summary: PlanSummary | None = None

    @property
    def is_error(self) -> bool:
        return self.status in {SyncStatus.ERROR_NO_DATA, SyncStatus.ERROR_SAVE_FAILED}

    @classmethod
    def success(
        cls,
        *,
        stored_version: int,
        remote_version: int,
        summary: PlanSummary | None = None,
    ) -> SyncOutcome:
        return cls(
            status=SyncStatus.SUCCESS,
            stored_version=stored_version,
            remote_version=remote_version,
            summary=summary,
        )

    @classmethod
    def skipped_offline(cls, *, stored_version: int | None = None) -> SyncOutcome:
        return cls(status=SyncStatus.SKIPPED_OFFLINE, stored_version=stored_version)

    @classmethod
    def error_no_data(cls, message: str) -> SyncOutcome:
        return cls(status=SyncStatus.ERROR_NO_DATA, message=message)

    @classmethod
    def error_save_failed(
        cls,
        message: str,
        *,
        stored_version: int,
        remote_version: int,
    ) -> SyncOutcome:
        return cls(
            status=SyncStatus.ERROR_SAVE_FAILED,
            message=message,
            stored_version=stored_version,
            remote_version=remote_version,
        )
