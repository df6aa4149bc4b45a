"""States of a single image upsert.

Each invocation walks these states in order and never persists them. The
union is closed: a rollback can only be built from a reference that was
actually stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from application.dtos.errors import AppError
    from application.dtos.record_dtos import EntityRecord
    from domain.value_objects.pending_upload import PendingUpload


@dataclass(frozen=True)
class NoImageChange:
    payload: dict[str, Any]


@dataclass(frozen=True)
class Uploading:
    payload: dict[str, Any]
    upload: PendingUpload
    prior_ref: str | None


@dataclass(frozen=True)
class Committing:
    payload: dict[str, Any]
    pending_ref: str | None = None
    prior_ref: str | None = None


@dataclass(frozen=True)
class CompensatingRollback:
    pending_ref: str
    error: AppError
    prior_ref: str | None = None


@dataclass(frozen=True)
class CommittedClean:
    record: EntityRecord
    superseded_ref: str | None = None


@dataclass(frozen=True)
class Failed:
    error: AppError


UpsertState = NoImageChange | Uploading | Committing | CompensatingRollback | CommittedClean | Failed
TerminalState = CommittedClean | Failed
