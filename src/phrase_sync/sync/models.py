"""Value types passed between the steps of a phrase-sync run."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class UploadHandle(NamedTuple):
    """Opaque identifier of an upload, as assigned by Phrase."""

    id: str


class UploadState(Enum):
    """Server-side processing state of an upload."""

    PROCESSING = "processing"
    SUCCESS = "success"
    OTHER = "other"

    @classmethod
    def from_api(cls, value: object) -> UploadState:
        match value:
            case "processing":
                return cls.PROCESSING
            case "success":
                return cls.SUCCESS
            case _:
                return cls.OTHER


class UploadStatus(NamedTuple):
    """Snapshot of an upload's processing state."""

    state: UploadState
    raw_state: str | None = None
    unmentioned_key_count: int | None = None


class ExclusionResult(NamedTuple):
    """Outcome of an exclude or include request for one locale."""

    locale: str
    records_affected: int | None


class SyncResult(NamedTuple):
    """Summary of a completed sync run."""

    upload_id: str
    unmentioned_key_count: int
    exclusions: list[ExclusionResult]
