"""
Upload, polling and key reconciliation steps of phrase-sync.

The sync workflow uploads the locale file, waits for Phrase to process it
and excludes the keys it did not mention; the reset workflow re-includes
every key.
"""

from .keys import exclude_unmentioned_keys, include_all_keys
from .models import ExclusionResult, SyncResult, UploadHandle, UploadState, UploadStatus
from .poller import UploadStatusPoller
from .uploader import upload_locale_file
from .workflow import run_reset, run_sync

__all__ = [
    "ExclusionResult",
    "SyncResult",
    "UploadHandle",
    "UploadState",
    "UploadStatus",
    "UploadStatusPoller",
    "exclude_unmentioned_keys",
    "include_all_keys",
    "run_reset",
    "run_sync",
    "upload_locale_file",
]
