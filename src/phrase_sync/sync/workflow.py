"""
The sync and reset workflows.

Locales are processed one after the other in the declared order; the first
error propagates immediately, so later locales are never touched. Steps
that already completed are not rolled back.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from .keys import exclude_unmentioned_keys, include_all_keys
from .models import ExclusionResult, SyncResult
from .uploader import upload_locale_file

if TYPE_CHECKING:
    from ..api.client import PhraseClient
    from .poller import UploadStatusPoller

logger = logging.getLogger(__name__)


def run_sync(
    client: PhraseClient,
    locale_file: Path,
    locales: Sequence[str],
    poller: UploadStatusPoller,
) -> SyncResult:
    """
    Upload the locale file and exclude the keys it no longer mentions.

    Args:
        client: Phrase API client
        locale_file: Source-of-truth English locale file
        locales: Locales to exclude unmentioned keys from, in order
        poller: Poller used to wait for the upload to be processed

    Returns:
        Summary of the run
    """
    handle = upload_locale_file(client, locale_file)
    unmentioned = poller.poll_until_ready(handle)

    exclusions: list[ExclusionResult] = []
    if unmentioned == 0:
        logger.info("No unmentioned keys in upload '%s', nothing to exclude", handle.id)
        return SyncResult(handle.id, unmentioned, exclusions)

    for locale in locales:
        exclusions.append(exclude_unmentioned_keys(client, locale, handle, unmentioned))

    logger.info("Successfully excluded unmentioned keys.")
    return SyncResult(handle.id, unmentioned, exclusions)


def run_reset(client: PhraseClient, locales: Sequence[str]) -> list[ExclusionResult]:
    """Re-include every key in each locale, in order."""
    results = [include_all_keys(client, locale) for locale in locales]
    logger.info("Successfully re-included all keys.")
    return results
