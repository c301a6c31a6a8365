"""
Key exclusion and inclusion for a target locale.

Excluding marks every key an upload did not mention as "excluded" in a
locale; including removes that mark from every key of the locale again.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from ..api.client import response_json
from ..utils.core.exceptions import (
    ExclusionAPIError,
    ExclusionMismatchError,
    InclusionAPIError,
)
from .models import ExclusionResult, UploadHandle

if TYPE_CHECKING:
    from ..api.client import PhraseClient

logger = logging.getLogger(__name__)

ALL_KEYS_QUERY = "*"


def unmentioned_in_upload_query(handle: UploadHandle) -> str:
    """Search query selecting the keys not mentioned in an upload."""
    return f"unmentioned_in_upload:{handle.id}"


def _records_affected(response: httpx.Response) -> int | None:
    data = response_json(response)
    if data is None:
        return None
    value = data.get("records_affected")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def exclude_unmentioned_keys(
    client: PhraseClient, locale: str, handle: UploadHandle, expected_count: int
) -> ExclusionResult:
    """
    Exclude the keys unmentioned in an upload from a locale.

    Args:
        client: Phrase API client
        locale: Target locale identifier
        handle: Upload whose unmentioned keys are excluded
        expected_count: Unmentioned key count reported by the upload summary

    Returns:
        The exclusion result

    Raises:
        ExclusionAPIError: If the request fails or is not answered with 200
        ExclusionMismatchError: If the affected record count differs from
            ``expected_count``
    """
    logger.info("Attempting to exclude %d unmentioned keys in %s...", expected_count, locale)

    try:
        response = client.exclude_keys(locale, unmentioned_in_upload_query(handle))
    except httpx.RequestError as e:
        raise ExclusionAPIError(locale, response_body=str(e)) from e

    logger.info("Exclude response (%s): %s", locale, response.text)

    if response.status_code != 200:
        raise ExclusionAPIError(locale, response.status_code, response.text)

    records_affected = _records_affected(response)
    if records_affected != expected_count:
        raise ExclusionMismatchError(
            locale, handle.id, expected_count, records_affected, response.text
        )

    logger.info("Excluded %d keys in %s", records_affected, locale)
    return ExclusionResult(locale, records_affected)


def include_all_keys(client: PhraseClient, locale: str) -> ExclusionResult:
    """
    Remove the excluded mark from every key in a locale.

    Args:
        client: Phrase API client
        locale: Target locale identifier

    Returns:
        The inclusion result; the affected count is informational only

    Raises:
        InclusionAPIError: If the request fails or is not answered with 200
    """
    logger.info("Attempting to include all keys in %s...", locale)

    try:
        response = client.include_keys(locale, ALL_KEYS_QUERY)
    except httpx.RequestError as e:
        raise InclusionAPIError(locale, response_body=str(e)) from e

    logger.info("Include response (%s): %s", locale, response.text)

    if response.status_code != 200:
        raise InclusionAPIError(locale, response.status_code, response.text)

    return ExclusionResult(locale, _records_affected(response))
