"""
Upload status polling.

Phrase processes uploads asynchronously. Only once an upload reaches the
"success" state does its summary contain the number of keys that the
upload did not mention, so the status is checked repeatedly with a fixed
delay until that happens or the retry budget runs out.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, cast

import httpx

from ..api.client import response_json
from ..utils.core.exceptions import PollExhaustedError, UploadContractError
from .models import UploadHandle, UploadState, UploadStatus

if TYPE_CHECKING:
    from ..api.client import PhraseClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 5
DEFAULT_INTERVAL = 30.0


def parse_upload_status(upload_id: str, response: httpx.Response) -> UploadStatus | None:
    """
    Build an ``UploadStatus`` from a 200 response of GET /uploads/{id}.

    Args:
        upload_id: Id of the polled upload, for error messages
        response: Response of the status request

    Returns:
        The parsed status, or None if the body is not a JSON object

    Raises:
        UploadContractError: If the state is "success" but the summary does
            not carry a non-negative unmentioned key count
    """
    data = response_json(response)
    if data is None:
        return None

    raw_state = data.get("state")
    state = UploadState.from_api(raw_state)
    raw_state_str = raw_state if isinstance(raw_state, str) else None
    if state is not UploadState.SUCCESS:
        return UploadStatus(state, raw_state_str)

    summary = data.get("summary")
    if not isinstance(summary, dict):
        raise UploadContractError(upload_id, "has no summary", response.text)

    count = cast(dict[str, object], summary).get("translation_keys_unmentioned")
    if not isinstance(count, int) or isinstance(count, bool) or count < 0:
        raise UploadContractError(
            upload_id,
            f"its summary has an invalid translation_keys_unmentioned value: {count!r}",
            response.text,
        )

    return UploadStatus(state, raw_state_str, count)


class UploadStatusPoller:
    """
    Bounded, sequential status checks for a single upload.

    At most ``1 + max_retries`` status requests are made. Every check that
    does not observe "success" is followed by one ``sleep(interval)`` call,
    except the last one, after which the poller gives up.
    """

    def __init__(
        self,
        client: PhraseClient,
        max_retries: int = DEFAULT_MAX_RETRIES,
        interval: float = DEFAULT_INTERVAL,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self.client: PhraseClient = client
        self.max_retries: int = max_retries
        self.interval: float = interval
        self.sleep: Callable[[float], None] = sleep

    def check_status(self, handle: UploadHandle) -> tuple[UploadStatus | None, str]:
        """
        Query the upload status once.

        Request failures and non-200 responses are reported as an unavailable
        status instead of being raised, so that they consume an attempt.

        Returns:
            Tuple of (status or None, short description of the observation)
        """
        try:
            response = self.client.get_upload(handle.id)
        except httpx.RequestError as e:
            logger.warning("Status check for upload '%s' failed: %s", handle.id, e)
            return None, f"request error ({type(e).__name__})"

        if response.status_code != 200:
            logger.warning(
                "Status check for upload '%s' returned HTTP %d: %s",
                handle.id,
                response.status_code,
                response.text,
            )
            return None, f"HTTP {response.status_code}"

        status = parse_upload_status(handle.id, response)
        if status is None:
            logger.warning("Status check for upload '%s' returned a malformed body", handle.id)
            return None, "malformed response"

        logger.info('Status - "%s"', status.raw_state)
        if status.state is UploadState.SUCCESS:
            logger.info("Upload status response: %s", response.text)
        return status, status.raw_state or "unknown state"

    def poll_until_ready(self, handle: UploadHandle) -> int:
        """
        Wait until the upload is processed and return its unmentioned key count.

        Args:
            handle: Handle of the upload to observe

        Returns:
            Number of project keys not mentioned in the upload

        Raises:
            PollExhaustedError: If "success" is not observed within the budget
            UploadContractError: If "success" is observed without a usable summary
        """
        logger.info("Checking status for upload '%s'", handle.id)
        last_observation: str | None = None

        for attempt in range(self.max_retries + 1):
            if attempt > 0:
                logger.debug(
                    "Waiting %.1fs before status check %d/%d",
                    self.interval,
                    attempt + 1,
                    self.max_retries + 1,
                )
                self.sleep(self.interval)

            status, last_observation = self.check_status(handle)
            if (
                status is not None
                and status.state is UploadState.SUCCESS
                and status.unmentioned_key_count is not None
            ):
                logger.info(
                    "Upload '%s' processed: %d unmentioned keys",
                    handle.id,
                    status.unmentioned_key_count,
                )
                return status.unmentioned_key_count

        raise PollExhaustedError(self.max_retries + 1, last_observation)
