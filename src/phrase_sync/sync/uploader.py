"""
Upload of the source locale file to Phrase.

The upload is processed asynchronously by Phrase; the returned handle is
used to poll for completion and to select the keys it did not mention.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

from ..api.client import response_json
from ..utils.core.exceptions import UploadFailedError
from .models import UploadHandle

if TYPE_CHECKING:
    from ..api.client import PhraseClient

logger = logging.getLogger(__name__)

# Form fields of POST /uploads, see
# https://developers.phrase.com/api/#post-/projects/-project_id-/uploads
FILE_FORMAT = "simple_json"
SOURCE_LOCALE = "en"
UPLOAD_TAG = "synced_from_code"

UPLOAD_FIELDS: dict[str, str] = {
    "file_format": FILE_FORMAT,
    "locale_id": SOURCE_LOCALE,
    "tags": UPLOAD_TAG,
    "update_translations": "true",
}


def upload_locale_file(client: PhraseClient, file_path: Path) -> UploadHandle:
    """
    Upload the English locale file and return the upload's handle.

    Args:
        client: Phrase API client
        file_path: Path to the locale file

    Returns:
        Handle of the created upload

    Raises:
        UploadFailedError: If the file cannot be read, the request cannot be
            sent, or Phrase does not answer with 201 Created and an id
    """
    logger.info("Uploading locale file '%s' to Phrase...", file_path)

    try:
        with file_path.open("rb") as file:
            response = client.create_upload(file_path.name, file, UPLOAD_FIELDS)
    except OSError as e:
        raise UploadFailedError(f"Failed to read locale file '{file_path}': {e}") from e
    except httpx.RequestError as e:
        raise UploadFailedError(f"Failed to upload locale file to Phrase: {e}") from e

    logger.info("Upload response: %s", response.text)

    if response.status_code != 201:
        raise UploadFailedError(
            f"Failed to upload locale file to Phrase - status code: {response.status_code}",
            status_code=response.status_code,
            response_body=response.text,
        )

    data = response_json(response)
    raw_id = data.get("id") if data is not None else None
    # The id is opaque; any scalar is passed on as its string form
    if raw_id is None or isinstance(raw_id, dict | list) or raw_id == "":
        raise UploadFailedError(
            "Phrase acknowledged the upload but returned no upload id",
            status_code=response.status_code,
            response_body=response.text,
        )

    upload_id = str(raw_id)
    logger.info("File upload successfully initiated (upload id '%s')", upload_id)
    return UploadHandle(upload_id)
