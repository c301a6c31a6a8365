"""
Phrase REST API client.

Thin wrapper around ``httpx.Client`` that knows the four endpoints used by
the sync and reset workflows. Responses are returned unchecked: each
workflow step decides which status code counts as success for it.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING, cast

import httpx

from ..utils.core.version import get_user_agent

if TYPE_CHECKING:
    from types import TracebackType

    from ..config.schema import PhraseApiConfig

logger = logging.getLogger(__name__)


class PhraseClient:
    """Client for the project-scoped part of the Phrase API."""

    def __init__(
        self,
        config: PhraseApiConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the Phrase client.

        Args:
            config: API access configuration
            transport: Optional httpx transport, used to stub the API in tests
        """
        self.config: PhraseApiConfig = config
        self.project_path: str = f"/projects/{config.project_id}"
        self.client: httpx.Client = httpx.Client(
            base_url=config.api_url,
            headers={
                "Authorization": f"token {config.token}",
                "Accept": "application/json",
                "User-Agent": get_user_agent(),
            },
            timeout=config.timeout,
            transport=transport,
        )

    def __enter__(self) -> PhraseClient:
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self.client.close()

    def _make_request(self, method: str, endpoint: str, **kwargs: object) -> httpx.Response:
        """
        Make an HTTP request against the project's API path.

        Args:
            method: HTTP method (GET, POST, PATCH)
            endpoint: Endpoint path relative to the project
            **kwargs: Additional arguments for ``httpx.Client.request``

        Returns:
            HTTP response object, whatever its status code

        Raises:
            httpx.RequestError: If the request could not be sent
        """
        url = f"{self.project_path}/{endpoint.lstrip('/')}"
        logger.debug("%s %s", method, url)
        response = self.client.request(method, url, **kwargs)  # pyright: ignore[reportArgumentType]
        logger.debug("%s %s -> %d", method, url, response.status_code)
        return response

    def create_upload(
        self, file_name: str, file: IO[bytes], fields: dict[str, str]
    ) -> httpx.Response:
        """POST a multipart upload of ``file`` with the given form fields."""
        return self._make_request(
            "POST",
            "uploads",
            files={"file": (file_name, file, "application/json")},
            data=fields,
        )

    def get_upload(self, upload_id: str) -> httpx.Response:
        """GET the processing status of an upload."""
        return self._make_request("GET", f"uploads/{upload_id}")

    def exclude_keys(self, locale: str, query: str) -> httpx.Response:
        """PATCH keys matching ``query`` as excluded in ``locale``."""
        return self._make_request(
            "PATCH",
            "keys/exclude",
            json={"target_locale_id": locale, "q": query},
        )

    def include_keys(self, locale: str, query: str) -> httpx.Response:
        """PATCH keys matching ``query`` as no longer excluded in ``locale``."""
        return self._make_request(
            "PATCH",
            "keys/include",
            json={"target_locale_id": locale, "q": query},
        )


def response_json(response: httpx.Response) -> dict[str, object] | None:
    """Decode a JSON object body, or None when the body is not a JSON object."""
    try:
        data = response.json()  # pyright: ignore[reportAny]
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    return cast(dict[str, object], data)
