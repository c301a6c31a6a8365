"""
Exception classes for phrase-sync.

Every failure of the sync and reset workflows is represented by one of the
classes below. Components raise them; only the entry point decides how the
process exits.
"""

from __future__ import annotations

from enum import Enum


class ErrorCategory(Enum):
    """Categories of errors for reporting."""

    NETWORK = "network"
    API = "api"
    CONTRACT = "contract"
    CONFIGURATION = "configuration"


class PhraseSyncError(Exception):
    """Base exception class for phrase-sync specific errors."""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.API,
        step: str = "sync",
        locale: str | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.category: ErrorCategory = category
        self.step: str = step
        self.locale: str | None = locale
        self.response_body: str | None = response_body


class ConfigurationError(PhraseSyncError):
    """Invalid or missing configuration."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message,
            category=ErrorCategory.CONFIGURATION,
            step="configuration",
        )


class UploadFailedError(PhraseSyncError):
    """The locale file upload was not acknowledged with 201 Created."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(
            message,
            category=ErrorCategory.NETWORK if status_code is None else ErrorCategory.API,
            step="upload",
            response_body=response_body,
        )
        self.status_code: int | None = status_code


class PollExhaustedError(PhraseSyncError):
    """The upload never reached the success state within the retry budget."""

    def __init__(self, attempts: int, last_state: str | None = None) -> None:
        super().__init__(
            f"Failed to reach 'success' state of upload after {attempts} status checks "
            + f"(last observed: {last_state or 'nothing'})",
            category=ErrorCategory.API,
            step="poll",
        )
        self.attempts: int = attempts
        self.last_state: str | None = last_state


class UploadContractError(PhraseSyncError):
    """A successful upload status did not carry a usable summary."""

    def __init__(
        self, upload_id: str, detail: str, response_body: str | None = None
    ) -> None:
        super().__init__(
            f"Upload '{upload_id}' reported success but {detail}",
            category=ErrorCategory.CONTRACT,
            step="poll",
            response_body=response_body,
        )
        self.upload_id: str = upload_id


class ExclusionAPIError(PhraseSyncError):
    """The exclude request for a locale was rejected or could not be sent."""

    def __init__(
        self,
        locale: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(
            f"Excluding keys for locale '{locale}' failed - status: {status_code}",
            category=ErrorCategory.NETWORK if status_code is None else ErrorCategory.API,
            step="exclude",
            locale=locale,
            response_body=response_body,
        )
        self.status_code: int | None = status_code


class ExclusionMismatchError(PhraseSyncError):
    """The exclude request touched a different number of keys than expected."""

    def __init__(
        self,
        locale: str,
        upload_id: str,
        expected: int,
        actual: int | None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(
            f"Excluding keys for locale '{locale}' failed: exclusion affected {actual} records, "
            + f"but {expected} keys were unmentioned in upload '{upload_id}'",
            category=ErrorCategory.CONTRACT,
            step="exclude",
            locale=locale,
            response_body=response_body,
        )
        self.expected: int = expected
        self.actual: int | None = actual


class InclusionAPIError(PhraseSyncError):
    """The include request for a locale was rejected or could not be sent."""

    def __init__(
        self,
        locale: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        super().__init__(
            f"Including keys for locale '{locale}' failed - status: {status_code}",
            category=ErrorCategory.NETWORK if status_code is None else ErrorCategory.API,
            step="include",
            locale=locale,
            response_body=response_body,
        )
        self.status_code: int | None = status_code
