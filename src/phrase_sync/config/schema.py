"""Configuration schema for phrase-sync using nested Pydantic models."""

from pathlib import Path
from typing import Annotated, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_API_URL = "https://api.phrase.com/v2"
DEFAULT_LOCALES = ["en", "de"]


class PhraseApiConfig(BaseModel):
    """Phrase API access configuration."""

    project_id: str = Field(
        ...,
        description="Phrase project identifier",
        min_length=1,
    )
    token: str = Field(
        ...,
        description="Phrase API access token",
        min_length=1,
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the Phrase API (e.g., https://api.phrase.com/v2)",
        pattern=r"^https?://.*",
    )
    timeout: Annotated[float, Field(gt=0, le=300)] | None = Field(
        default=None,
        description="Timeout in seconds for every API request (None waits indefinitely)",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Normalize the API URL."""
        return v.rstrip("/")


class UploadConfig(BaseModel):
    """Source locale file configuration."""

    locale_file_path: Path = Field(
        ...,
        description="Path to the source-of-truth English locale file",
    )

    @field_validator("locale_file_path")
    @classmethod
    def validate_locale_file_path(cls, v: Path) -> Path:
        """Ensure the locale file exists before any request is made."""
        if not v.is_file():
            raise ValueError(f"Locale file does not exist or is not a file: {v}")
        return v


class PollingConfig(BaseModel):
    """Upload status polling configuration."""

    max_retries: Annotated[int, Field(ge=0, le=100)] = Field(
        default=5,
        description="Status checks made after the first one before giving up",
    )
    interval: Annotated[float, Field(ge=0, le=600)] = Field(
        default=30.0,
        description="Seconds to wait between two status checks",
    )


class PhraseSyncConfig(BaseModel):
    """
    Configuration model for a phrase-sync run.

    The reset flag selects between the sync workflow (upload, poll, exclude)
    and the reset workflow (include every key again). The locale list is
    processed in the declared order by both workflows.
    """

    api: PhraseApiConfig
    upload: UploadConfig | None = None
    polling: PollingConfig = Field(default_factory=PollingConfig)
    locales: list[str] = Field(
        default_factory=lambda: list(DEFAULT_LOCALES),
        description="Locales whose keys are excluded or re-included, in order",
        min_length=1,
    )
    reset: bool = Field(
        default=False,
        description="Re-include all keys instead of syncing the locale file",
    )

    model_config: ClassVar[ConfigDict] = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
        frozen=True,
    )

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v: list[str]) -> list[str]:
        """Reject blank and duplicated locale identifiers."""
        locales = [locale.strip() for locale in v]
        if any(not locale for locale in locales):
            raise ValueError("Locale identifiers must not be empty")
        duplicates = sorted({locale for locale in locales if locales.count(locale) > 1})
        if duplicates:
            raise ValueError(f"Duplicate locale identifiers: {', '.join(duplicates)}")
        return locales

    @model_validator(mode="after")
    def validate_upload_for_sync(self) -> Self:
        """The sync workflow needs a locale file, the reset workflow does not."""
        if not self.reset and self.upload is None:
            raise ValueError("A locale file path is required unless reset is enabled")
        return self
