"""
Global test configuration fixtures for phrase-sync tests.

This module provides reusable pytest fixtures for configuration objects,
a locale file on disk, a Phrase client wired to the stub API and a
recording replacement for ``time.sleep``.
"""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from phrase_sync.api.client import PhraseClient
from phrase_sync.config.schema import (
    PhraseApiConfig,
    PhraseSyncConfig,
    PollingConfig,
    UploadConfig,
)
from tests.utils.phrase_api import PROJECT_ID, FakePhraseAPI, RecordingSleep


@pytest.fixture
def api_config() -> PhraseApiConfig:
    """API configuration pointing at the stub API."""
    return PhraseApiConfig(
        project_id=PROJECT_ID,
        token="test-token",
        api_url="https://api.phrase.test/v2",
        timeout=5.0,
    )


@pytest.fixture
def locale_file(tmp_path: Path) -> Path:
    """A small English locale file in simple JSON format."""
    path = tmp_path / "en.json"
    _ = path.write_text('{"greeting": "Hello", "farewell": "Goodbye"}\n', encoding="utf-8")
    return path


@pytest.fixture
def sync_config(api_config: PhraseApiConfig, locale_file: Path) -> PhraseSyncConfig:
    """Configuration selecting the sync workflow."""
    return PhraseSyncConfig(
        api=api_config,
        upload=UploadConfig(locale_file_path=locale_file),
        polling=PollingConfig(max_retries=5, interval=30.0),
    )


@pytest.fixture
def reset_config(api_config: PhraseApiConfig) -> PhraseSyncConfig:
    """Configuration selecting the reset workflow."""
    return PhraseSyncConfig(api=api_config, reset=True)


@pytest.fixture
def phrase_api() -> FakePhraseAPI:
    """Scripted Phrase API."""
    return FakePhraseAPI()


@pytest.fixture
def client(
    api_config: PhraseApiConfig, phrase_api: FakePhraseAPI
) -> Generator[PhraseClient, None, None]:
    """Phrase client talking to the stub API."""
    with PhraseClient(api_config, transport=phrase_api.transport) as phrase_client:
        yield phrase_client


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    """Sleep replacement that records requested delays."""
    return RecordingSleep()
