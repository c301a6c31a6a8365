"""Tests for the sync and reset workflows."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from phrase_sync.api.client import PhraseClient
from phrase_sync.sync.models import ExclusionResult, SyncResult
from phrase_sync.sync.poller import UploadStatusPoller
from phrase_sync.sync.workflow import run_reset, run_sync
from phrase_sync.utils.core.exceptions import (
    ExclusionAPIError,
    ExclusionMismatchError,
    InclusionAPIError,
    PollExhaustedError,
    UploadFailedError,
)
from tests.utils.phrase_api import FakePhraseAPI, RecordingSleep, processing, success


@pytest.fixture
def poller(client: PhraseClient, recording_sleep: RecordingSleep) -> UploadStatusPoller:
    return UploadStatusPoller(client, max_retries=5, interval=30.0, sleep=recording_sleep)


class TestRunSync:
    """Test cases for run_sync."""

    def test_excludes_in_each_locale(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        """With unmentioned keys, each locale gets exactly one exclude call."""
        phrase_api.status_responses = [success(5)]
        phrase_api.records_affected = 5

        result = run_sync(client, locale_file, ["en", "de"], poller)

        assert result == SyncResult(
            "ABCDEFG123", 5, [ExclusionResult("en", 5), ExclusionResult("de", 5)]
        )
        locales = [phrase_api.json_body(r)["target_locale_id"] for r in phrase_api.exclude_calls]
        assert locales == ["en", "de"]

    def test_call_order(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        phrase_api.status_responses = [processing(), success(2)]
        phrase_api.records_affected = 2

        _ = run_sync(client, locale_file, ["en", "de"], poller)

        assert [(r.method, r.url.path.rsplit("/", 1)[-1]) for r in phrase_api.requests] == [
            ("POST", "uploads"),
            ("GET", "ABCDEFG123"),
            ("GET", "ABCDEFG123"),
            ("PATCH", "exclude"),
            ("PATCH", "exclude"),
        ]

    def test_zero_unmentioned_keys_skips_exclusion(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        phrase_api.status_responses = [success(0)]

        result = run_sync(client, locale_file, ["en", "de"], poller)

        assert result == SyncResult("ABCDEFG123", 0, [])
        assert phrase_api.exclude_calls == []

    @pytest.mark.parametrize("unmentioned", [1, 7, 250])
    def test_expected_count_passed_to_every_locale(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
        unmentioned: int,
    ) -> None:
        phrase_api.status_responses = [success(unmentioned)]
        phrase_api.records_affected = unmentioned

        result = run_sync(client, locale_file, ["en", "de", "fr"], poller)

        assert [e.records_affected for e in result.exclusions] == [unmentioned] * 3
        assert len(phrase_api.exclude_calls) == 3

    def test_mismatch_stops_before_next_locale(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        """A count mismatch for "en" means "de" is never attempted."""
        phrase_api.status_responses = [success(23)]
        phrase_api.exclude_responses["en"] = httpx.Response(200, json={"records_affected": 24})

        with pytest.raises(ExclusionMismatchError):
            _ = run_sync(client, locale_file, ["en", "de"], poller)

        assert len(phrase_api.exclude_calls) == 1

    def test_api_error_on_second_locale(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        """The first locale stays excluded when the second one fails."""
        phrase_api.status_responses = [success(3)]
        phrase_api.records_affected = 3
        phrase_api.exclude_responses["de"] = httpx.Response(500, text="boom")

        with pytest.raises(ExclusionAPIError) as exc_info:
            _ = run_sync(client, locale_file, ["en", "de"], poller)

        assert exc_info.value.locale == "de"
        assert len(phrase_api.exclude_calls) == 2

    def test_poll_exhaustion_makes_no_exclude_call(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        phrase_api.status_responses = [processing()]

        with pytest.raises(PollExhaustedError):
            _ = run_sync(client, locale_file, ["en", "de"], poller)

        assert len(phrase_api.status_calls) == 6
        assert phrase_api.exclude_calls == []

    def test_upload_failure_stops_run(
        self,
        client: PhraseClient,
        phrase_api: FakePhraseAPI,
        poller: UploadStatusPoller,
        locale_file: Path,
    ) -> None:
        phrase_api.upload_response = httpx.Response(400, json={"message": "invalid file"})

        with pytest.raises(UploadFailedError):
            _ = run_sync(client, locale_file, ["en", "de"], poller)

        assert len(phrase_api.requests) == 1


class TestRunReset:
    """Test cases for run_reset."""

    def test_includes_each_locale_in_order(
        self, client: PhraseClient, phrase_api: FakePhraseAPI
    ) -> None:
        results = run_reset(client, ["en", "de"])

        assert results == [ExclusionResult("en", 42), ExclusionResult("de", 42)]
        bodies = [phrase_api.json_body(r) for r in phrase_api.include_calls]
        assert bodies == [
            {"target_locale_id": "en", "q": "*"},
            {"target_locale_id": "de", "q": "*"},
        ]
        assert len(phrase_api.requests) == 2

    def test_failure_stops_before_next_locale(
        self, client: PhraseClient, phrase_api: FakePhraseAPI
    ) -> None:
        phrase_api.include_responses["en"] = httpx.Response(401, json={"message": "no"})

        with pytest.raises(InclusionAPIError):
            _ = run_reset(client, ["en", "de"])

        assert len(phrase_api.include_calls) == 1
