"""
Main entry point for phrase-sync.

This module sets up logging, loads the configuration from the CI
environment, runs either the sync or the reset workflow and turns any
failure into a non-zero exit code. It is the only place that decides how
the process ends.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from collections.abc import Callable, Sequence
from typing import override

import httpx
from rich.console import Console

from .api.client import PhraseClient
from .config.manager import load_config_from_env
from .config.schema import PhraseSyncConfig
from .sync.poller import UploadStatusPoller
from .sync.workflow import run_reset, run_sync
from .utils.core.exceptions import ConfigurationError, PhraseSyncError

logger = logging.getLogger(__name__)

console = Console(stderr=True)


class GitHubActionsFormatter(logging.Formatter):
    """Formats records as GitHub Actions workflow commands where one exists."""

    COMMANDS: dict[int, str] = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    @override
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{message}"


def setup_logging(verbose: bool = False, ci_mode: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
        ci_mode: Enable CI-friendly logging format
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    if ci_mode:
        handler.setFormatter(GitHubActionsFormatter("%(message)s"))
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Only logging is controlled from the command line; everything else is
    read from the ``INPUT_*`` environment variables.
    """
    parser = argparse.ArgumentParser(
        prog="phrase-sync",
        description="Upload the English locale file to Phrase and exclude unmentioned keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  INPUT_PROJECT_ID                 Phrase project id (required)
  INPUT_PHRASE_TOKEN               Phrase API token (required)
  INPUT_ENGLISH_LOCALE_FILE_PATH   Locale file to upload (required unless reset)
  INPUT_RESET                      "true" re-includes all keys instead of syncing
  INPUT_LOCALES                    Comma separated locales (default: en,de)
        """,
    )

    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    _ = parser.add_argument(
        "--ci-mode",
        action="store_true",
        default=os.getenv("GITHUB_ACTIONS") == "true",
        help="Enable CI-friendly logging format (default when GITHUB_ACTIONS=true)",
    )

    return parser.parse_args(argv)


def report_failure(error: PhraseSyncError) -> None:
    """Log which step (and locale) failed, with the raw response body if any."""
    where = f"step '{error.step}'"
    if error.locale is not None:
        where += f" for locale '{error.locale}'"
    logger.error("❌ Phrase sync failed at %s: %s", where, error)
    if error.response_body:
        logger.error("Response body: %s", error.response_body)


def run(
    config: PhraseSyncConfig,
    transport: httpx.BaseTransport | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Run the workflow selected by the configuration.

    Args:
        config: Validated configuration
        transport: Optional httpx transport for the Phrase client
        sleep: Delay function used between upload status checks

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        with PhraseClient(config.api, transport=transport) as client:
            if config.reset:
                results = run_reset(client, config.locales)
                console.print(
                    f"[green]✓ Re-included all keys in {', '.join(r.locale for r in results)}[/green]"
                )
                return 0

            # Guaranteed by PhraseSyncConfig.validate_upload_for_sync
            assert config.upload is not None

            poller = UploadStatusPoller(
                client,
                max_retries=config.polling.max_retries,
                interval=config.polling.interval,
                sleep=sleep,
            )
            result = run_sync(client, config.upload.locale_file_path, config.locales, poller)
            console.print(
                f"[green]✓ Synced upload '{result.upload_id}': "
                + f"{result.unmentioned_key_count} unmentioned keys excluded "
                + f"in {len(result.exclusions)} locale(s)[/green]"
            )
            return 0
    except PhraseSyncError as e:
        report_failure(e)
        console.print(f"[red]✗ {e}[/red]")
        return 1


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the phrase-sync action.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.ci_mode)

    try:
        config = load_config_from_env()
        return run(config)
    except ConfigurationError as e:
        report_failure(e)
        return 1
    except KeyboardInterrupt:
        logger.info("❌ Operation cancelled by user")
        return 1
    except Exception as e:
        logger.error("❌ Fatal error: %s", e)
        if args.verbose:
            logger.exception("Full traceback:")
        return 1
