"""Configuration loading for phrase-sync.

The tool runs as a CI step, so configuration comes from the environment.
GitHub Actions exposes action inputs as ``INPUT_<NAME>`` variables; this
module maps them onto the Pydantic schema and turns validation failures
into a ``ConfigurationError``.
"""

import logging
import os
from collections.abc import Mapping

from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import PhraseSyncConfig

logger = logging.getLogger(__name__)

ENV_PROJECT_ID = "INPUT_PROJECT_ID"
ENV_TOKEN = "INPUT_PHRASE_TOKEN"
ENV_LOCALE_FILE_PATH = "INPUT_ENGLISH_LOCALE_FILE_PATH"
ENV_RESET = "INPUT_RESET"
ENV_LOCALES = "INPUT_LOCALES"
ENV_API_URL = "INPUT_API_URL"
ENV_TIMEOUT = "INPUT_TIMEOUT"
ENV_MAX_RETRIES = "INPUT_MAX_RETRIES"
ENV_POLL_INTERVAL = "INPUT_POLL_INTERVAL"


def parse_bool(value: str | None) -> bool:
    """Interpret an action input as a boolean; only "true" enables it."""
    return value is not None and value.strip().lower() == "true"


def parse_locales(value: str) -> list[str]:
    """Split a comma separated locale list, keeping the declared order."""
    return [part.strip() for part in value.split(",")]


def _get(environ: Mapping[str, str], name: str) -> str | None:
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def build_config_data(environ: Mapping[str, str]) -> dict[str, object]:
    """
    Translate environment variables into schema-shaped data.

    Unset and blank variables are omitted so schema defaults apply and
    required fields are reported as missing.

    Args:
        environ: Environment mapping to read from

    Returns:
        Nested dictionary accepted by ``PhraseSyncConfig``
    """
    api: dict[str, object] = {}
    polling: dict[str, object] = {}
    data: dict[str, object] = {"api": api, "polling": polling}

    for env_name, key in (
        (ENV_PROJECT_ID, "project_id"),
        (ENV_TOKEN, "token"),
        (ENV_API_URL, "api_url"),
        (ENV_TIMEOUT, "timeout"),
    ):
        value = _get(environ, env_name)
        if value is not None:
            api[key] = value

    for env_name, key in (
        (ENV_MAX_RETRIES, "max_retries"),
        (ENV_POLL_INTERVAL, "interval"),
    ):
        value = _get(environ, env_name)
        if value is not None:
            polling[key] = value

    reset = parse_bool(environ.get(ENV_RESET))

    # Reset never reads the locale file
    locale_file_path = _get(environ, ENV_LOCALE_FILE_PATH)
    if locale_file_path is not None and not reset:
        data["upload"] = {"locale_file_path": locale_file_path}

    locales = _get(environ, ENV_LOCALES)
    if locales is not None:
        data["locales"] = parse_locales(locales)

    data["reset"] = reset
    return data


def load_config_from_env(environ: Mapping[str, str] | None = None) -> PhraseSyncConfig:
    """
    Load and validate configuration from the environment.

    Args:
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        PhraseSyncConfig: Validated configuration object

    Raises:
        ConfigurationError: If the configuration fails Pydantic validation
    """
    if environ is None:
        environ = os.environ

    data = build_config_data(environ)

    try:
        config = PhraseSyncConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'config'}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from e

    logger.debug(
        "Loaded configuration for project %s (reset=%s, locales=%s)",
        config.api.project_id,
        config.reset,
        ",".join(config.locales),
    )
    return config
