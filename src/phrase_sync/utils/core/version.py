"""
Version utilities for phrase-sync.

The version is read from the installed distribution metadata and is used
to build the User-Agent header sent to the Phrase API.
"""

import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "phrase-sync"
FALLBACK_VERSION = "0.0.0"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Get the project version with a fallback for source checkouts."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        logger.debug("Package metadata not found, using fallback version")
        return FALLBACK_VERSION


def get_user_agent() -> str:
    """User-Agent header value identifying this tool."""
    return f"{DISTRIBUTION_NAME}/{get_version()}"
