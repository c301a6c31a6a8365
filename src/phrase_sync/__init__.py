"""
phrase-sync - Sync an English locale file to Phrase and exclude keys it no longer mentions.
"""

import sys

from .cli import main as run_main


def main() -> None:
    """Console script entry point that exits with the run's status code."""
    sys.exit(run_main())


__all__ = ["main"]
