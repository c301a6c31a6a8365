"""Configuration schema and environment loading for phrase-sync."""

from .manager import load_config_from_env
from .schema import PhraseApiConfig, PhraseSyncConfig, PollingConfig, UploadConfig

__all__ = [
    "PhraseApiConfig",
    "PhraseSyncConfig",
    "PollingConfig",
    "UploadConfig",
    "load_config_from_env",
]
