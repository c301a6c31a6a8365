"""Phrase API access for phrase-sync."""

from .client import PhraseClient, response_json

__all__ = ["PhraseClient", "response_json"]
