"""Shared utilities for phrase-sync."""
