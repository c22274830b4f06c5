from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache engine."""


class ConfigurationError(CacheError):
    """Raised when a cache is constructed with missing or invalid limits."""


class ValidationError(CacheError):
    """Raised when an operation receives an unusable argument (e.g. a None key)."""


class ConsistencyError(CacheError):
    """Raised when the index and the recency list disagree."""


class BackingStoreError(CacheError):
    """Raised when a remote backing store (HTTP) fails."""
