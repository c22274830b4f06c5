"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (cache
limits, write policy, logging, and the backing store location).
"""

from __future__ import annotations

import os
from typing import Optional


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_optional_int(name: str) -> Optional[int]:
    # Unset, empty or unparsable values mean "no limit on this dimension"
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# Cache limits
CACHE_MAX_COUNT = _env_optional_int("CACHE_MAX_COUNT")
CACHE_MAX_BYTES = _env_optional_int("CACHE_MAX_BYTES")
CACHE_MAX_ENTRY_SIZE = _env_optional_int("CACHE_MAX_ENTRY_SIZE")

# Write policy / diagnostics
CACHE_WRITE_SYNC = _env_bool("CACHE_WRITE_SYNC", True)
CACHE_DEBUG = _env_int("CACHE_DEBUG", 0)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip()
LOG_FORMAT = os.environ.get("LOG_FORMAT", "console").strip()

# Backing store
BACKING_STORE = os.environ.get("BACKING_STORE", "none").strip()
BACKING_STORE_URL = os.environ.get("BACKING_STORE_URL", "").strip()
BACKING_STORE_TIMEOUT = _env_float("BACKING_STORE_TIMEOUT", 20.0)

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", False)
