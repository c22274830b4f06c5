"""Immutable dataclasses describing cache configuration and statistics.

CacheConfig validates the size limits a cache is built with and maps the
option names (MaxCount, MaxBytes, MaxEntrySize, WriteSync, Debug) onto
fields. CacheStats is the read-only counter snapshot returned by stats().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import config
from core.errors import ConfigurationError


_MISSING = object()


def _unset_if_zero(value: Any) -> Any:
    # Option-style limits treat 0 as "no limit on this dimension"
    return None if value == 0 and not isinstance(value, bool) else value


def _positive_or_none(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value


@dataclass(frozen=True)
class CacheConfig:
    """Limits and policy for a single cache instance.

    Field groups:
    - Limits: max_count, max_bytes, max_entry_size
    - Policy: write_sync
    - Diagnostics: debug (0 quiet, 1 summary on dispose, 2 every operation)
    """

    max_count: Optional[int] = None
    max_bytes: Optional[int] = None
    max_entry_size: Optional[int] = None

    write_sync: bool = True

    debug: int = 0

    def __post_init__(self) -> None:
        max_count = _positive_or_none("max_count", self.max_count)
        max_bytes = _positive_or_none("max_bytes", self.max_bytes)
        max_entry_size = _positive_or_none("max_entry_size", self.max_entry_size)

        if max_count is None and max_bytes is None:
            raise ConfigurationError("you must specify cache size with either max_bytes or max_count")

        if self.debug not in (0, 1, 2):
            raise ConfigurationError(f"debug must be 0, 1 or 2, got {self.debug!r}")

        # Per-entry cap falls back to the byte budget
        if max_entry_size is None:
            object.__setattr__(self, "max_entry_size", max_bytes)

        object.__setattr__(self, "write_sync", bool(self.write_sync))

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]] = None, max_count: Optional[int] = None) -> "CacheConfig":
        """Build a config from option names, optionally with a positional count.

        Recognised keys: MaxCount, MaxBytes, MaxEntrySize (or MaxSize),
        WriteSync, Debug. A limit of 0 means unset. An explicit
        ``max_count`` argument wins over ``options["MaxCount"]``.
        """
        opts = dict(options or {})

        entry_size = opts.get("MaxEntrySize", _MISSING)
        if entry_size is _MISSING:
            entry_size = opts.get("MaxSize")

        return cls(
            max_count=_unset_if_zero(max_count if max_count is not None else opts.get("MaxCount")),
            max_bytes=_unset_if_zero(opts.get("MaxBytes")),
            max_entry_size=_unset_if_zero(entry_size),
            write_sync=opts.get("WriteSync", True),
            debug=int(opts.get("Debug", 0) or 0),
        )

    @classmethod
    def from_env(cls) -> "CacheConfig":
        return cls(
            max_count=config.CACHE_MAX_COUNT,
            max_bytes=config.CACHE_MAX_BYTES,
            max_entry_size=config.CACHE_MAX_ENTRY_SIZE,
            write_sync=config.CACHE_WRITE_SYNC,
            debug=config.CACHE_DEBUG,
        )


@dataclass(frozen=True)
class CacheStats:
    """Counter snapshot for one cache.

    Field groups:
    - Lookups: hits, misses
    - Occupancy: count, bytes
    - Traffic: evictions, writes (write-hook calls)
    """

    hits: int
    misses: int

    count: int
    bytes: int

    evictions: int = 0
    writes: int = 0

    @property
    def hit_ratio(self) -> Optional[float]:
        # Undefined until at least one lookup happened
        total = self.hits + self.misses
        if total == 0:
            return None
        return self.hits / total
