"""Bounded in-memory LRU cache with read-through and write-back.

Entries live in a hash index overlaid on a doubly linked recency list
(least recently used at the head). Every insertion runs the eviction loop
until both the entry-count and byte budgets hold. A BackingStore supplies
values on a miss and receives writes either immediately (write_sync) or
when a dirty entry leaves the cache, is flushed, or the cache is disposed.

Oversized values never enter the cache: stores go straight to the backing
store and read-through results are handed back uncached, so one huge value
cannot flush the whole cache.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from core.errors import ConsistencyError, ValidationError
from core.interfaces import BackingStore, Sizer
from core.iteration import SnapshotCursor
from core.logging import get_logger
from core.models import CacheConfig, CacheStats
from core.recency import Entry, RecencyList
from core.sizing import entry_size


class NullStore:
    # Pure in-memory cache: nothing behind it
    def read(self, key: Any) -> Optional[Any]:
        return None

    def write(self, key: Any, value: Any) -> None:
        return None


class LRUCache:
    """LRU cache engine bounded by entry count and/or total bytes.

    Purpose:
      - get(key) -> value | None, reading through to the store on a miss
      - put(key, value) -> value, writing through or deferring as configured
      - remove / clear / flush / dispose propagate dirty entries to the store

    Key behavior:
      - Single-threaded: no internal locking; callers serialise access.
      - Store hooks run inline and their errors propagate unchanged.
      - None is never a storable value; storing it is a no-op.
    """

    def __init__(
        self,
        config: CacheConfig,
        *,
        store: Optional[BackingStore] = None,
        sizer: Optional[Sizer] = None,
        logger: Optional[Any] = None,
        name: str = "cache",
    ) -> None:
        self._config = config
        self._store: BackingStore = store if store is not None else NullStore()
        self._sizer = sizer

        self._list = RecencyList()
        self._cursor: Optional[SnapshotCursor] = None

        self._hits = 0
        self._misses = 0
        self._evictions = 0
        self._writes = 0

        self._name = name
        self._log = (logger or get_logger(__name__)).bind(cache=name)
        self._trace = config.debug > 1

    @property
    def config(self) -> CacheConfig:
        return self._config

    @property
    def count(self) -> int:
        return self._list.count

    @property
    def bytes(self) -> int:
        return self._list.bytes

    def get(self, key: Any) -> Optional[Any]:
        """Return the cached value, reading through to the store on a miss."""
        if key is None:
            raise ValidationError("cache key must not be None")

        entry = self._list.lookup(key)
        if entry is not None:
            self._hits += 1
            self._list.touch(entry)
            if self._trace:
                self._log.debug("fetch", key=key)
            return entry.value

        self._misses += 1
        if self._trace:
            self._log.debug("read_through", key=key)
        value = self._store.read(key)
        if value is None:
            return None

        size = entry_size(key, value, self._sizer)
        if self._is_oversize(size):
            if self._trace:
                self._log.debug("direct_read", key=key, size=size)
            return value

        # Values fetched from the store are already persisted, so they start clean
        self._insert(Entry(key=key, value=value, size=size))
        return value

    def put(self, key: Any, value: Any, *, size: Optional[int] = None) -> Optional[Any]:
        """Store value under key and return it; storing None does nothing."""
        if key is None:
            raise ValidationError("cache key must not be None")
        if value is None:
            return None

        if size is None:
            size = entry_size(key, value, self._sizer)
        elif isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ValidationError(f"entry size must be a non-negative integer, got {size!r}")

        if self._trace:
            self._log.debug("store", key=key, size=size)

        if self._is_oversize(size):
            # A cached copy would now be stale; drop it without writing the old value back
            self._list.remove(key)
            if self._trace:
                self._log.debug("direct_write", key=key, size=size)
            self._write(key, value)
            return value

        entry = self._list.remove(key)
        if entry is not None:
            entry.value = value
            entry.size = size
        else:
            entry = Entry(key=key, value=value, size=size)

        # Mark before inserting so an entry evicted by its own insertion is still written
        if not self._config.write_sync:
            entry.dirty = True
        self._insert(entry)

        if self._config.write_sync:
            if self._trace:
                self._log.debug("sync_write", key=key)
            try:
                self._write(key, value)
            except Exception:
                # The store never saw this value; leave it for flush() to retry
                entry.dirty = True
                raise

        return value

    def remove(self, key: Any) -> Optional[Any]:
        """Drop key from the cache, writing it back first if dirty."""
        entry = self._list.remove(key)
        if entry is None:
            return None
        if self._trace:
            self._log.debug("delete", key=key)
        self._write_back(entry)
        return entry.value

    def contains_key(self, key: Any) -> bool:
        # Membership only: no recency refresh, no statistics
        return key in self._list

    def clear(self) -> None:
        if self._trace:
            self._log.debug("clear", count=self._list.count)
        while self._list.head is not None:
            entry = self._list.pop_head()
            self._write_back(entry)

    def flush(self) -> int:
        """Write every dirty entry back in LRU order; return how many were written."""
        flushed = 0
        for entry in self._list:
            if entry.dirty:
                self._write_back(entry)
                flushed += 1
        if self._trace:
            self._log.debug("flush", flushed=flushed)
        return flushed

    def begin_iteration(self) -> SnapshotCursor:
        # Only one cursor at a time; a new snapshot empties the previous one
        if self._cursor is not None:
            self._cursor.close()
        self._cursor = SnapshotCursor(self._list.keys())
        return self._cursor

    def stats(self) -> CacheStats:
        return CacheStats(
            hits=self._hits,
            misses=self._misses,
            count=self._list.count,
            bytes=self._list.bytes,
            evictions=self._evictions,
            writes=self._writes,
        )

    def dispose(self) -> None:
        """Flush outstanding dirty entries, then empty the cache."""
        if self._config.debug:
            self._log.info("cache_summary", **self.describe())
            if self._config.debug > 1:
                self._log.debug("cache_chain", chain=self.render_chain())

        self.flush()
        self.clear()
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None

    def __enter__(self) -> "LRUCache":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    def describe(self) -> Dict[str, Any]:
        """Snapshot of limits, occupancy and counters (unset fields omitted)."""
        state: Dict[str, Any] = {
            "name": self._name,
            "max_count": self._config.max_count,
            "max_bytes": self._config.max_bytes,
            "max_entry_size": self._config.max_entry_size,
            "count": self._list.count,
            "bytes": self._list.bytes,
            "hits": self._hits,
            "misses": self._misses,
            "evictions": self._evictions,
            "writes": self._writes,
            "write_sync": self._config.write_sync,
            "debug": self._config.debug,
        }
        ratio = self.stats().hit_ratio
        if ratio is not None:
            state["hit_ratio"] = f"{ratio:4.3f}"
        return {k: v for k, v in sorted(state.items()) if v is not None}

    def render_chain(self) -> str:
        # Walk forward then backward so a broken back link shows up as asymmetry
        parts = ["[head]"]
        node = self._list.head
        while node is not None:
            parts.append(f"[{node.key},{node.value}]")
            node = node.next
        parts.append("[tail]")
        node = self._list.tail
        while node is not None:
            parts.append(f"[{node.key},{node.value}]")
            node = node.prev
        parts.append("[head]")
        return "->".join(parts)

    def check_invariants(self) -> None:
        self._list.check()

    def _is_oversize(self, size: int) -> bool:
        limit = self._config.max_entry_size
        return limit is not None and size > limit

    def _over_budget(self) -> bool:
        max_count = self._config.max_count
        max_bytes = self._config.max_bytes
        return (max_count is not None and self._list.count > max_count) or (
            max_bytes is not None and self._list.bytes > max_bytes
        )

    def _insert(self, entry: Entry) -> None:
        self._list.append(entry)
        failure: Optional[BaseException] = None

        # Re-check both budgets after every eviction; a failed write-back must not stop trimming
        while self._over_budget():
            if self._trace:
                self._log.debug(
                    "over_budget",
                    count=self._list.count,
                    max_count=self._config.max_count,
                    bytes=self._list.bytes,
                    max_bytes=self._config.max_bytes,
                )
            victim = self._list.pop_head()
            if victim is None:
                raise ConsistencyError("cache is over budget with an empty recency list")
            self._evictions += 1
            if self._trace:
                self._log.debug("evict", key=victim.key, dirty=victim.dirty)
            try:
                self._write_back(victim)
            except Exception as e:
                if failure is None:
                    failure = e

        if failure is not None:
            raise failure

    def _write_back(self, entry: Entry) -> None:
        if not entry.dirty:
            return
        if self._trace:
            self._log.debug("dirty_write", key=entry.key)
        self._write(entry.key, entry.value)
        entry.dirty = False

    def _write(self, key: Any, value: Any) -> None:
        self._writes += 1
        self._store.write(key, value)
