"""Bootstrap helpers that wire configuration into a ready cache.

Reads limits and the backing store selection from the environment
(see config.py), configures logging once, and builds an LRUCache.
"""

from __future__ import annotations

from typing import Optional

import config
from core.cache import LRUCache
from core.interfaces import BackingStore
from core.logging import configure_logging
from core.models import CacheConfig
from stores.store_factory import get_backing_store


def build_store() -> BackingStore:
    return get_backing_store(
        config.BACKING_STORE,
        base_url=config.BACKING_STORE_URL,
        timeout=config.BACKING_STORE_TIMEOUT,
        http_verify=config.HTTP_VERIFY,
    )


def build_cache(*, name: str = "cache", store: Optional[BackingStore] = None, setup_logging: bool = True) -> LRUCache:
    if setup_logging:
        configure_logging()
    return LRUCache(CacheConfig.from_env(), store=store if store is not None else build_store(), name=name)
