import pytest

from core.cache import LRUCache
from core.models import CacheConfig
from stores.memory_store import DictStore


@pytest.fixture
def store():
    return DictStore()


@pytest.fixture
def make_cache(store):
    """Build an LRUCache over the shared recording store."""

    def _make(**limits):
        return LRUCache(CacheConfig(**limits), store=store)

    return _make
