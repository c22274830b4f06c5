"""Factory for selecting the BackingStore implementation.

Exposes get_backing_store which returns a NullStore, a DictStore or an
HttpStore based on the requested kind.
"""

from __future__ import annotations

from typing import Literal, Optional

from core.errors import ValidationError
from core.interfaces import BackingStore
from stores.http_store import HttpStore
from stores.memory_store import DictStore, NullStore

StoreKind = Literal["none", "memory", "http"]


def get_backing_store(
    kind: Optional[StoreKind] = None,
    *,
    base_url: Optional[str] = None,
    timeout: float = 20.0,
    http_verify: bool = False,
) -> BackingStore:
    """
    Factory that returns the correct BackingStore implementation.

    Priority Logic:
    1. kind == "http" -> HttpStore (requires base_url).
    2. kind == "memory" -> DictStore.
    3. kind None / "none" -> NullStore (pure in-memory cache).
    """

    kind_clean = (kind or "none").strip().lower()

    if kind_clean == "http":
        if not base_url or not base_url.strip():
            raise ValidationError("Missing base_url for http backing store")
        return HttpStore(base_url=base_url, timeout=timeout, verify=http_verify)

    if kind_clean == "memory":
        return DictStore()

    if kind_clean == "none":
        return NullStore()

    raise ValidationError(f"Unknown backing store kind: {kind!r}")
