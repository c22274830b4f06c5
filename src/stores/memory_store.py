"""In-process BackingStore implementations.

DictStore keeps the persisted data in a dict and records every write;
CallbackStore adapts a pair of plain functions to the BackingStore shape.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from core.cache import NullStore

__all__ = ["CallbackStore", "DictStore", "NullStore"]


class DictStore:
    # Dict-backed store; writes land in .data and are logged in .writes
    def __init__(self, data: Optional[Dict[Any, Any]] = None) -> None:
        self.data: Dict[Any, Any] = dict(data or {})
        self.reads: List[Any] = []
        self.writes: List[Tuple[Any, Any]] = []

    def read(self, key: Any) -> Optional[Any]:
        self.reads.append(key)
        return self.data.get(key)

    def write(self, key: Any, value: Any) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class CallbackStore:
    def __init__(
        self,
        *,
        read: Optional[Callable[[Any], Optional[Any]]] = None,
        write: Optional[Callable[[Any, Any], None]] = None,
    ) -> None:
        self._read = read
        self._write = write

    def read(self, key: Any) -> Optional[Any]:
        if self._read is None:
            return None
        return self._read(key)

    def write(self, key: Any, value: Any) -> None:
        if self._write is not None:
            self._write(key, value)
