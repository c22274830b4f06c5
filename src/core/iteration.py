"""One-shot snapshot cursor over cache keys.

The cursor copies the key order when iteration begins and pops keys from
the front of that copy. Keys may be stale by the time they are yielded.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, Optional


class SnapshotCursor:
    def __init__(self, keys: Iterable[Any]) -> None:
        self._keys = deque(keys)

    def next(self) -> Optional[Any]:
        # None marks the end; cache keys are never None
        if not self._keys:
            return None
        return self._keys.popleft()

    def remaining(self) -> int:
        return len(self._keys)

    def close(self) -> None:
        self._keys.clear()

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        if not self._keys:
            raise StopIteration
        return self._keys.popleft()
