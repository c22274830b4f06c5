"""Hash index overlaid on a doubly linked recency list.

The list runs from least recently used (head) to most recently used
(tail). Every structural operation is O(1) and keeps count/bytes in step
with the index.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from core.errors import ConsistencyError


@dataclass(slots=True, eq=False)
class Entry:
    # A cached record; prev/next are None at the list boundaries
    key: Any
    value: Any
    size: int
    dirty: bool = False
    prev: Optional["Entry"] = field(default=None, repr=False)
    next: Optional["Entry"] = field(default=None, repr=False)


class RecencyList:
    def __init__(self) -> None:
        self._index: Dict[Any, Entry] = {}
        self.head: Optional[Entry] = None
        self.tail: Optional[Entry] = None
        self.count = 0
        self.bytes = 0

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def lookup(self, key: Any) -> Optional[Entry]:
        return self._index.get(key)

    def append(self, entry: Entry) -> None:
        if entry.key in self._index:
            raise ConsistencyError(f"key {entry.key!r} is already linked")

        entry.next = None
        entry.prev = self.tail
        if self.tail is not None:
            self.tail.next = entry
        else:
            self.head = entry
        self.tail = entry

        self._index[entry.key] = entry
        self.count += 1
        self.bytes += entry.size

    def touch(self, entry: Entry) -> None:
        after = entry.next
        if after is None:
            # Nothing follows, so this must already be the tail
            if self.tail is not entry:
                raise ConsistencyError(f"entry {entry.key!r} has no successor but is not the tail")
            return

        before = entry.prev
        after.prev = before
        if before is not None:
            before.next = after
        else:
            self.head = after

        self.tail.next = entry
        entry.prev = self.tail
        entry.next = None
        self.tail = entry

    def remove(self, key: Any) -> Optional[Entry]:
        entry = self._index.pop(key, None)
        if entry is None:
            return None

        before, after = entry.prev, entry.next
        if before is not None:
            before.next = after
        else:
            self.head = after

        if after is not None:
            after.prev = before
        else:
            self.tail = before

        entry.prev = entry.next = None
        self.count -= 1
        self.bytes -= entry.size
        return entry

    def pop_head(self) -> Optional[Entry]:
        if self.head is None:
            return None
        return self.remove(self.head.key)

    def __iter__(self) -> Iterator[Entry]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def keys(self) -> List[Any]:
        return [entry.key for entry in self]

    def check(self) -> None:
        """Verify index, links and counters agree; raise ConsistencyError otherwise."""
        forward: List[Entry] = []
        prev: Optional[Entry] = None
        node = self.head
        while node is not None:
            if node.prev is not prev:
                raise ConsistencyError(f"broken back link at {node.key!r}")
            if self._index.get(node.key) is not node:
                raise ConsistencyError(f"linked entry {node.key!r} is not indexed")
            forward.append(node)
            if len(forward) > len(self._index):
                raise ConsistencyError("recency list is longer than the index (cycle?)")
            prev, node = node, node.next

        if prev is not self.tail:
            raise ConsistencyError("tail does not terminate the recency list")
        if not (len(self._index) == self.count == len(forward)):
            raise ConsistencyError(
                f"count drift: index={len(self._index)} count={self.count} linked={len(forward)}"
            )
        total = sum(entry.size for entry in forward)
        if total != self.bytes:
            raise ConsistencyError(f"byte drift: tracked={self.bytes} actual={total}")
