"""Core protocol definitions.

Defines the BackingStore protocol the cache reads from on a miss and writes
to on store/flush/eviction, plus the size-function signature.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol


Sizer = Callable[[Any], int]


class BackingStore(Protocol):
    """Contract for the slower store sitting behind a cache."""
    def read(self, key: Any) -> Optional[Any]:
        ...

    def write(self, key: Any, value: Any) -> None:
        ...
