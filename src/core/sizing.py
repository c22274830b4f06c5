"""Default size measurement for cache keys and values.

Byte-like data is measured by its length, text by its UTF-8 encoded
length, and anything else by the length of its string form.
"""

from __future__ import annotations

from typing import Any, Optional

from core.errors import ValidationError
from core.interfaces import Sizer


def byte_length(obj: Any) -> int:
    if isinstance(obj, (bytes, bytearray)):
        return len(obj)
    if isinstance(obj, memoryview):
        return obj.nbytes
    if isinstance(obj, str):
        return len(obj.encode("utf-8"))
    return len(str(obj))


def entry_size(key: Any, value: Any, sizer: Optional[Sizer] = None) -> int:
    measure = sizer or byte_length
    size = int(measure(key)) + int(measure(value))
    if size < 0:
        raise ValidationError(f"size function returned a negative size for {key!r}")
    return size
