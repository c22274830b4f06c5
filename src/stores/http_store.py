"""HTTP key/value origin used as a cache backing store.

Reads issue ``GET {base_url}/{key}`` (404 means absent) and writes issue
``PUT {base_url}/{key}`` with the value as the request body. Transport and
status failures surface as BackingStoreError.
"""

from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

import httpx

from core.errors import BackingStoreError, ValidationError


class HttpStore:
    def __init__(self, *, base_url: str, timeout: float = 20.0, verify: bool = False) -> None:
        self._base_url = (base_url or "").strip().rstrip("/")
        if not self._base_url:
            raise ValidationError("HTTP backing store needs a base_url")
        self._timeout = float(timeout)
        self._verify = bool(verify)

    def _url(self, key: Any) -> str:
        # Keys become a single path segment
        return f"{self._base_url}/{quote(str(key), safe='')}"

    def read(self, key: Any) -> Optional[str]:
        url = self._url(key)
        try:
            with httpx.Client(timeout=self._timeout, verify=self._verify) as c:
                r = c.get(url)
                if r.status_code == 404:
                    return None
                r.raise_for_status()
                if r.headers.get("Content-Type", "").startswith("application/octet-stream"):
                    return r.content
                return r.text
        except httpx.HTTPStatusError as e:
            raise BackingStoreError(f"Backing store returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise BackingStoreError(f"Failed to read from backing store: {e}") from e

    def write(self, key: Any, value: Any) -> None:
        url = self._url(key)
        if isinstance(value, (bytes, bytearray)):
            content = bytes(value)
            content_type = "application/octet-stream"
        else:
            content = str(value).encode("utf-8")
            content_type = "text/plain; charset=utf-8"

        try:
            with httpx.Client(timeout=self._timeout, verify=self._verify) as c:
                r = c.put(url, content=content, headers={"Content-Type": content_type})
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise BackingStoreError(f"Backing store returned an error: {e}") from e
        except httpx.HTTPError as e:
            raise BackingStoreError(f"Failed to write to backing store: {e}") from e
