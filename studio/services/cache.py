"""Time-expiring in-memory cache."""

import time
from typing import Any, Callable


class TTLCache:
    """Key/value cache whose entries expire after a number of seconds."""

    def __init__(self, default_ttl: float, clock: Callable[[], float] = time.monotonic):
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}  # key -> (value, expires_at)

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    def put(self, key: str, value: Any, ttl: float | None = None) -> None:
        expiry = self.default_ttl if ttl is None else ttl
        self._entries[key] = (value, self._clock() + expiry)

    def invalidate(self, key: str | None = None) -> None:
        """Drop one key, or every entry when key is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
