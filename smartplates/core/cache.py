"""Bounded in-memory TTL cache for upstream API responses.

Instances are created by the caller and handed to the clients that need
them, so two clients never share entries by accident.

Example usage:
    >>> from smartplates.core.cache import TTLCache
    >>> cache = TTLCache(max_entries=2, default_ttl=60)
    >>> cache.set("pasta", ["Spaghetti Carbonara"])
    >>> cache.get("pasta")
    ['Spaghetti Carbonara']
"""

import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_TTL_SECONDS = 60 * 60
DEFAULT_MAX_ENTRIES = 256


@dataclass
class CacheEntry:
    """A cached value with its absolute expiry time."""

    value: Any
    expires_at: float


class TTLCache:
    """Key/value cache with per-entry expiry and LRU eviction.

    Args:
        max_entries: Upper bound on stored entries
        default_ttl: Lifetime in seconds used when set() gets no ttl
        clock: Monotonic time source, replaceable in tests
    """

    def __init__(
        self,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if default_ttl <= 0:
            raise ValueError("default_ttl must be positive")

        self.max_entries = max_entries
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()  # Shared by request threads

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.expires_at <= self._clock():
                self._entries.pop(key, None)
                return None

            if key in self._entries:
                self._entries.move_to_end(key)
            return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value for ttl seconds (default_ttl if omitted)."""
        lifetime = self.default_ttl if ttl is None else ttl
        if lifetime <= 0:
            raise ValueError("ttl must be positive")

        with self._lock:
            self._entries[key] = CacheEntry(value=value, expires_at=self._clock() + lifetime)
            self._entries.move_to_end(key)

            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def delete(self, key: str) -> bool:
        """Remove a key. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
            for key in expired:
                self._entries.pop(key, None)
            return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
