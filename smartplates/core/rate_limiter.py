"""Fixed-window request counter for outgoing API calls.

Keeps Spoonacular usage inside the plan quota. State lives on the
instance; create one per upstream service and inject it.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """Allow at most max_requests per key within window_seconds."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        key_prefix: str = "default",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.key_prefix = key_prefix
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._lock = threading.Lock()  # Shared by request threads

    def _full_key(self, key: str) -> str:
        return f"{self.key_prefix}:{key}"

    def _current(self, key: str) -> _Window | None:
        window = self._windows.get(self._full_key(key))
        if window is None or self._clock() >= window.reset_at:
            return None
        return window

    def can_make_request(self, key: str = "default") -> bool:
        """Consume one request for key. Returns False if the limit is reached."""
        with self._lock:
            window = self._current(key)

            if window is None:
                self._windows[self._full_key(key)] = _Window(
                    count=1, reset_at=self._clock() + self.window_seconds
                )
                return True

            if window.count >= self.max_requests:
                return False

            window.count += 1
            return True

    def get_remaining_requests(self, key: str = "default") -> int:
        """Requests left in the current window."""
        with self._lock:
            window = self._current(key)
            if window is None:
                return self.max_requests
            return max(0, self.max_requests - window.count)

    def get_reset_time(self, key: str = "default") -> float:
        """Seconds until the current window resets (0 if no window is open)."""
        with self._lock:
            window = self._current(key)
            if window is None:
                return 0.0
            return max(0.0, window.reset_at - self._clock())

    def reset(self, key: str = "default") -> None:
        """Forget the window for key."""
        with self._lock:
            self._windows.pop(self._full_key(key), None)
