"""
Fixed-window rate limiter keyed by client address.

Each client gets a window that opens on its first request and lasts
window_seconds; once the window has expired the next request opens a
fresh one with the counter reset.
"""
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict


@dataclass
class RateLimitDecision:
    """Outcome of counting one request"""
    allowed: bool
    limit: int
    remaining: int
    reset_after: int  # seconds until the window closes


@dataclass
class _Window:
    started_at: float
    count: int = 0


class FixedWindowRateLimiter:
    """Counts hits per key inside a fixed window"""

    def __init__(self, max_requests: int = 100, window_seconds: int = 15 * 60,
                 clock: Callable[[], float] = time.monotonic):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: Dict[str, _Window] = {}
        self._lock = threading.Lock()

    def hit(self, key: str) -> RateLimitDecision:
        """Count a request for key and decide whether it may proceed"""
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now - window.started_at >= self.window_seconds:
                window = _Window(started_at=now)
                self._windows[key] = window
            window.count += 1
            count = window.count
            reset_after = max(0, int(window.started_at + self.window_seconds - now))

        return RateLimitDecision(
            allowed=count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - count),
            reset_after=reset_after,
        )

    def sweep(self) -> int:
        """Drop expired windows; returns how many were removed"""
        now = self._clock()
        with self._lock:
            expired = [
                key for key, window in self._windows.items()
                if now - window.started_at >= self.window_seconds
            ]
            for key in expired:
                del self._windows[key]
        return len(expired)

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)
