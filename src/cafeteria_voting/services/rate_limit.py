"""Fixed-window rate limiting for login attempts."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _Window:
    count: int
    reset_at: datetime


@dataclass
class LoginRateLimiter:
    """Counts attempts per key in fixed, non-overlapping windows.

    The map is capped at ``max_keys``: expired windows are swept when the cap
    is reached, and the window closest to expiry is evicted if none expired.
    """

    window_seconds: int = 15 * 60
    max_attempts: int = 5
    max_keys: int = 10_000
    clock: Callable[[], datetime] = _utc_now
    _windows: dict[str, _Window] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    @staticmethod
    def login_key(client_host: str | None, student_id: str) -> str:
        """Build the limiter key from the caller origin and claimed student id."""
        return f"{client_host or 'unknown'}-{student_id}"

    def check(self, key: str) -> bool:
        """Record an attempt for ``key`` and return whether it is allowed."""
        now = self.clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now > window.reset_at:
                if window is None:
                    self._make_room(now)
                self._windows[key] = _Window(
                    count=1, reset_at=now + timedelta(seconds=self.window_seconds)
                )
                return True
            if window.count >= self.max_attempts:
                return False
            window.count += 1
            return True

    def attempts(self, key: str) -> int:
        """Return attempts counted in the current window for ``key``."""
        with self._lock:
            window = self._windows.get(key)
            return window.count if window else 0

    def sweep(self) -> int:
        """Drop expired windows and return how many were removed."""
        with self._lock:
            return self._sweep(self.clock())

    def __len__(self) -> int:
        return len(self._windows)

    def _make_room(self, now: datetime) -> None:
        if len(self._windows) < self.max_keys:
            return
        self._sweep(now)
        while len(self._windows) >= self.max_keys:
            oldest = min(self._windows, key=lambda k: self._windows[k].reset_at)
            del self._windows[oldest]

    def _sweep(self, now: datetime) -> int:
        expired = [
            key for key, window in self._windows.items() if now > window.reset_at
        ]
        for key in expired:
            del self._windows[key]
        return len(expired)
