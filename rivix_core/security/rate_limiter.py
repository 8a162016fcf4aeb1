"""
In-memory fixed-window rate limiter for state-changing requests.

Provides:
- Per-client quota on POST requests (one shared budget across all POST routes)
- Reset-on-expiry windows (not sliding)
- Periodic sweep of expired windows to bound memory

The limiter is an explicit object owned by the application (``app.state``),
not a module-level singleton, so tests and servers each get their own table.
"""

import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, FrozenSet, Iterable, Optional

from rivix_core.logging import get_logger

logger = get_logger("security.rate_limiter")

DEFAULT_WINDOW_SECONDS = 60
DEFAULT_MAX_REQUESTS = 5
DEFAULT_GATED_METHODS = frozenset({"POST"})

RATE_LIMIT_MESSAGE = "Too many requests. Please try again in a minute."


@dataclass
class RateWindow:
    """One client's current quota window."""
    count: int
    reset_at: float  # Unix timestamp

    def is_expired(self, now: float) -> bool:
        return now > self.reset_at


@dataclass(frozen=True)
class RateLimitDecision:
    """Result of a rate limit check."""
    allowed: bool
    limit: int
    remaining: int
    reset_at: Optional[float] = None  # None when the method is not gated
    retry_after: Optional[int] = None  # Seconds until retry allowed (rejections only)

    def to_headers(self) -> dict:
        """
        Convert rate limit metadata into HTTP response headers.

        Returns:
            Dictionary of header names to values; empty for ungated requests.
        """
        if self.reset_at is None:
            return {}
        headers = {
            "X-RateLimit-Limit": str(self.limit),
            "X-RateLimit-Remaining": str(self.remaining),
            "X-RateLimit-Reset": str(int(self.reset_at)),
        }
        if self.retry_after:
            headers["Retry-After"] = str(self.retry_after)
        return headers


class FixedWindowRateLimiter:
    """
    Fixed-window request counter keyed by client identifier.

    A client's first gated request opens a window of ``window_seconds``; up to
    ``max_requests`` requests are admitted inside it. The first request after
    the window expires opens a fresh one, so a client can land up to
    ``2 * max_requests`` requests in quick succession across a boundary.

    Thread-safe: admit and sweep share one lock, so the check-then-increment
    is atomic and a sweep can never drop an in-flight increment.
    """

    def __init__(
        self,
        window_seconds: float = DEFAULT_WINDOW_SECONDS,
        max_requests: int = DEFAULT_MAX_REQUESTS,
        gated_methods: Iterable[str] = DEFAULT_GATED_METHODS,
        clock: Callable[[], float] = time.time,
    ):
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")

        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self.gated_methods: FrozenSet[str] = frozenset(m.upper() for m in gated_methods)
        self._clock = clock
        self._windows: Dict[str, RateWindow] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._windows)

    def is_gated(self, method: str) -> bool:
        return method.upper() in self.gated_methods

    def admit(
        self,
        client_id: str,
        now: Optional[float] = None,
        method: str = "POST",
    ) -> RateLimitDecision:
        """
        Count one request from ``client_id`` and decide whether it may proceed.

        Args:
            client_id: Client identifier (usually the peer IP address).
            now: Current Unix time; defaults to the limiter clock.
            method: HTTP method. Methods outside ``gated_methods`` always pass
                and never touch the table.

        Returns:
            RateLimitDecision. A rejected request leaves the table unchanged.
        """
        if not self.is_gated(method):
            return RateLimitDecision(allowed=True, limit=self.max_requests, remaining=self.max_requests)

        if now is None:
            now = self._clock()

        with self._lock:
            window = self._windows.get(client_id)

            if window is None or window.is_expired(now):
                window = RateWindow(count=1, reset_at=now + self.window_seconds)
                self._windows[client_id] = window
                return self._allowed(window)

            if window.count < self.max_requests:
                window.count += 1
                return self._allowed(window)

            retry_after = max(1, math.ceil(window.reset_at - now))
            return RateLimitDecision(
                allowed=False,
                limit=self.max_requests,
                remaining=0,
                reset_at=window.reset_at,
                retry_after=retry_after,
            )

    def _allowed(self, window: RateWindow) -> RateLimitDecision:
        return RateLimitDecision(
            allowed=True,
            limit=self.max_requests,
            remaining=self.max_requests - window.count,
            reset_at=window.reset_at,
        )

    def sweep(self, now: Optional[float] = None) -> int:
        """
        Remove every window that has expired.

        Args:
            now: Current Unix time; defaults to the limiter clock.

        Returns:
            Number of windows removed.
        """
        if now is None:
            now = self._clock()

        with self._lock:
            expired = [key for key, window in self._windows.items() if window.is_expired(now)]
            for key in expired:
                del self._windows[key]
            remaining = len(self._windows)

        if expired:
            logger.debug("rate_limit_windows_evicted", count=len(expired), remaining=remaining)
        return len(expired)

    def get(self, client_id: str) -> Optional[RateWindow]:
        """Return a copy of the tracked window for ``client_id``, if any."""
        with self._lock:
            window = self._windows.get(client_id)
            if window is None:
                return None
            return RateWindow(count=window.count, reset_at=window.reset_at)

    def reset(self, client_id: str) -> None:
        """
        Forget the window for a given client.

        Args:
            client_id: Identifier to clear.
        """
        with self._lock:
            self._windows.pop(client_id, None)

    def clear(self) -> None:
        """Drop every tracked window."""
        with self._lock:
            self._windows.clear()
