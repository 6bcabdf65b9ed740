"""Fixed-window rate limiting with a swappable store."""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from fastapi import Depends, Header, HTTPException, Request, status

from fittrack.config import get_settings
from fittrack.logging_config import get_logger

logger = get_logger(__name__)


class RateLimitStore(Protocol):
    """Decides whether a caller identified by ``key`` may proceed."""

    def check(self, key: str) -> bool: ...


@dataclass
class _Window:
    count: int
    reset_at: float


class FixedWindowRateLimitStore:
    """
    In-memory fixed-window limiter.

    The first request for a key opens a window of ``window_seconds``; up to
    ``max_requests`` requests are allowed inside it. The next request after
    the window closes opens a new one. Expired windows are dropped as calls
    come in. State lives in this process only.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._windows: dict[str, _Window] = {}
        self._next_prune = float("-inf")
        self._lock = threading.Lock()

    def tracked_keys(self) -> int:
        """Number of keys with a window currently held in memory."""
        with self._lock:
            return len(self._windows)

    def _prune(self, now: float) -> None:
        """Drop expired windows, at most once per window length."""
        if now < self._next_prune:
            return
        expired = [key for key, window in self._windows.items() if now > window.reset_at]
        for key in expired:
            del self._windows[key]
        self._next_prune = now + self.window_seconds

    def check(self, key: str) -> bool:
        now = self._clock()
        with self._lock:
            self._prune(now)
            window = self._windows.get(key)

            if window is None or now > window.reset_at:
                self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
                return True

            if window.count < self.max_requests:
                window.count += 1
                return True

            return False

    def reset(self) -> None:
        """Forget all windows."""
        with self._lock:
            self._windows.clear()


@lru_cache
def get_rate_limit_store() -> RateLimitStore:
    """Get the process-wide rate limit store built from settings."""
    settings = get_settings()
    return FixedWindowRateLimitStore(
        max_requests=settings.rate_limit_max_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )


def rate_limit_key(request: Request, x_user_id: str | None = Header(default=None)) -> str:
    """Identify the caller by user id header, falling back to client address."""
    if x_user_id:
        return f"user:{x_user_id}"
    host = request.client.host if request.client else "unknown"
    return f"ip:{host}"


def enforce_rate_limit(
    key: str = Depends(rate_limit_key),
    store: RateLimitStore = Depends(get_rate_limit_store),
) -> None:
    """FastAPI dependency rejecting callers over their request budget."""
    if not store.check(key):
        settings = get_settings()
        logger.warning(f"Rate limit exceeded for {key}")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=(
                f"Rate limit exceeded. Maximum {settings.rate_limit_max_requests} "
                f"requests per {settings.rate_limit_window_seconds:g} seconds."
            ),
        )
