"""In-memory sliding-window rate limiter (reference ``RateLimiter``).

Tracks requests per user over a fixed window (default 60s). ``check_limit``
answers whether another request fits in the window; ``record_request`` adds
one entry. The client calls both when a ``user_id`` is supplied.

Safe for concurrent coroutines via one ``asyncio.Lock`` per user. A user's
bucket is dropped once its window empties, so memory tracks active users
only. State lives in process memory; multi-process deployments need a
shared store.
"""

from __future__ import annotations

import asyncio
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict


@dataclass
class _UserBucket:
    """Sliding window of request timestamps for one user."""

    entries: deque[float] = field(default_factory=deque)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def prune(self, now: float, window_seconds: float) -> None:
        cutoff = now - window_seconds
        while self.entries and self.entries[0] <= cutoff:
            self.entries.popleft()


class SlidingWindowRateLimiter:
    """Allow at most ``max_requests`` per user within ``window_seconds``.

    Usage:
        limiter = SlidingWindowRateLimiter(max_requests=10, window_seconds=60)
        gateway = OpenRouterGateway(GatewayConfig(api_key=..., rate_limiter=limiter))
        await gateway.send(messages, user_id="user-1")
    """

    def __init__(
        self,
        max_requests: int = 10,
        window_seconds: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")
        self._max_requests = max_requests
        self._window = window_seconds
        self._clock = clock
        self._buckets: Dict[str, _UserBucket] = {}
        self._last_sweep = clock()

    @property
    def tracked_users(self) -> int:
        """Number of users currently holding a window bucket."""
        return len(self._buckets)

    def _sweep_idle(self, now: float) -> None:
        """Drop buckets whose window emptied; runs at most once per window."""
        if now - self._last_sweep < self._window:
            return
        self._last_sweep = now
        for user_id, bucket in list(self._buckets.items()):
            if bucket.lock.locked():
                continue
            bucket.prune(now, self._window)
            if not bucket.entries:
                del self._buckets[user_id]

    async def check_limit(self, user_id: str) -> bool:
        bucket = self._buckets.get(user_id)
        if bucket is None:
            return True
        async with bucket.lock:
            bucket.prune(self._clock(), self._window)
            allowed = len(bucket.entries) < self._max_requests
            if not bucket.entries and self._buckets.get(user_id) is bucket:
                del self._buckets[user_id]
            return allowed

    async def record_request(self, user_id: str) -> None:
        now = self._clock()
        self._sweep_idle(now)
        bucket = self._buckets.get(user_id)
        if bucket is None:
            bucket = self._buckets[user_id] = _UserBucket()
        async with bucket.lock:
            now = self._clock()
            bucket.prune(now, self._window)
            bucket.entries.append(now)

    def get_stats(self, user_id: str) -> dict:
        """Return current window usage for ``user_id``; read-only."""
        cutoff = self._clock() - self._window
        bucket = self._buckets.get(user_id)
        current = sum(1 for ts in bucket.entries if ts > cutoff) if bucket else 0
        return {
            "user_id": user_id,
            "current": current,
            "limit": self._max_requests,
            "window_seconds": self._window,
        }


__all__ = ["SlidingWindowRateLimiter"]
