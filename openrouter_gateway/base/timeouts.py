"""Timeout normalization and the per-attempt async timeout guard.

Key Components
--------------
clamp_timeout(seconds)
    Normalize a configured timeout into ``[1s, 120s]`` (default 30s).

clamp_retries(count)
    Normalize the retry budget into ``[0, 5]`` (default 3).

attempt_timeout(coro, seconds)
    Await ``coro`` with a wall-clock deadline. On expiry the underlying task
    is cancelled (so the in-flight HTTP call is torn down) and
    ``asyncio.TimeoutError`` propagates to the caller, which classifies it as
    a retryable ``timeout`` failure.

Design Constraints
------------------
1. No hard-coded ad-hoc timeouts outside ``config.defaults``.
2. No environment reads here; values arrive through ``GatewayConfig``.
"""
from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

from ..config.defaults import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_MAX_RETRIES,
    MAX_TIMEOUT_SECONDS,
    MIN_MAX_RETRIES,
    MIN_TIMEOUT_SECONDS,
)

T = TypeVar("T")


def clamp_timeout(seconds: Optional[float]) -> float:
    """Return the timeout in seconds limited to the supported window."""
    value = DEFAULT_TIMEOUT_SECONDS if seconds is None else float(seconds)
    return max(MIN_TIMEOUT_SECONDS, min(value, MAX_TIMEOUT_SECONDS))


def clamp_retries(count: Optional[int]) -> int:
    """Return the retry budget limited to the supported window."""
    value = DEFAULT_MAX_RETRIES if count is None else int(count)
    return max(MIN_MAX_RETRIES, min(value, MAX_MAX_RETRIES))


async def attempt_timeout(coro: Awaitable[T], seconds: float) -> T:
    """Await ``coro`` for at most ``seconds``.

    Raises:
        asyncio.TimeoutError: When the deadline elapses; the awaited work is
            cancelled before the error propagates.
    """
    return await asyncio.wait_for(coro, timeout=seconds)


__all__ = ["clamp_timeout", "clamp_retries", "attempt_timeout"]
