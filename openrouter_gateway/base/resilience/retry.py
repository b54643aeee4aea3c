"""Async retry policy with bounded exponential backoff.

Attempts run strictly sequentially: ``0..max_retries`` inclusive. After a
failed attempt ``n`` the policy sleeps ``min(base_ms * 2**n, cap_ms)``
milliseconds before attempt ``n + 1``. A non-retryable ``GatewayError`` stops
the loop immediately; when retries are exhausted the last error is raised.

The sleep function is injectable so tests can record delays instead of
waiting for them.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Iterable, Optional, Protocol, TypeVar

from ...config.defaults import BACKOFF_BASE_MS, BACKOFF_CAP_MS, DEFAULT_MAX_RETRIES
from ..errors import GatewayError, classify_exception

T = TypeVar("T")

SleepFn = Callable[[float], Awaitable[Any]]


class AttemptLogger(Protocol):  # pragma: no cover - structural protocol
    def __call__(
        self,
        *,
        attempt: int,
        max_retries: int,
        delay_ms: int,
        error: GatewayError,
    ) -> None: ...


def backoff_delay_ms(attempt: int, base_ms: int = BACKOFF_BASE_MS, cap_ms: int = BACKOFF_CAP_MS) -> int:
    """Return the delay that follows failed attempt ``attempt`` (0-based)."""
    return min(base_ms * (2**attempt), cap_ms)


@dataclass(frozen=True)
class RetryConfig:
    max_retries: int = DEFAULT_MAX_RETRIES
    base_delay_ms: int = BACKOFF_BASE_MS
    max_delay_ms: int = BACKOFF_CAP_MS
    attempt_logger: AttemptLogger | None = None

    def delays_ms(self) -> Iterable[int]:
        for attempt in range(self.max_retries):
            yield backoff_delay_ms(attempt, self.base_delay_ms, self.max_delay_ms)


DEFAULT_RETRY_CONFIG = RetryConfig()


async def run_with_retry(
    func: Callable[[], Awaitable[T]],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
    *,
    sleep: Optional[SleepFn] = None,
    request_id: Optional[str] = None,
) -> T:
    """Await ``func()`` under the retry policy.

    Any exception that is not already a ``GatewayError`` is classified first,
    so retry eligibility always comes from ``GatewayError.retryable``.

    Raises:
        GatewayError: The first non-retryable error, or the last error once
            ``config.max_retries`` retries have been used.
    """
    do_sleep = sleep or asyncio.sleep
    for attempt in range(config.max_retries + 1):
        try:
            return await func()
        except Exception as exc:  # noqa: BLE001 - classified, never swallowed
            err = classify_exception(exc, request_id)
            if not err.retryable or attempt == config.max_retries:
                if err is exc:
                    raise
                raise err from exc
            delay_ms = backoff_delay_ms(attempt, config.base_delay_ms, config.max_delay_ms)
            if config.attempt_logger:
                config.attempt_logger(
                    attempt=attempt + 1,
                    max_retries=config.max_retries,
                    delay_ms=delay_ms,
                    error=err,
                )
            await do_sleep(delay_ms / 1000.0)
    # The loop always returns or raises.
    raise RuntimeError("retry: reached terminal state without captured exception")  # pragma: no cover


__all__ = [
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "backoff_delay_ms",
    "run_with_retry",
]
