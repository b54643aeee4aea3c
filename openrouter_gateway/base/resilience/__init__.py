"""Resilience helpers: retry/backoff policy and a reference rate limiter."""

from .rate_limiter import SlidingWindowRateLimiter
from .retry import DEFAULT_RETRY_CONFIG, RetryConfig, backoff_delay_ms, run_with_retry

__all__ = [
    "SlidingWindowRateLimiter",
    "RetryConfig",
    "DEFAULT_RETRY_CONFIG",
    "backoff_delay_ms",
    "run_with_retry",
]
