from __future__ import annotations

import asyncio

import pytest

from openrouter_gateway import RateLimiter, SlidingWindowRateLimiter


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.mark.asyncio
async def test_limit_applies_per_user_within_window():
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(max_requests=2, window_seconds=60, clock=clock)

    assert await limiter.check_limit("a")  # nosec B101
    await limiter.record_request("a")
    await limiter.record_request("a")
    assert not await limiter.check_limit("a")  # nosec B101
    assert await limiter.check_limit("b")  # nosec B101


@pytest.mark.asyncio
async def test_window_slides():
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)

    await limiter.record_request("a")
    clock.now += 9.9
    assert not await limiter.check_limit("a")  # nosec B101
    clock.now += 0.2
    assert await limiter.check_limit("a")  # nosec B101


@pytest.mark.asyncio
async def test_concurrent_records_are_all_counted():
    limiter = SlidingWindowRateLimiter(max_requests=100, window_seconds=60)
    await asyncio.gather(*(limiter.record_request("a") for _ in range(20)))
    stats = limiter.get_stats("a")
    assert stats["current"] == 20  # nosec B101
    assert stats["limit"] == 100  # nosec B101


def test_satisfies_rate_limiter_protocol():
    assert isinstance(SlidingWindowRateLimiter(), RateLimiter)  # nosec B101


@pytest.mark.parametrize("kwargs", [{"max_requests": 0}, {"window_seconds": 0}])
def test_invalid_arguments_rejected(kwargs):
    with pytest.raises(ValueError):
        SlidingWindowRateLimiter(**kwargs)


@pytest.mark.asyncio
async def test_reads_do_not_create_buckets():
    limiter = SlidingWindowRateLimiter(max_requests=1, clock=_Clock())
    assert await limiter.check_limit("ghost")  # nosec B101
    assert limiter.get_stats("ghost")["current"] == 0  # nosec B101
    assert limiter.tracked_users == 0  # nosec B101


@pytest.mark.asyncio
async def test_expired_bucket_is_evicted_on_check():
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(max_requests=1, window_seconds=10, clock=clock)

    await limiter.record_request("a")
    assert limiter.tracked_users == 1  # nosec B101
    clock.now += 11
    assert limiter.get_stats("a")["current"] == 0  # nosec B101
    assert await limiter.check_limit("a")  # nosec B101
    assert limiter.tracked_users == 0  # nosec B101


@pytest.mark.asyncio
async def test_idle_users_are_swept_on_later_records():
    clock = _Clock()
    limiter = SlidingWindowRateLimiter(max_requests=5, window_seconds=10, clock=clock)

    for user in ("a", "b", "c"):
        await limiter.record_request(user)
    clock.now += 11
    await limiter.record_request("d")

    assert limiter.tracked_users == 1  # nosec B101
    assert limiter.get_stats("d")["current"] == 1  # nosec B101
