# tests/test_rate_limiter.py

"""Sliding-window request pacing."""
import time

import pytest

from infrastructure import RateLimiter


def test_from_limits_builds_one_second_and_two_minute_windows():
    assert RateLimiter.from_limits(18, 90).windows == ((18, 1.0), (90, 120.0))


@pytest.mark.asyncio
async def test_no_windows_never_waits():
    limiter = RateLimiter(windows=())
    start = time.monotonic()

    for _ in range(50):
        await limiter.acquire()

    assert time.monotonic() - start < 0.5


@pytest.mark.asyncio
async def test_full_window_delays_next_request():
    limiter = RateLimiter(windows=((2, 0.2),))
    start = time.monotonic()

    await limiter.acquire()
    await limiter.acquire()
    assert time.monotonic() - start < 0.1

    await limiter.acquire()
    assert time.monotonic() - start >= 0.2
