"""
Tests for the outbound rate limiter.
"""

import asyncio
import time

from conftest import FakeClock

from softball_stats.core.http import RateLimiter


class TestRateLimiter:

    async def test_first_request_does_not_wait(self, fake_clock):
        limiter = RateLimiter(1.0, clock=fake_clock, sleep=fake_clock.sleep)

        await limiter.acquire()

        assert fake_clock.sleeps == []
        assert limiter.last_request == fake_clock.now

    async def test_first_request_free_when_clock_starts_at_zero(self):
        clock = FakeClock(start=0.0)
        limiter = RateLimiter(1.0, clock=clock, sleep=clock.sleep)

        await limiter.acquire()

        assert clock.sleeps == []
        assert limiter.last_request == 0.0

    async def test_back_to_back_requests_wait_remaining_interval(self, fake_clock):
        limiter = RateLimiter(1.0, clock=fake_clock, sleep=fake_clock.sleep)

        await limiter.acquire()
        fake_clock.now += 0.25
        await limiter.acquire()

        assert fake_clock.sleeps == [0.75]

    async def test_no_wait_after_interval_elapsed(self, fake_clock):
        limiter = RateLimiter(1.0, clock=fake_clock, sleep=fake_clock.sleep)

        await limiter.acquire()
        fake_clock.now += 1.5
        await limiter.acquire()

        assert fake_clock.sleeps == []

    async def test_timestamp_updated_after_every_acquire(self):
        clock = FakeClock(start=50.0)
        limiter = RateLimiter(1.0, clock=clock, sleep=clock.sleep)

        stamps = []
        for _ in range(3):
            await limiter.acquire()
            stamps.append(limiter.last_request)

        assert stamps == [50.0, 51.0, 52.0]

    async def test_concurrent_callers_are_spaced(self):
        clock = FakeClock()
        limiter = RateLimiter(1.0, clock=clock, sleep=clock.sleep)
        granted: list[float] = []

        async def call():
            await limiter.acquire()
            granted.append(clock())

        await asyncio.gather(call(), call(), call())

        assert granted == sorted(granted)
        assert all(b - a >= 1.0 for a, b in zip(granted, granted[1:]))

    async def test_real_clock_spacing(self):
        limiter = RateLimiter(0.2)

        await limiter.acquire()
        first = time.monotonic()
        await limiter.acquire()
        second = time.monotonic()

        assert second - first >= 0.19
