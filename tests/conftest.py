"""
Pytest configuration for softball-stats tests.

The upstream NCAA API is replaced with httpx.MockTransport; no test
touches the network.
"""

from __future__ import annotations

import httpx
import pytest

from softball_stats.core.http import RateLimiter
from softball_stats.providers.ncaa import NcaaStatsClient

BATTING_PATH = "/stats/softball/d1/current/individual/271"
RANKINGS_PATH = "/rankings/softball/d1"


class FakeClock:
    """Monotonic clock whose sleep advances time instead of waiting."""

    def __init__(self, start: float = 1000.0):
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class UpstreamStub:
    """
    Routes GET paths to canned JSON bodies and records every request.

    A route value may be a dict/list (returned as JSON with 200) or an
    httpx.Response for custom status codes or bodies.
    """

    def __init__(self, routes: dict[str, object] | None = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    @property
    def paths(self) -> list[str]:
        return [request.url.path for request in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = self.routes.get(request.url.path)
        if body is None:
            return httpx.Response(404, json={"message": "not found"})
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def make_batting_rows(count: int, start: int = 1) -> list[dict[str, str]]:
    return [
        {
            "Rank": str(i),
            "Name": f"Player {i}",
            "Team": f"Team {i}",
            "Cl": "Jr.",
            "Position": "OF",
            "G": "50",
            "AB": "150",
            "H": "60",
            "BA": "0.400",
        }
        for i in range(start, start + count)
    ]


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
async def ncaa_client(upstream, fake_clock):
    """NCAA client wired to the stub upstream and a fake-clock limiter."""
    limiter = RateLimiter(1.0, clock=fake_clock, sleep=fake_clock.sleep)
    client = NcaaStatsClient(
        headers={"User-Agent": "College Softball App/1.0"},
        rate_limiter=limiter,
        transport=upstream.transport(),
    )
    async with client:
        yield client
