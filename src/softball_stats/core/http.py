"""
Shared HTTP client with outbound rate limiting.

The upstream provider enforces a global per-IP request budget, so every
outbound call goes through a RateLimiter that keeps a minimum spacing
between requests. Failures are not retried here.
"""

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

import httpx

from ..providers.base import UpstreamTransportError

logger = logging.getLogger(__name__)


class RateLimiter:
    """Minimum-interval rate limiter for outbound API calls."""

    def __init__(
        self,
        min_interval: float = 1.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._last_request = float("-inf")
        self._lock = asyncio.Lock()

    @property
    def last_request(self) -> float:
        """Monotonic timestamp of the last granted request (-inf if none)."""
        return self._last_request

    async def acquire(self) -> None:
        """Wait until the floor has passed since the last request."""
        async with self._lock:
            now = self._clock()
            elapsed = now - self._last_request
            if elapsed < self.min_interval:
                wait = self.min_interval - elapsed
                logger.debug(f"Rate limiting: waiting {wait * 1000:.0f}ms before next request")
                await self._sleep(wait)
            self._last_request = self._clock()


class BaseApiClient:
    """
    Async HTTP client base with rate limiting.

    Subclasses set BASE_URL and add provider-specific methods.
    Use as an async context manager:

        async with MyClient() as client:
            data = await client._get("/endpoint")
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        rate_limiter: RateLimiter | None = None,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._rate_limiter = rate_limiter or RateLimiter()
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "BaseApiClient":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._default_headers,
                timeout=self._timeout,
                transport=self._transport,
            )

    async def aclose(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with'.")
        return self._client

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    async def _get(self, path: str) -> Any:
        """
        Make a rate-limited GET request and decode the JSON body.

        Raises:
            UpstreamTransportError: On network errors, non-2xx responses
                or a body that is not JSON
        """
        await self._rate_limiter.acquire()
        try:
            response = await self.client.get(path)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"Upstream returned {status} for {path}")
            raise UpstreamTransportError(
                f"Upstream returned {status} for {path}", path=path, status_code=status
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Request error for {path}: {e}")
            raise UpstreamTransportError(
                f"Request to {path} failed: {e}", path=path
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {path}: {e}")
            raise UpstreamTransportError(
                f"Invalid JSON from {path}", path=path, status_code=response.status_code
            ) from e
