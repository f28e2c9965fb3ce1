"""
NCAA statistics API client.

Provides access to D1 softball rankings and individual stat leaderboards
via the NCAA API (https://ncaa-api.henrygd.me). Stat pages are numbered
/p2, /p3, ... after the first; the first page declares the page count.
"""

import logging
from typing import Any

import httpx

from ..core.config import Settings, get_settings
from ..core.http import BaseApiClient, RateLimiter
from ..core.types import (
    RANKINGS_ENDPOINT,
    StatCategory,
    get_category_config,
    resolve_category,
)

logger = logging.getLogger(__name__)


class NcaaStatsClient(BaseApiClient):
    """NCAA API client for softball rankings and stat leaders."""

    BASE_URL = "https://ncaa-api.henrygd.me"

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        rate_limiter: RateLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "NcaaStatsClient":
        """Build a client from application settings."""
        settings = settings or get_settings()
        return cls(
            base_url=settings.ncaa_api_base_url,
            headers=settings.ncaa_headers,
            rate_limiter=rate_limiter or RateLimiter(settings.ncaa_min_request_interval),
            timeout=settings.ncaa_request_timeout,
            transport=transport,
        )

    # =========================================================================
    # Rankings
    # =========================================================================

    async def get_rankings(self) -> dict[str, Any]:
        """Get the raw team rankings envelope."""
        logger.info("Fetching rankings from NCAA API")
        response = await self._get(RANKINGS_ENDPOINT)
        return response if isinstance(response, dict) else {}

    # =========================================================================
    # Stat leaders
    # =========================================================================

    async def get_stats_page(self, category: "str | StatCategory", page: int = 1) -> Any:
        """Get one raw page of a category leaderboard (1-based page number)."""
        config = get_category_config(category)
        return await self._get(config.page_endpoint(page))

    async def fetch_envelope(self, category: "str | StatCategory") -> dict[str, Any]:
        """
        Fetch every page of a category leaderboard.

        Pages are fetched sequentially, each behind the rate limiter.
        Secondary pages whose payload is not a list are skipped.

        Returns:
            The first-page envelope with "data" replaced by the records of
            all pages, in upstream order

        Raises:
            InvalidCategory: Before any request, if the category is unknown
            UpstreamTransportError: On network errors or non-2xx responses
        """
        category = resolve_category(category)

        logger.info(f"Fetching {category.value} stats from NCAA API")
        first_page = await self.get_stats_page(category)
        envelope = dict(first_page) if isinstance(first_page, dict) else {}

        data = envelope.get("data")
        records: list[Any] = list(data) if isinstance(data, list) else []

        total_pages = _page_count(envelope.get("pages"))
        for page in range(2, total_pages + 1):
            logger.info(f"Fetching page {page}/{total_pages} for {category.value}")
            payload = await self.get_stats_page(category, page)
            page_data = payload.get("data") if isinstance(payload, dict) else None
            if not isinstance(page_data, list):
                logger.warning(f"Skipping malformed page {page} for {category.value}")
                continue
            records.extend(page_data)

        envelope["data"] = records
        return envelope

    async def fetch_all_pages(self, category: "str | StatCategory") -> list[Any]:
        """Fetch every page of a category and return only the raw records."""
        envelope = await self.fetch_envelope(category)
        return envelope["data"]


def _page_count(value: Any) -> int:
    """Declared page count, defaulting to 1 when absent or unparsable."""
    try:
        pages = int(value)
    except (TypeError, ValueError):
        return 1
    return max(pages, 1)
