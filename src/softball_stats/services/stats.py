"""
Softball stats service.

Runs the fetch -> normalize pipeline for rankings and stat leaderboards.
The service owns one NCAA client, and therefore one rate limiter, for the
lifetime of the process so every outbound call shares the same spacing.
"""

import logging
from typing import Any

from ..core.models import Leaderboard, RankingsPayload
from ..core.types import DEFAULT_RANKINGS_TITLE, resolve_category
from ..normalizers.leaders import assemble_leaderboard, default_updated
from ..normalizers.rankings import normalize_rankings
from ..providers.ncaa import NcaaStatsClient

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    """Envelope metadata as a string; empty for missing values."""
    if value is None:
        return ""
    return str(value).strip()


class SoftballStatsService:
    """
    Rankings and leaderboard service.

    Use as an async context manager, or call open()/aclose() explicitly:

        async with SoftballStatsService() as service:
            board = await service.get_stats("batting")
    """

    def __init__(self, client: NcaaStatsClient | None = None):
        self._client = client or NcaaStatsClient.from_settings()

    @property
    def client(self) -> NcaaStatsClient:
        return self._client

    async def open(self) -> None:
        await self._client.open()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SoftballStatsService":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def get_rankings(self) -> RankingsPayload:
        """
        Fetch and normalize the team rankings poll.

        Raises:
            UpstreamTransportError: If the upstream request fails
        """
        envelope = await self._client.get_rankings()
        rows = normalize_rankings(envelope.get("data"))
        logger.info(f"Normalized {len(rows)} ranking rows")
        return RankingsPayload(
            title=_text(envelope.get("title")) or DEFAULT_RANKINGS_TITLE,
            updated=_text(envelope.get("updated")) or default_updated(),
            data=rows,
        )

    async def get_stats(self, category: str) -> Leaderboard:
        """
        Fetch every page of a category and assemble its leaderboard.

        Raises:
            InvalidCategory: Before any request, if the category is unknown
            UpstreamTransportError: If an upstream request fails
        """
        stat_category = resolve_category(category)
        envelope = await self._client.fetch_envelope(stat_category)
        records = envelope.get("data", [])
        logger.info(f"Fetched {len(records)} {stat_category.value} records")
        return assemble_leaderboard(
            stat_category,
            records,
            updated=_text(envelope.get("updated")),
        )


# Singleton instance
_stats_service: SoftballStatsService | None = None


def get_stats_service() -> SoftballStatsService:
    """Get the process-wide stats service instance."""
    global _stats_service
    if _stats_service is None:
        _stats_service = SoftballStatsService()
    return _stats_service


async def close_stats_service() -> None:
    """Close the process-wide stats service. Called at app shutdown."""
    global _stats_service
    if _stats_service is not None:
        await _stats_service.aclose()
        _stats_service = None
