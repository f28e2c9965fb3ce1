"""
Softball Stats

A thin normalization proxy for public NCAA Division I softball statistics.
Fetches team rankings and per-category stat leaderboards from the NCAA API,
walks multi-page results behind an outbound rate limiter, and reshapes the
inconsistent upstream fields into a stable JSON contract.

Usage:
    from softball_stats import SoftballStatsService

    async with SoftballStatsService() as service:
        board = await service.get_stats("batting")
        rankings = await service.get_rankings()
"""

from .core.types import StatCategory
from .core.models import Leaderboard, LeaderEntry, RankingsPayload
from .providers.base import InvalidCategory, ProviderError, UpstreamTransportError
from .normalizers import assemble_leaderboard, normalize_record, normalize_rankings
from .services.stats import SoftballStatsService, get_stats_service

__all__ = [
    # Types
    "StatCategory",
    # Models
    "Leaderboard",
    "LeaderEntry",
    "RankingsPayload",
    # Errors
    "InvalidCategory",
    "ProviderError",
    "UpstreamTransportError",
    # Normalizers
    "assemble_leaderboard",
    "normalize_record",
    "normalize_rankings",
    # Service
    "SoftballStatsService",
    "get_stats_service",
]
