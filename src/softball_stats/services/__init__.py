"""
Services module for Softball Stats.

Usage:
    from softball_stats.services import get_stats_service

    service = get_stats_service()
    board = await service.get_stats("homeRuns")
"""

from .stats import SoftballStatsService, close_stats_service, get_stats_service

__all__ = [
    "SoftballStatsService",
    "close_stats_service",
    "get_stats_service",
]
