"""
Core module for Softball Stats.

Provides shared types, configuration, models and the rate-limited HTTP client.

Usage:
    from softball_stats.core import StatCategory, get_settings
    from softball_stats.core.http import BaseApiClient, RateLimiter
"""

from .config import Settings, get_settings
from .types import (
    CATEGORY_ALIASES,
    CATEGORY_REGISTRY,
    MAX_LEADERS,
    CategoryConfig,
    StatCategory,
    get_category_config,
    get_category_title,
    resolve_category,
)
from .models import (
    Leaderboard,
    LeaderEntry,
    PlayerInfo,
    RankingsPayload,
    TeamInfo,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "CATEGORY_ALIASES",
    "CATEGORY_REGISTRY",
    "MAX_LEADERS",
    "CategoryConfig",
    "StatCategory",
    "get_category_config",
    "get_category_title",
    "resolve_category",
    # Models
    "Leaderboard",
    "LeaderEntry",
    "PlayerInfo",
    "RankingsPayload",
    "TeamInfo",
]
