"""
Core types and constants for Softball Stats.

This module provides:
- StatCategory enum (the closed set of leaderboard categories)
- CategoryConfig dataclass for category-specific settings
- CATEGORY_REGISTRY for centralized category configuration

Update CATEGORY_REGISTRY when the upstream renumbers a stat page.
"""

from dataclasses import dataclass
from enum import Enum

from ..providers.base import InvalidCategory

SPORT_NAME = "Softball"
DEFAULT_CATEGORY_TITLE = "Statistical Leaders"
DEFAULT_RANKINGS_TITLE = "NCAA Division I Softball Rankings"

RANKINGS_ENDPOINT = "/rankings/softball/d1"
STATS_BASE_PATH = "/stats/softball/d1/current/individual"

# Leaderboards are capped to the top N upstream rows
MAX_LEADERS = 50


class StatCategory(str, Enum):
    """Supported leaderboard categories."""

    batting = "batting"
    hits = "hits"
    homeRuns = "homeRuns"
    obp = "obp"
    slg = "slg"
    era = "era"
    strikeoutsPerSeven = "strikeoutsPerSeven"
    strikeouts = "strikeouts"


@dataclass(frozen=True)
class CategoryConfig:
    """Configuration for a stat category."""

    category: StatCategory
    title: str
    stat_id: int

    # Column label used by the front-end table header
    column_label: str = "Value"

    @property
    def endpoint(self) -> str:
        """Upstream path of the first page."""
        return f"{STATS_BASE_PATH}/{self.stat_id}"

    def page_endpoint(self, page: int) -> str:
        """Upstream path for a 1-based page number."""
        if page <= 1:
            return self.endpoint
        return f"{self.endpoint}/p{page}"


# =============================================================================
# CATEGORY REGISTRY
# =============================================================================

CATEGORY_REGISTRY: dict[StatCategory, CategoryConfig] = {
    StatCategory.batting: CategoryConfig(
        category=StatCategory.batting,
        title="Batting Average",
        stat_id=271,
        column_label="AVG",
    ),
    StatCategory.hits: CategoryConfig(
        category=StatCategory.hits,
        title="Hits",
        stat_id=1088,
        column_label="H",
    ),
    StatCategory.homeRuns: CategoryConfig(
        category=StatCategory.homeRuns,
        title="Home Runs",
        stat_id=514,
        column_label="HR",
    ),
    StatCategory.obp: CategoryConfig(
        category=StatCategory.obp,
        title="On-Base Percentage",
        stat_id=510,
        column_label="OB%",
    ),
    StatCategory.slg: CategoryConfig(
        category=StatCategory.slg,
        title="Slugging Percentage",
        stat_id=343,
        column_label="SLG%",
    ),
    StatCategory.era: CategoryConfig(
        category=StatCategory.era,
        title="Earned Run Average",
        stat_id=276,
        column_label="ERA",
    ),
    StatCategory.strikeoutsPerSeven: CategoryConfig(
        category=StatCategory.strikeoutsPerSeven,
        title="Strikeouts Per Seven Innings",
        stat_id=278,
        column_label="K/7",
    ),
    StatCategory.strikeouts: CategoryConfig(
        category=StatCategory.strikeouts,
        title="Strikeouts",
        stat_id=539,
        column_label="SO",
    ),
}

# Front-end tab ids that differ from the canonical category name
CATEGORY_ALIASES: dict[str, StatCategory] = {
    "strikeoutsTotal": StatCategory.strikeouts,
}


def resolve_category(category: "str | StatCategory") -> StatCategory:
    """
    Resolve a category name (or alias) to a StatCategory.

    Raises:
        InvalidCategory: If the name is not a known category or alias
    """
    if isinstance(category, StatCategory):
        return category
    if category in CATEGORY_ALIASES:
        return CATEGORY_ALIASES[category]
    try:
        return StatCategory(category)
    except ValueError:
        raise InvalidCategory(category) from None


def get_category_config(category: "str | StatCategory") -> CategoryConfig:
    """Get configuration for a category. Raises InvalidCategory if unknown."""
    return CATEGORY_REGISTRY[resolve_category(category)]


def get_category_title(category: "str | StatCategory") -> str:
    """Display title for a category, or the generic label if unknown."""
    try:
        return get_category_config(category).title
    except InvalidCategory:
        return DEFAULT_CATEGORY_TITLE
