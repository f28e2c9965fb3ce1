"""
Stats router - serves stat leaderboards for the front-end tables.

Endpoints:
- GET /stats/{category} - Top 50 leaders for a category (all upstream pages)
- GET /categories - Supported categories with display titles
"""

from typing import Any

from fastapi import APIRouter

from ...core.types import CATEGORY_ALIASES, CATEGORY_REGISTRY
from ..dependencies import ServiceDependency

router = APIRouter()


@router.get("/categories")
async def list_categories() -> dict[str, Any]:
    """List supported stat categories."""
    return {
        "categories": [
            {"id": config.category.value, "title": config.title, "label": config.column_label}
            for config in CATEGORY_REGISTRY.values()
        ],
        "aliases": {alias: category.value for alias, category in CATEGORY_ALIASES.items()},
    }


@router.get("/stats/{category}")
async def get_stat_leaders(category: str, service: ServiceDependency) -> dict[str, Any]:
    """
    Get the leaderboard for a stat category.

    Unknown categories return 400 before any upstream request is made.
    """
    leaderboard = await service.get_stats(category)
    return leaderboard.to_dict()
