"""
Rankings router - serves the D1 softball team poll.
"""

from typing import Any

from fastapi import APIRouter

from ..dependencies import ServiceDependency

router = APIRouter()


@router.get("/rankings")
async def get_rankings(service: ServiceDependency) -> dict[str, Any]:
    """Get the current team rankings with normalized columns."""
    rankings = await service.get_rankings()
    return rankings.to_dict()
