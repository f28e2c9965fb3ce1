"""
Dependency injection for API endpoints.

Routes receive the process-wide SoftballStatsService so that every request
shares one outbound rate limiter. Tests override get_service.
"""

from typing import Annotated

from fastapi import Depends

from ..services.stats import SoftballStatsService, get_stats_service


def get_service() -> SoftballStatsService:
    """Dependency that provides the stats service."""
    return get_stats_service()


# Type alias for dependency injection
ServiceDependency = Annotated[SoftballStatsService, Depends(get_service)]
