"""
Data provider layer.

Wraps the upstream NCAA statistics API behind a rate-limited async client.

Usage:
    from softball_stats.providers.ncaa import NcaaStatsClient

    async with NcaaStatsClient.from_settings() as client:
        records = await client.fetch_all_pages("batting")
"""

from .base import (
    InvalidCategory,
    ProviderError,
    UpstreamTransportError,
)

__all__ = [
    "InvalidCategory",
    "ProviderError",
    "UpstreamTransportError",
]
