"""API routers."""

from . import rankings, stats

__all__ = ["rankings", "stats"]
