"""
Provider exception types.

Every error raised while talking to the upstream statistics provider
derives from ProviderError so callers can catch the whole family.
"""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for provider errors."""
    pass


class InvalidCategory(ProviderError, ValueError):
    """Raised when a stat category is outside the supported set."""

    def __init__(self, category: str):
        super().__init__(f"Invalid category: {category}")
        self.category = category


class UpstreamTransportError(ProviderError):
    """
    Raised on a network failure or non-2xx response from the provider.

    The original httpx exception is kept as __cause__.
    """

    def __init__(self, message: str, path: str, status_code: int | None = None):
        super().__init__(message)
        self.path = path
        self.status_code = status_code
