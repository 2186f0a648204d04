# File: site_mapper/errors.py
"""Exceptions raised while checking a single page.

Both kinds are recorded on the offending node and never abort the crawl.
"""
from __future__ import annotations

__all__ = ["CrawlError", "NavigationFailure", "BadStatus"]


class CrawlError(Exception):
    """Base class for per-page failures."""


class NavigationFailure(CrawlError):
    """Navigation itself failed: network error, DNS failure or timeout."""


class BadStatus(CrawlError):
    """A response arrived with a status outside ``[200, 400)``."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Status: {status}")
        self.status = status
