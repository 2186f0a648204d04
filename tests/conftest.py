# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import pytest
from aiohttp import web

from site_mapper.config import CrawlerConfig

CHECK_HOST = "http://h"


@dataclass
class FakePage:
    """Canned navigation outcome for FakeFetcher."""

    status: Optional[int] = 200
    title: str = ""
    links: Sequence[str] = ()
    error: Optional[Exception] = None


@dataclass
class FakeFetcher:
    """In-memory PageFetcher: unknown URLs answer 404."""

    site: Dict[str, FakePage]
    visited: List[str] = field(default_factory=list)
    timeouts: List[float] = field(default_factory=list)
    entered: bool = False
    closed: bool = False
    _page: Optional[FakePage] = None

    async def __aenter__(self) -> "FakeFetcher":
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    async def navigate(self, url: str, timeout: float) -> Optional[int]:
        self.visited.append(url)
        self.timeouts.append(timeout)
        self._page = self.site.get(url)
        if self._page is None:
            return 404
        if self._page.error is not None:
            raise self._page.error
        return self._page.status

    async def current_title(self) -> str:
        return self._page.title if self._page else ""

    async def extract_links(self) -> List[str]:
        return list(self._page.links) if self._page else []


def make_config(**overrides) -> CrawlerConfig:
    data = {"check_host": CHECK_HOST, "paths": ["/"], "settle_delay": 0}
    data.update(overrides)
    return CrawlerConfig(**data)


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Config for the fake http://h site with no settle delay."""
    return make_config()


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
