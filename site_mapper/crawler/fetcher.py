# site_mapper/crawler/fetcher.py
"""
Fetcher module: the page-loading capability used by the crawler.

:class:`PageFetcher` describes what the crawler needs from a page loader.
:class:`AiohttpFetcher` implements it for static HTML over aiohttp.
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout
from site_mapper.config import CrawlerConfig
from site_mapper.crawler.link_extractor import extract_links, parse_title
from site_mapper.crawler.models import PageData
from site_mapper.errors import NavigationFailure

__all__ = ("PageFetcher", "AiohttpFetcher")


class PageFetcher(Protocol):
    """Loads one page at a time and exposes its title and outbound links.

    Entering the async context acquires the underlying session, leaving it
    releases the session.
    """

    async def __aenter__(self) -> "PageFetcher": ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def navigate(self, url: str, timeout: float) -> Optional[int]:
        """Load *url*; return the response status or None if there was no response.

        Raises :class:`~site_mapper.errors.NavigationFailure` on network errors and timeouts.
        """
        ...

    async def current_title(self) -> str: ...

    async def extract_links(self) -> List[str]:
        """Absolute targets of the anchors on the current page."""
        ...


class AiohttpFetcher:
    """Fetches pages with a single aiohttp session and parses them with BeautifulSoup."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.page: Optional[PageData] = None
        self.logger = logging.getLogger("SiteMapper")

    async def __aenter__(self) -> AiohttpFetcher:
        self.session = ClientSession(
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()
        self.session = None

    async def navigate(self, url: str, timeout: float) -> Optional[int]:
        if not self.session:
            raise RuntimeError("Session not initialized")
        self.page = None
        try:
            async with self.session.get(url, timeout=ClientTimeout(total=timeout)) as resp:
                mime = resp.headers.get("Content-Type", "").split(";", 1)[0].strip().lower()
                content = ""
                if "html" in mime:
                    content = await resp.text(errors="replace")
                self.page = PageData(url=str(resp.url), status=resp.status, content=content)
        except asyncio.TimeoutError as exc:
            raise NavigationFailure(f"TimeoutError: navigation timeout of {timeout:g} s exceeded") from exc
        except ClientError as exc:
            raise NavigationFailure(f"{type(exc).__name__}: {exc}") from exc
        self.logger.debug("%s -> HTTP %s (%d chars)", url, self.page.status, len(self.page.content))
        return self.page.status

    async def current_title(self) -> str:
        if self.page is None or not self.page.content:
            return ""
        return parse_title(self.page)

    async def extract_links(self) -> List[str]:
        if self.page is None or not self.page.content:
            return []
        return extract_links(self.page)
