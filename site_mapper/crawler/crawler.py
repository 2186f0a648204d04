# === FILE: site_mapper/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from site_mapper.config import CrawlerConfig
from site_mapper.crawler.fetcher import AiohttpFetcher, PageFetcher
from site_mapper.crawler.graph import CrawlGraph
from site_mapper.crawler.models import Node
from site_mapper.errors import BadStatus, CrawlError

__all__ = ("SiteCrawler",)

_ABSOLUTE_PREFIXES = ("http://", "https://")


class SiteCrawler:
    """
    Sequential crawler: one page in flight, pages visited in URL order.

    Internal pages (those under ``check_host``) are expanded through their
    links; external pages are at most fetched to check they are alive.
    """

    def __init__(self, config: CrawlerConfig, fetcher: Optional[PageFetcher] = None) -> None:
        self.config = config
        self.fetcher: PageFetcher = fetcher if fetcher is not None else AiohttpFetcher(config)
        self.graph = CrawlGraph()
        self.logger = logging.getLogger("SiteMapper")

    async def crawl(self) -> CrawlGraph:
        self.logger.info("Crawl started: %s", self.config.check_host)
        start = time.monotonic()
        for path in self.config.paths:
            self.graph.register_seed(path)

        checked = 0
        async with self.fetcher:
            node = self.graph.pop_next_pending()
            while node is not None:
                if await self._check_page(node):
                    checked += 1
                node = self.graph.pop_next_pending()

        duration = time.monotonic() - start
        self.logger.info(
            "Crawl finished: %d checked, %d pages, %d errors, %d known URLs in %.2f s",
            checked,
            len(self.graph.finished_nodes()),
            len(self.graph.errored_nodes()),
            len(self.graph),
            duration,
        )
        return self.graph

    def resolve(self, url: str) -> str:
        """Absolute fetch target for a node key."""
        if url.startswith(_ABSOLUTE_PREFIXES):
            return url
        return f"{self.config.check_host}{url}"

    def is_external(self, target: str) -> bool:
        return not target.startswith(self.config.check_host)

    def link_key(self, href: str) -> str:
        """Graph key for an extracted link: check_host is stripped, anything else is kept verbatim."""
        if href.startswith(self.config.check_host):
            return href[len(self.config.check_host):]
        return href

    async def _check_page(self, node: Node) -> bool:
        """Fetch *node* and update the graph. Returns False if the node was skipped."""
        target = self.resolve(node.url)
        external = self.is_external(target)
        if external and not self.config.check_external_links:
            self.logger.debug("Skipping external %s", target)
            return False

        self.logger.info("checking %s%s", "External " if external else "", target)
        try:
            status = await self.fetcher.navigate(target, timeout=self.config.timeout)
            await asyncio.sleep(self.config.settle_delay)
            if status is not None and not 200 <= status < 400:
                raise BadStatus(status)
            title = await self.fetcher.current_title()
        except CrawlError as exc:
            self.logger.warning("  %s: %s", target, exc)
            self.graph.mark_errored(node, str(exc))
            return True

        self.graph.record_title(node, title)
        if external:
            self.graph.mark_external(node)
            return True

        self.graph.mark_finished(node)
        for href in await self.fetcher.extract_links():
            self.graph.record_link(node.url, self.link_key(href))
        return True
