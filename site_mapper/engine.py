# File: site_mapper/engine.py
"""site_mapper.engine: runs a crawl and writes its sitemap."""

from __future__ import annotations

from typing import Optional

from site_mapper.aggregator import CrawlReport, aggregate_graph
from site_mapper.config import CrawlerConfig
from site_mapper.crawler.crawler import SiteCrawler
from site_mapper.crawler.fetcher import PageFetcher
from site_mapper.logger import logger
from site_mapper.report.sitemap import write_sitemap

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlerConfig, fetcher: Optional[PageFetcher] = None) -> CrawlReport:
    """
    Crawl the site described by *cfg* and write the sitemap if ``cfg.sitemap_path`` is set.

    Parameters
    ----------
    cfg : CrawlerConfig
        Crawl configuration.
    fetcher : PageFetcher, optional
        Page loader; an aiohttp-based one is used by default.

    Returns
    -------
    CrawlReport
        Every discovered URL grouped by outcome.
    """
    crawler = SiteCrawler(cfg, fetcher=fetcher)
    graph = await crawler.crawl()

    sitemap_path = None
    if cfg.sitemap_path is not None:
        finished = graph.finished_nodes()
        output_host = cfg.output_host if cfg.output_host is not None else cfg.check_host
        written = write_sitemap(cfg.sitemap_path, finished, cfg.black_list, output_host)
        sitemap_path = str(written)
        logger.info("Sitemap written: %s (%d pages crawled)", written, len(finished))

    return aggregate_graph(graph, sitemap_path=sitemap_path)
