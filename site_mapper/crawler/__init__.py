"""site_mapper.crawler: crawl graph, traversal engine and page fetchers."""
from site_mapper.crawler.crawler import SiteCrawler
from site_mapper.crawler.graph import CrawlGraph
from site_mapper.crawler.models import Node, NodeState, PageData

__all__ = ["SiteCrawler", "CrawlGraph", "Node", "NodeState", "PageData"]
