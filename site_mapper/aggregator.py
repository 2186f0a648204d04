# File: site_mapper/aggregator.py
"""site_mapper.aggregator: turns a finished crawl graph into a report."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import List, Optional, TypedDict

from site_mapper.crawler.graph import CrawlGraph
from site_mapper.crawler.models import Node, NodeState


class PageInfo(TypedDict):
    """A successfully crawled internal page."""

    url: str
    title: str
    referrers: List[str]


class ErrorInfo(TypedDict):
    """A page or external link that failed to load."""

    url: str
    error: str
    referrers: List[str]


class LinkInfo(TypedDict):
    """An external link, checked or not."""

    url: str
    title: str
    referrers: List[str]


@dataclass(slots=True)
class CrawlReport:
    """Crawl results: pages, errors, and external links grouped by outcome."""

    pages: List[PageInfo] = field(default_factory=list)
    errors: List[ErrorInfo] = field(default_factory=list)
    external: List[LinkInfo] = field(default_factory=list)
    unchecked: List[LinkInfo] = field(default_factory=list)

    sitemap_path: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def as_dict(self) -> dict:
        return asdict(self)

    def json(self, *, pretty: bool = False) -> str:
        """JSON representation of the report."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)


def _link(node: Node) -> LinkInfo:
    return {"url": node.url, "title": node.title, "referrers": sorted(node.referrers)}


def aggregate_graph(graph: CrawlGraph, sitemap_path: Optional[str] = None) -> CrawlReport:
    """Group every node of *graph* by outcome; each list is ordered by URL."""
    report = CrawlReport(sitemap_path=sitemap_path)
    for node in graph.nodes():
        if node.state is NodeState.FINISHED:
            report.pages.append(_link(node))
        elif node.state is NodeState.ERRORED:
            report.errors.append(
                {"url": node.url, "error": node.error or "", "referrers": sorted(node.referrers)}
            )
        elif node.state is NodeState.EXTERNAL:
            report.external.append(_link(node))
        else:
            report.unchecked.append(_link(node))
    return report
