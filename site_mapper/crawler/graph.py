# File: site_mapper/crawler/graph.py
"""Node registry and frontier for a single crawl run."""
from __future__ import annotations

import heapq
from typing import Dict, Iterator, List, Optional, Set

from site_mapper.crawler.models import Node, NodeState

__all__ = ["CrawlGraph"]


class CrawlGraph:
    """
    Registry of every discovered URL plus the frontier of unvisited ones.

    Keys are exact URL strings, no normalization is applied. The frontier is a
    min-heap of URLs, so :meth:`pop_next_pending` always yields the
    lexicographically smallest pending URL regardless of discovery order.
    Every URL enters the heap at most once.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, Node] = {}
        self._frontier: List[str] = []
        self._finished: Set[Node] = set()
        self._errored: Set[Node] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, url: object) -> bool:
        return url in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes())

    @property
    def pending_count(self) -> int:
        return len(self._frontier)

    def get(self, url: str) -> Optional[Node]:
        return self._nodes.get(url)

    def register_seed(self, url: str) -> Node:
        """Create a seed node with no referrers and queue it, unless already known."""
        node = self._nodes.get(url)
        if node is None:
            node = self._add(url)
        return node

    def record_link(self, from_url: str, to_url: str) -> Node:
        """Register that *from_url* links to *to_url*, queueing *to_url* if it is new."""
        node = self._nodes.get(to_url)
        if node is None:
            node = self._add(to_url)
        node.referrers.add(from_url)
        return node

    def pop_next_pending(self) -> Optional[Node]:
        if not self._frontier:
            return None
        return self._nodes[heapq.heappop(self._frontier)]

    def record_title(self, node: Node, title: str) -> None:
        node.title = title

    def mark_finished(self, node: Node) -> None:
        self._transition(node, NodeState.FINISHED)
        self._finished.add(node)

    def mark_errored(self, node: Node, error: str) -> None:
        self._transition(node, NodeState.ERRORED)
        node.error = error
        self._errored.add(node)

    def mark_external(self, node: Node) -> None:
        """Record that an external link was fetched and is alive."""
        self._transition(node, NodeState.EXTERNAL)

    def finished_nodes(self) -> Set[Node]:
        """Nodes fetched successfully as same-origin pages."""
        return set(self._finished)

    def errored_nodes(self) -> Set[Node]:
        return set(self._errored)

    def nodes(self) -> List[Node]:
        """All known nodes ordered by URL."""
        return [self._nodes[url] for url in sorted(self._nodes)]

    def _add(self, url: str) -> Node:
        node = Node(url=url)
        self._nodes[url] = node
        heapq.heappush(self._frontier, url)
        return node

    def _transition(self, node: Node, state: NodeState) -> None:
        if self._nodes.get(node.url) is not node:
            raise ValueError(f"node {node.url!r} does not belong to this graph")
        if node.state is not NodeState.NEW:
            raise ValueError(f"node {node.url!r} already {node.state.value}")
        node.state = state
