# File: site_mapper/report/sitemap.py
"""site_mapper.report.sitemap: serialization of crawled pages into sitemap.xml."""

from __future__ import annotations

from pathlib import Path
from typing import Collection, Iterable, Union

from lxml import etree

from site_mapper.crawler.models import Node

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

__all__ = ["SITEMAP_NS", "build_sitemap", "write_sitemap"]


def build_sitemap(nodes: Iterable[Node], black_list: Collection[str], output_host: str) -> bytes:
    """Build a sitemap document for *nodes*.

    Nodes are sorted by URL, exact matches in *black_list* are dropped and every
    remaining node becomes ``<url><loc>{output_host}{node.url}</loc></url>``.
    The result depends only on the URLs, so repeated crawls of an unchanged
    site give byte-identical documents.
    """
    blocked = set(black_list)
    root = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
    for node in sorted(nodes, key=lambda n: n.url):
        if node.url in blocked:
            continue
        url = etree.SubElement(root, f"{{{SITEMAP_NS}}}url")
        loc = etree.SubElement(url, f"{{{SITEMAP_NS}}}loc")
        loc.text = f"{output_host}{node.url}"
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def write_sitemap(
    path: Union[str, Path],
    nodes: Iterable[Node],
    black_list: Collection[str],
    output_host: str,
) -> Path:
    """Write the sitemap for *nodes* to *path*, creating parent directories."""
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(build_sitemap(nodes, black_list, output_host))
    return output
