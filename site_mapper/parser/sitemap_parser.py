# File: site_mapper/parser/sitemap_parser.py
"""site_mapper.parser.sitemap_parser: parsing sitemap.xml back into URLs."""

from __future__ import annotations

from typing import List, Union

from lxml import etree


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Parse sitemap XML and return the URLs from its <loc> tags, in document order.

    Args:
        xml_content: sitemap.xml content, as text or raw bytes.

    Example:
    ```python
    from site_mapper.parser.sitemap_parser import parse_sitemap

    with open('build/sitemap.xml', 'rb') as f:
        urls = parse_sitemap(f.read())
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    parser = etree.XMLParser(ns_clean=True, recover=True)
    root = etree.fromstring(xml_content, parser=parser)
    if root is None:
        return []
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text]
