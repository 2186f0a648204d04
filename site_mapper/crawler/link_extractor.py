# site_mapper/crawler/link_extractor.py
"""
Title and link extraction from fetched HTML.
"""
from __future__ import annotations

from typing import List
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag
from site_mapper.crawler.models import PageData


def _soup(page: PageData) -> BeautifulSoup:
    return BeautifulSoup(page.content, "html.parser")


def parse_title(page: PageData) -> str:
    """Return the document title with whitespace collapsed, or an empty string."""
    soup = _soup(page)
    if soup.title is None:
        return ""
    return " ".join(soup.title.get_text().split())


def extract_links(page: PageData) -> List[str]:
    """
    Extract absolute HTTP(S) targets of every ``<a href>`` in document order.

    Relative hrefs are resolved against ``<base href>`` when present, else the
    page URL. Fragments and queries are kept. mailto:, javascript: and other
    non-HTTP schemes are ignored, so are hrefs urllib cannot parse
    (an unparseable <base href> falls back to the page URL). Duplicates are kept.
    """
    soup = _soup(page)
    base_url = page.url
    base = soup.find("base", href=True)
    if isinstance(base, Tag) and isinstance(base.get("href"), str):
        try:
            base_url = urljoin(page.url, base["href"].strip())
        except ValueError:
            pass

    links: List[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute = urljoin(base_url, href_val.strip())
            scheme = urlparse(absolute).scheme
        except ValueError:
            # unparseable href, e.g. a broken IPv6 host
            continue
        if scheme in ("http", "https"):
            links.append(absolute)
    return links
