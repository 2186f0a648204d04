# File: site_mapper/report/__init__.py
"""site_mapper.report: sitemap output and crawl reports (JSON and HTML)."""

from __future__ import annotations

from site_mapper.report.html_report import render_html
from site_mapper.report.json_report import render_json
from site_mapper.report.sitemap import build_sitemap, write_sitemap

__all__ = ["render_json", "render_html", "build_sitemap", "write_sitemap"]
