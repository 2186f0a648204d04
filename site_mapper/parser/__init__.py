"""site_mapper.parser: readers for documents produced by the crawler."""
from site_mapper.parser.sitemap_parser import parse_sitemap

__all__ = ["parse_sitemap"]
