"""Markup extraction and name normalization utilities."""

from .names import normalize_display_name, normalize_query, parse_positive_int
from .scraper import HtmlExtractor, ScraperAdapter

__all__ = [
    "HtmlExtractor",
    "ScraperAdapter",
    "normalize_display_name",
    "normalize_query",
    "parse_positive_int",
]
