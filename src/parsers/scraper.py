"""HTML extraction against the catalog's markup."""

from __future__ import annotations

from bs4 import BeautifulSoup

from src.models.title import SearchResult

# Selectors for the catalog's current markup
SEARCH_RESULT_SELECTOR = "div.item-right h3 a"
CHAPTER_IMAGE_SELECTOR = "div.container-chapter-reader img"


class HtmlExtractor:
    """Selector-driven text and attribute extraction, in document order."""

    def __init__(self, parser: str = "html.parser") -> None:
        self.parser = parser

    def texts(self, html: str, selector: str) -> list[str]:
        """Return the stripped inner text of every element matching ``selector``."""
        soup = BeautifulSoup(html, self.parser)
        return [element.get_text(strip=True) for element in soup.select(selector)]

    def attributes(self, html: str, selector: str, attribute: str) -> list[str]:
        """Return ``attribute`` of every matching element that carries it."""
        return [value for _, value in self.texts_with_attribute(html, selector, attribute)]

    def texts_with_attribute(self, html: str, selector: str, attribute: str) -> list[tuple[str, str]]:
        """Return ``(text, attribute)`` per matching element, skipping elements without the attribute."""
        soup = BeautifulSoup(html, self.parser)
        pairs: list[tuple[str, str]] = []
        for element in soup.select(selector):
            value = element.get(attribute)
            if isinstance(value, list):
                value = " ".join(value)
            if value and value.strip():
                pairs.append((element.get_text(strip=True), value.strip()))
        return pairs


class ScraperAdapter:
    """Applies the catalog's selectors through an extractor."""

    def __init__(self, extractor: HtmlExtractor | None = None) -> None:
        self.extractor = extractor or HtmlExtractor()

    def search_results(self, html: str) -> list[SearchResult]:
        """
        Extract search candidates from a search result page.

        Each candidate's name and link are read from the same anchor.
        Anchors without a link or without a name are skipped.

        Args:
            html: Search result page markup

        Returns:
            list[SearchResult]: Candidates in page order
        """
        return [
            SearchResult(name=name, link=link.rstrip("/"))
            for name, link in self.extractor.texts_with_attribute(html, SEARCH_RESULT_SELECTOR, "href")
            if name
        ]

    def page_urls(self, html: str) -> list[str]:
        """Extract the chapter reader's image URLs in reading order."""
        return self.extractor.attributes(html, CHAPTER_IMAGE_SELECTOR, "src")
