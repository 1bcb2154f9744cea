"""Turns a free-text query into a chosen catalog title."""

from __future__ import annotations

from collections.abc import Sequence

from src.errors import InvalidSelectionError, NotFoundError
from src.fetchers.http_client import HttpClient
from src.models.title import SearchResult, Title
from src.parsers.names import normalize_display_name, normalize_query, parse_positive_int
from src.parsers.scraper import ScraperAdapter


class SearchResolver:
    """Searches the catalog and resolves a numbered pick to a Title."""

    def __init__(self, search_url: str, http: HttpClient, scraper: ScraperAdapter) -> None:
        """Initialize the resolver.

        Args:
            search_url: Base search URL, the normalized query is appended to it
            http: HTTP client
            scraper: Catalog markup adapter
        """
        self.search_url = search_url
        self.http = http
        self.scraper = scraper

    def search_link(self, query: str) -> str:
        return self.search_url + normalize_query(query)

    def search(self, query: str) -> list[SearchResult]:
        """
        Look up candidates for ``query``.

        Args:
            query: Text typed by the user

        Returns:
            list[SearchResult]: Candidates in the catalog's order

        Raises:
            NotFoundError: If the catalog lists nothing
            NetworkError: If the search page cannot be fetched
        """
        html = self.http.get_text(self.search_link(query))
        results = self.scraper.search_results(html)
        if not results:
            raise NotFoundError(f"No manga found for the given search terms: {query!r}")
        return results

    def resolve(self, results: Sequence[SearchResult], raw_index: str | int) -> Title:
        """
        Pick a candidate by its 1-based position.

        Args:
            results: Candidates returned by ``search``
            raw_index: Prompt response or integer index

        Returns:
            Title: Chosen title with a filesystem-safe display name

        Raises:
            InvalidSelectionError: If the index is not a number in ``[1, len(results)]``
        """
        index = parse_positive_int(raw_index, "manga number")
        if index > len(results):
            raise InvalidSelectionError(
                f"Invalid manga number: {index} (choose 1-{len(results)})"
            )

        chosen = results[index - 1]
        return Title(
            display_name=normalize_display_name(chosen.name),
            catalog_link=chosen.link,
        )
