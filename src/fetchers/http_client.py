"""Blocking HTTP access to the catalog and its image host."""

from __future__ import annotations

import requests
from requests.exceptions import RequestException

from src.config import AppConfig
from src.errors import NetworkError


class HttpClient:
    """Thin wrapper around a requests session with a fixed timeout."""

    def __init__(self, config: AppConfig, session: requests.Session | None = None) -> None:
        """Initialize the client.

        Args:
            config: Application configuration (timeout and user agent)
            session: Optional pre-built session, mainly for tests
        """
        self.timeout: float = config.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, url: str, headers: dict[str, str] | None = None) -> requests.Response:
        """Issue a GET request and check its status.

        Args:
            url: Absolute URL to fetch
            headers: Additional headers

        Returns:
            Response object

        Raises:
            NetworkError: If the request fails or returns an error status
        """
        try:
            response = self.session.get(url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
            return response
        except RequestException as e:
            raise NetworkError(url, e) from e

    def get_text(self, url: str) -> str:
        """Fetch a page and return its decoded markup."""
        response = self._get(url)
        try:
            return response.text
        except (RequestException, UnicodeDecodeError) as e:
            raise NetworkError(url, f"unreadable body: {e}") from e

    def get_bytes(self, url: str, referer: str | None = None) -> bytes:
        """Fetch a binary resource such as a page image.

        Args:
            url: Image URL
            referer: Page the image belongs to; the image host rejects hotlinks without it

        Returns:
            Raw response body
        """
        headers = {"Referer": referer} if referer else None
        response = self._get(url, headers=headers)
        try:
            return response.content
        except RequestException as e:
            raise NetworkError(url, f"unreadable body: {e}") from e
