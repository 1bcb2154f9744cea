"""HTTP fetching for catalog pages and images."""

from .http_client import HttpClient

__all__ = ["HttpClient"]
