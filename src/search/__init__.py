"""Catalog search."""

from .resolver import SearchResolver

__all__ = ["SearchResolver"]
