"""Local chapter cache."""

from .store import CacheStore

__all__ = ["CacheStore"]
