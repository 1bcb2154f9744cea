"""Data models for manga-cli."""

from .title import ChapterRef, SearchResult, Title

__all__ = ["ChapterRef", "SearchResult", "Title"]
