"""Title and chapter reference data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchResult:
    """A raw search candidate as listed to the user."""

    name: str
    link: str


@dataclass(frozen=True)
class Title:
    """A chosen manga title.

    ``display_name`` is already normalized for use in file names.
    """

    display_name: str
    catalog_link: str


@dataclass(frozen=True)
class ChapterRef:
    """Address of one chapter of a title, used as the cache and URL key."""

    title: Title
    chapter_number: int

    def next(self) -> ChapterRef:
        return ChapterRef(self.title, self.chapter_number + 1)

    def previous(self) -> ChapterRef:
        # No floor: going below 1 is left to the remote fetch to reject.
        return ChapterRef(self.title, self.chapter_number - 1)

    @property
    def label(self) -> str:
        return f"{self.title.display_name} chapter {self.chapter_number}"
