"""Deterministic on-disk locations for chapter archives and page images."""

from __future__ import annotations

import re
from pathlib import Path
from typing import final


@final
class CacheStore:
    """Maps (display name, chapter number) pairs to paths under a base directory.

    A chapter counts as cached when its archive file exists. The file's
    content is never inspected.
    """

    ARCHIVE_SUFFIX = ".cbz"
    PAGE_SUFFIX = ".jpg"

    def __init__(self, base_dir: Path) -> None:
        """Initialize the store.

        Args:
            base_dir: Cache root, resolved once at startup
        """
        self.base_dir = base_dir

    def archive_path(self, display_name: str, chapter_number: int) -> Path:
        """Return ``<base>/<display_name>-<chapter_number>.cbz``."""
        return self.base_dir / f"{display_name}-{chapter_number}{self.ARCHIVE_SUFFIX}"

    def page_path(self, display_name: str, chapter_number: int, page_index: int) -> Path:
        """Return the intermediate image path for a 1-based page index."""
        return self.base_dir / f"{display_name}-{chapter_number}-{page_index}{self.PAGE_SUFFIX}"

    def exists(self, path: Path) -> bool:
        return path.exists()

    def ensure_dir(self) -> None:
        """Create the base directory and its parents if missing.

        Raises:
            OSError: If the directory cannot be created
        """
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def cached_chapters(self, display_name: str) -> list[int]:
        """List chapter numbers that already have an archive for a title.

        Args:
            display_name: Normalized title name

        Returns:
            Sorted chapter numbers
        """
        if not self.base_dir.is_dir():
            return []

        pattern = re.compile(
            rf"^{re.escape(display_name)}-(-?\d+){re.escape(self.ARCHIVE_SUFFIX)}$"
        )
        chapters: list[int] = []
        for file_path in self.base_dir.iterdir():
            match = pattern.match(file_path.name)
            if match and file_path.is_file():
                chapters.append(int(match.group(1)))
        return sorted(chapters)
