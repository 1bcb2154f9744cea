"""Chapter acquisition: cache lookup, page download and packing."""

from __future__ import annotations

from pathlib import Path
from typing import final

from src.cache.store import CacheStore
from src.errors import ArchiveError, NoPagesError
from src.external.tools import ZipArchiver
from src.fetchers.http_client import HttpClient
from src.models.title import ChapterRef, Title
from src.parsers.scraper import ScraperAdapter
from src.progress.tracker import ProgressTracker


@final
class ChapterPipeline:
    """Returns a ready-to-open archive for a chapter, building it when missing."""

    def __init__(
        self,
        cache: CacheStore,
        http: HttpClient,
        scraper: ScraperAdapter,
        archiver: ZipArchiver,
        tracker: ProgressTracker | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            cache: Cache store deciding where archives live
            http: HTTP client for chapter pages and images
            scraper: Catalog markup adapter
            archiver: Packs page files into the archive
            tracker: Console reporter
        """
        self.cache = cache
        self.http = http
        self.scraper = scraper
        self.archiver = archiver
        self.tracker = tracker or ProgressTracker()

    @staticmethod
    def chapter_url(catalog_link: str, chapter_number: int) -> str:
        return f"{catalog_link}/chapter-{chapter_number}"

    def is_cached(self, title: Title, chapter_number: int) -> bool:
        return self.cache.exists(self.cache.archive_path(title.display_name, chapter_number))

    def acquire(self, title: Title, chapter_number: int) -> Path:
        """Return the archive path for a chapter.

        A cached archive is returned without any network access. Otherwise the
        chapter page is fetched, every page image is downloaded in order and the
        images are packed into the archive.

        Args:
            title: Chosen title
            chapter_number: Chapter to acquire, used verbatim in URLs and file names

        Returns:
            Path to the chapter archive

        Raises:
            NetworkError: If a page or image request fails
            NoPagesError: If the chapter page lists no images
            ArchiveError: If a page cannot be written or packing fails
        """
        archive_path = self.cache.archive_path(title.display_name, chapter_number)
        if self.cache.exists(archive_path):
            return archive_path

        chapter_url = self.chapter_url(title.catalog_link, chapter_number)
        html = self.http.get_text(chapter_url)
        page_urls = self.scraper.page_urls(html)
        if not page_urls:
            raise NoPagesError(
                f"No images found for chapter {chapter_number} of {title.display_name}"
            )

        try:
            self.cache.ensure_dir()
        except OSError as e:
            raise ArchiveError(f"Cannot create cache directory {self.cache.base_dir}: {e}") from e

        page_files = self._download_pages(ChapterRef(title, chapter_number), chapter_url, page_urls)

        self.tracker.display_success("Creating manga file...")
        self.archiver.archive(page_files, archive_path)
        self.tracker.display_success("Manga file created successfully!")
        return archive_path

    def _download_pages(self, ref: ChapterRef, chapter_url: str, page_urls: list[str]) -> list[Path]:
        """Download pages one at a time into their 1-based page files.

        The first failure aborts the chapter. Pages written before it stay on disk.

        Returns:
            Page file paths in reading order
        """
        page_files: list[Path] = []
        self.tracker.display_success("Downloading images...")
        with self.tracker.track_page_downloads(ref.label, len(page_urls)) as progress:
            for page_index, url in enumerate(page_urls, start=1):
                content = self.http.get_bytes(url, referer=chapter_url)
                page_path = self.cache.page_path(ref.title.display_name, ref.chapter_number, page_index)
                try:
                    _ = page_path.write_bytes(content)
                except OSError as e:
                    raise ArchiveError(f"Failed to write page {page_path}: {e}") from e
                page_files.append(page_path)
                progress.advance()
        return page_files
