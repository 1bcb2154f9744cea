#!/usr/bin/env python3
"""
Manga CLI

An interactive terminal tool that searches the manga catalog, downloads a chapter's
pages into a .cbz archive under ~/.cache/manga-cli/ and opens it in an external viewer.
Archives already in the cache are opened without touching the network.

Usage:
    uv run main.py
"""

from __future__ import annotations

import sys

from rich.console import Console

from src.cache.store import CacheStore
from src.cli.prompt import Prompter
from src.config import AppConfig
from src.errors import MangaCliError
from src.external.tools import DocumentViewer, ZipArchiver, check_dependencies
from src.fetchers.http_client import HttpClient
from src.models.title import ChapterRef, Title
from src.navigation.loop import NavigationLoop
from src.parsers.names import parse_positive_int
from src.parsers.scraper import ScraperAdapter
from src.processors.chapter_pipeline import ChapterPipeline
from src.progress.tracker import ProgressTracker
from src.search.resolver import SearchResolver

# Initialize Rich console for output
console = Console()


def choose_title(resolver: SearchResolver, prompter: Prompter) -> Title:
    """Prompt for a query and a result number.

    Args:
        resolver: Search resolver
        prompter: Prompt source

    Returns:
        The chosen title
    """
    query = prompter.prompt_line("Search manga: ")
    results = resolver.search(query)
    prompter.show_results(results)
    return resolver.resolve(results, prompter.prompt_line("Enter Number: "))


def choose_chapter(title: Title, cache: CacheStore, prompter: Prompter, tracker: ProgressTracker) -> ChapterRef:
    """Prompt for the first chapter to read.

    Args:
        title: Chosen title
        cache: Cache store, used to list chapters already downloaded
        prompter: Prompt source
        tracker: Console reporter

    Returns:
        Reference to the requested chapter
    """
    cached = cache.cached_chapters(title.display_name)
    if cached:
        tracker.display_info(
            "Cached chapters: " + ", ".join(str(number) for number in cached)
        )
    chapter_number = parse_positive_int(
        prompter.prompt_line("Enter chapter number: "), "chapter number"
    )
    return ChapterRef(title, chapter_number)


def run(config: AppConfig, prompter: Prompter, tracker: ProgressTracker) -> ChapterRef:
    """Run one interactive session until the user quits.

    Raises:
        MangaCliError: On any failure; every error kind is fatal
    """
    check_dependencies(config.required_commands)

    cache = CacheStore(config.cache_dir)
    scraper = ScraperAdapter()
    with HttpClient(config) as http:
        resolver = SearchResolver(config.search_url, http, scraper)
        pipeline = ChapterPipeline(
            cache=cache,
            http=http,
            scraper=scraper,
            archiver=ZipArchiver(config.archive_command, cwd=config.cache_dir),
            tracker=tracker,
        )
        navigation = NavigationLoop(
            pipeline, DocumentViewer(config.viewer_command), prompter, tracker
        )

        title = choose_title(resolver, prompter)
        ref = choose_chapter(title, cache, prompter, tracker)
        return navigation.run(ref)


def main() -> None:
    """Main entry point for the manga CLI."""
    tracker = ProgressTracker(console)
    prompter = Prompter(console)
    verbose_mode = False

    try:
        config = AppConfig.from_env()
        verbose_mode = config.verbose
        if verbose_mode:
            console.print(f"[dim]Cache directory: {config.cache_dir}[/dim]")
        _ = run(config, prompter, tracker)
    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Interrupted by user.[/yellow]")
        sys.exit(1)
    except MangaCliError as e:
        tracker.display_error(str(e))
        if verbose_mode:
            import traceback
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]Critical error: {e}[/red]")
        if verbose_mode:
            import traceback
            console.print(f"[dim]{traceback.format_exc()}[/dim]")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
