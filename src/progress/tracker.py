"""Console reporting and download progress with Rich."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import final

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


@final
class ProgressTracker:
    """Reports pipeline status to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the progress tracker.

        Args:
            console: Rich console instance. If None, creates a new one.
        """
        self.console = console or Console()

    @contextmanager
    def track_page_downloads(self, chapter_label: str, total_pages: int) -> Iterator[PageProgressContext]:
        """Context manager for tracking page downloads of one chapter.

        Args:
            chapter_label: Human readable chapter name
            total_pages: Number of pages to download

        Yields:
            Context for advancing the progress bar
        """
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        ) as progress:
            task_id = progress.add_task(
                f"Downloading {chapter_label}...", total=total_pages
            )
            yield PageProgressContext(progress, task_id)

    def display_error(self, message: str) -> None:
        self.console.print(f"[red]Error: {message}[/red]")

    def display_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def display_info(self, message: str) -> None:
        self.console.print(f"[blue]{message}[/blue]")


@final
class PageProgressContext:
    """Context for advancing page download progress."""

    def __init__(self, progress: Progress, task_id: TaskID) -> None:
        self.progress = progress
        self.task_id = task_id

    def advance(self, pages: int = 1) -> None:
        self.progress.update(self.task_id, advance=pages)
