"""Next/previous chapter navigation after a chapter has been viewed."""

from __future__ import annotations

from enum import Enum
from typing import final

from src.cli.prompt import Prompter
from src.external.tools import DocumentViewer
from src.models.title import ChapterRef
from src.processors.chapter_pipeline import ChapterPipeline
from src.progress.tracker import ProgressTracker


class NavState(Enum):
    VIEWING = "viewing"
    AWAITING_INPUT = "awaiting_input"
    ADVANCING = "advancing"
    RETREATING = "retreating"
    QUIT = "quit"


# Replies are matched exactly, so "N" or "Q" simply ask again.
TRANSITIONS: dict[str, NavState] = {
    "n": NavState.ADVANCING,
    "p": NavState.RETREATING,
    "q": NavState.QUIT,
}


@final
class NavigationLoop:
    """Opens chapters and moves between them until the user quits."""

    def __init__(
        self,
        pipeline: ChapterPipeline,
        viewer: DocumentViewer,
        prompter: Prompter,
        tracker: ProgressTracker | None = None,
    ) -> None:
        """Initialize the loop.

        Args:
            pipeline: Chapter pipeline used for every chapter change
            viewer: External viewer
            prompter: Source of menu replies
            tracker: Console reporter
        """
        self.pipeline = pipeline
        self.viewer = viewer
        self.prompter = prompter
        self.tracker = tracker or ProgressTracker()

    def open_chapter(self, ref: ChapterRef) -> None:
        """Acquire a chapter and show it, blocking until the viewer closes."""
        cached = self.pipeline.is_cached(ref.title, ref.chapter_number)
        archive_path = self.pipeline.acquire(ref.title, ref.chapter_number)
        if cached:
            self.tracker.display_success("Manga file exists in cache, opening it...")
        self.viewer.open(archive_path)

    def next_state(self, reply: str) -> NavState:
        return TRANSITIONS.get(reply.strip(), NavState.AWAITING_INPUT)

    def run(self, ref: ChapterRef) -> ChapterRef:
        """Open ``ref`` and handle the n/p/q menu until the user quits.

        Args:
            ref: First chapter to show

        Returns:
            The last chapter that was requested

        Raises:
            MangaCliError: Any pipeline or viewer failure, unchanged
        """
        state = NavState.VIEWING
        while state is not NavState.QUIT:
            if state is NavState.VIEWING:
                self.open_chapter(ref)
                state = NavState.AWAITING_INPUT
            elif state is NavState.AWAITING_INPUT:
                self.prompter.show_menu()
                state = self.next_state(self.prompter.prompt_line("Enter Option: "))
            elif state is NavState.ADVANCING:
                ref = ref.next()
                state = NavState.VIEWING
            elif state is NavState.RETREATING:
                ref = ref.previous()
                state = NavState.VIEWING
        return ref
