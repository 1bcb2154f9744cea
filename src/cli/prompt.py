"""Interactive prompts."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console

from src.models.title import SearchResult

MENU_OPTIONS = (
    ("n", "Next chapter"),
    ("q", "Quit"),
    ("p", "Previous chapter"),
)


class Prompter:
    """Reads single lines from the user through a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def prompt_line(self, message: str) -> str:
        """Show ``message`` and return the stripped reply.

        Raises:
            EOFError: If stdin is closed
        """
        return self.console.input(f"[bold yellow]{message}[/bold yellow]").strip()

    def show_results(self, results: Sequence[SearchResult]) -> None:
        self.console.print("Search results:")
        for i, result in enumerate(results, 1):
            self.console.print(f"[{i}] {result.name}", markup=False, highlight=False)

    def show_menu(self) -> None:
        for key, label in MENU_OPTIONS:
            self.console.print(f"{label} ({key})", markup=False)
