"""Exception types raised by manga-cli components."""

from __future__ import annotations


class MangaCliError(Exception):
    """Base class for every error the CLI reports to the user."""
    pass


class ConfigError(MangaCliError):
    """Exception raised when an environment override cannot be used."""
    pass


class DependencyMissingError(MangaCliError):
    """Exception raised when a required external program is not on PATH."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command} command not found.")
        self.command = command


class NetworkError(MangaCliError):
    """Exception raised when an HTTP request fails or its body is unreadable."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Request to {url} failed: {reason}")
        self.url = url


class NotFoundError(MangaCliError):
    """Exception raised when a search yields no candidates."""
    pass


class InvalidSelectionError(MangaCliError):
    """Exception raised for a non-numeric or out-of-range prompt response."""
    pass


class NoPagesError(MangaCliError):
    """Exception raised when a chapter page lists no images."""
    pass


class ArchiveError(MangaCliError):
    """Exception raised when a chapter archive cannot be built."""
    pass


class ViewerError(MangaCliError):
    """Exception raised when the external viewer fails."""
    pass
