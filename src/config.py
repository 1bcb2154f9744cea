"""Application configuration loaded from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from src.errors import ConfigError

DEFAULT_SEARCH_URL = "https://m.manganelo.com/search/story/"
DEFAULT_CACHE_SUBDIR = Path(".cache") / "manga-cli"
DEFAULT_ARCHIVE_COMMAND = "zip"
DEFAULT_VIEWER_COMMAND = "zathura"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64; rv:128.0) Gecko/20100101 Firefox/128.0"
)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class AppConfig:
    """Process-wide settings, built once at startup and passed to each component."""

    search_url: str = DEFAULT_SEARCH_URL
    cache_dir: Path = field(default_factory=lambda: Path.home() / DEFAULT_CACHE_SUBDIR)
    archive_command: str = DEFAULT_ARCHIVE_COMMAND
    viewer_command: str = DEFAULT_VIEWER_COMMAND
    request_timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    verbose: bool = False

    @property
    def required_commands(self) -> list[str]:
        """External programs that must be installed before anything runs."""
        return [self.archive_command, self.viewer_command]

    @classmethod
    def from_env(cls) -> AppConfig:
        """Build the configuration from environment variables and an optional .env file.

        Recognised variables:
            MANGA_CLI_SEARCH_URL, MANGA_CLI_CACHE_DIR, MANGA_CLI_ARCHIVER,
            MANGA_CLI_VIEWER, MANGA_CLI_TIMEOUT, MANGA_CLI_USER_AGENT,
            MANGA_CLI_VERBOSE

        Raises:
            ConfigError: If MANGA_CLI_TIMEOUT is not a positive number
        """
        _ = load_dotenv()

        cache_dir = os.getenv("MANGA_CLI_CACHE_DIR")
        return cls(
            search_url=os.getenv("MANGA_CLI_SEARCH_URL") or DEFAULT_SEARCH_URL,
            cache_dir=Path(cache_dir).expanduser().resolve() if cache_dir else Path.home() / DEFAULT_CACHE_SUBDIR,
            archive_command=os.getenv("MANGA_CLI_ARCHIVER") or DEFAULT_ARCHIVE_COMMAND,
            viewer_command=os.getenv("MANGA_CLI_VIEWER") or DEFAULT_VIEWER_COMMAND,
            request_timeout=_parse_timeout(os.getenv("MANGA_CLI_TIMEOUT")),
            user_agent=os.getenv("MANGA_CLI_USER_AGENT") or DEFAULT_USER_AGENT,
            verbose=(os.getenv("MANGA_CLI_VERBOSE") or "").strip().lower() in _TRUTHY,
        )


def _parse_timeout(raw: str | None) -> float:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigError(f"MANGA_CLI_TIMEOUT must be a number, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigError(f"MANGA_CLI_TIMEOUT must be positive, got {raw!r}")
    return timeout
