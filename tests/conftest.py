"""Shared test doubles for HTTP, archiving and viewing."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest
import requests
from rich.console import Console

from src.cache.store import CacheStore
from src.config import AppConfig
from src.errors import ArchiveError
from src.fetchers.http_client import HttpClient
from src.progress.tracker import ProgressTracker


class DummyResponse:
    """Minimal response test double."""

    def __init__(self, url: str, payload: str | bytes | None, status_code: int = 200) -> None:
        self.url = url
        self.status_code = status_code
        if isinstance(payload, bytes):
            self.content = payload
            self.text = payload.decode("utf-8", errors="replace")
        else:
            self.text = payload or ""
            self.content = self.text.encode("utf-8")

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for {self.url}")


class DummySession:
    """Session test double serving a fixed URL-to-payload mapping.

    URLs missing from the mapping answer 404.
    """

    def __init__(self, payloads: dict[str, str | bytes] | None = None) -> None:
        self.payloads = dict(payloads or {})
        self.headers: dict[str, str] = {}
        self.calls: list[str] = []
        self.request_headers: list[dict[str, str] | None] = []
        self.timeouts: list[float] = []
        self.closed = False

    def get(self, url: str, headers: dict[str, str] | None = None, timeout: float | None = None) -> DummyResponse:
        self.calls.append(url)
        self.request_headers.append(headers)
        self.timeouts.append(timeout)
        if url not in self.payloads:
            return DummyResponse(url, None, status_code=404)
        return DummyResponse(url, self.payloads[url])

    def close(self) -> None:
        self.closed = True


class RecordingArchiver:
    """Archiver test double that records calls and writes a marker archive."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[tuple[list[Path], Path]] = []

    def archive(self, files: Sequence[Path], output: Path) -> None:
        self.calls.append((list(files), output))
        if self.fail:
            raise ArchiveError("zip failed")
        _ = output.write_bytes(b"PK")


class RecordingViewer:
    """Viewer test double that records opened paths."""

    def __init__(self) -> None:
        self.opened: list[Path] = []

    def open(self, path: Path) -> None:
        self.opened.append(path)


class ScriptedPrompter:
    """Prompter test double replaying fixed replies."""

    def __init__(self, replies: Sequence[str]) -> None:
        self.replies = list(replies)
        self.messages: list[str] = []
        self.menus_shown = 0
        self.results_shown: list[object] = []

    def prompt_line(self, message: str) -> str:
        self.messages.append(message)
        if not self.replies:
            raise EOFError
        return self.replies.pop(0).strip()

    def show_results(self, results: Sequence[object]) -> None:
        self.results_shown.extend(results)

    def show_menu(self) -> None:
        self.menus_shown += 1


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(
        search_url="https://catalog.test/search/story/",
        cache_dir=tmp_path / "cache",
        request_timeout=5.0,
    )


@pytest.fixture
def cache(config: AppConfig) -> CacheStore:
    return CacheStore(config.cache_dir)


@pytest.fixture
def session() -> DummySession:
    return DummySession()


@pytest.fixture
def http(config: AppConfig, session: DummySession) -> HttpClient:
    return HttpClient(config, session=session)  # type: ignore[arg-type]


@pytest.fixture
def tracker() -> ProgressTracker:
    return ProgressTracker(Console(file=None, quiet=True))
