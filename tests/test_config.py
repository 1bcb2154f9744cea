"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from src import config as config_module
from src.config import DEFAULT_SEARCH_URL, AppConfig
from src.errors import ConfigError

ENV_VARS = (
    "MANGA_CLI_SEARCH_URL",
    "MANGA_CLI_CACHE_DIR",
    "MANGA_CLI_ARCHIVER",
    "MANGA_CLI_VIEWER",
    "MANGA_CLI_TIMEOUT",
    "MANGA_CLI_USER_AGENT",
    "MANGA_CLI_VERBOSE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda: False)


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path))

    config = AppConfig.from_env()

    assert config.search_url == DEFAULT_SEARCH_URL
    assert config.cache_dir == tmp_path / ".cache" / "manga-cli"
    assert config.required_commands == ["zip", "zathura"]
    assert config.request_timeout == 30.0
    assert config.verbose is False


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("MANGA_CLI_CACHE_DIR", str(tmp_path / "cbz"))
    monkeypatch.setenv("MANGA_CLI_VIEWER", "mcomix")
    monkeypatch.setenv("MANGA_CLI_TIMEOUT", "12.5")
    monkeypatch.setenv("MANGA_CLI_VERBOSE", "yes")

    config = AppConfig.from_env()

    assert config.cache_dir == (tmp_path / "cbz").resolve()
    assert config.required_commands == ["zip", "mcomix"]
    assert config.request_timeout == 12.5
    assert config.verbose is True


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_invalid_timeout(monkeypatch: pytest.MonkeyPatch, raw: str):
    monkeypatch.setenv("MANGA_CLI_TIMEOUT", raw)

    with pytest.raises(ConfigError):
        AppConfig.from_env()


def test_config_is_immutable():
    config = AppConfig()

    with pytest.raises(AttributeError):
        config.viewer_command = "other"  # type: ignore[misc]


def test_relative_cache_dir_becomes_absolute(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MANGA_CLI_CACHE_DIR", "cache")

    config = AppConfig.from_env()

    assert config.cache_dir.is_absolute()
    assert config.cache_dir == (tmp_path / "cache").resolve()
