"""Tests for cache path derivation and lookup."""

from __future__ import annotations

from pathlib import Path

from src.cache.store import CacheStore


def test_archive_path_is_deterministic(tmp_path: Path):
    store = CacheStore(tmp_path)
    first = store.archive_path("OnePiece", 12)
    second = CacheStore(tmp_path).archive_path("OnePiece", 12)

    assert first == second == tmp_path / "OnePiece-12.cbz"


def test_paths_use_literal_chapter_numbers(tmp_path: Path):
    store = CacheStore(tmp_path)

    assert store.archive_path("Bleach", 7).name == "Bleach-7.cbz"
    assert store.page_path("Bleach", 7, 3).name == "Bleach-7-3.jpg"
    assert store.archive_path("Bleach", 0).name == "Bleach-0.cbz"


def test_distinct_chapters_do_not_collide(tmp_path: Path):
    store = CacheStore(tmp_path)
    paths = {store.archive_path(name, n) for name in ("A", "B") for n in (1, 2, 11)}

    assert len(paths) == 6


def test_exists_accepts_empty_archive(tmp_path: Path):
    store = CacheStore(tmp_path)
    path = store.archive_path("Naruto", 1)
    assert not store.exists(path)

    path.touch()

    assert store.exists(path)


def test_ensure_dir_is_idempotent(tmp_path: Path):
    store = CacheStore(tmp_path / "nested" / "cache")
    store.ensure_dir()
    store.ensure_dir()

    assert store.base_dir.is_dir()


def test_cached_chapters_lists_only_matching_archives(tmp_path: Path):
    store = CacheStore(tmp_path)
    for name in ("Naruto-3.cbz", "Naruto-1.cbz", "Naruto-1-1.jpg", "NarutoShippuden-2.cbz", "Bleach-4.cbz"):
        (tmp_path / name).touch()

    assert store.cached_chapters("Naruto") == [1, 3]


def test_cached_chapters_without_directory(tmp_path: Path):
    assert CacheStore(tmp_path / "missing").cached_chapters("Naruto") == []
