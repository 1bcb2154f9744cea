"""Wrappers around the external archiving and viewing programs."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Iterable, Sequence
from pathlib import Path

from src.errors import ArchiveError, DependencyMissingError, ViewerError


def check_dependencies(commands: Iterable[str]) -> None:
    """
    Verify that every required program is on PATH.

    Args:
        commands: Program names to look up

    Raises:
        DependencyMissingError: For the first program that is missing
    """
    for command in commands:
        if shutil.which(command) is None:
            raise DependencyMissingError(command)


class ZipArchiver:
    """Packs page images into a zip-compatible archive with the ``zip`` program."""

    def __init__(self, command: str, cwd: Path) -> None:
        """Initialize the archiver.

        Args:
            command: Archiver executable name
            cwd: Working directory for the archiver (the cache root)
        """
        self.command = command
        self.cwd = cwd

    def build_command(self, files: Sequence[Path], output: Path) -> list[str]:
        return [self.command, "-q", str(output), *(str(f) for f in files)]

    def archive(self, files: Sequence[Path], output: Path) -> None:
        """
        Write ``files`` into ``output`` in the given order.

        The entry order is the reading order in the viewer.

        Args:
            files: Page image paths, page 1 first
            output: Archive path to create

        Raises:
            ArchiveError: If there is nothing to pack or the archiver fails
        """
        if not files:
            raise ArchiveError(f"No page files to pack into {output}")

        try:
            result = subprocess.run(
                self.build_command(files, output),
                cwd=self.cwd,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ArchiveError(f"Failed to run {self.command}: {e}") from e

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise ArchiveError(f"Failed to create {output}: {detail}")


class DocumentViewer:
    """Opens an archive in an external viewer and waits for it to close."""

    def __init__(self, command: str) -> None:
        self.command = command

    def open(self, path: Path) -> None:
        """
        Show ``path`` in the viewer, blocking until the viewer exits.

        Raises:
            ViewerError: If the viewer cannot be started or exits with an error
        """
        try:
            result = subprocess.run([self.command, str(path)], check=False)
        except OSError as e:
            raise ViewerError(f"Failed to run {self.command}: {e}") from e

        if result.returncode != 0:
            raise ViewerError(
                f"Failed to open {path}: {self.command} exited with status {result.returncode}"
            )
