"""Directory mode: hash every file directly inside a directory."""

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from shall.exceptions import InputReadError
from shall.hashing.primitives import digest
from shall.hashing.resolver import error_kind
from shall.models.algorithm import Algorithm
from shall.models.result import DigestResult

log = structlog.get_logger(__name__)


class DirectoryProcessor:
    """Produces one DigestResult per file in a directory.

    Subdirectories are skipped, never descended into. The first
    enumeration or read failure aborts the whole run.
    """

    def __init__(self, sort_entries: bool = True, unknown_name: str = "unknown") -> None:
        self.sort_entries = sort_entries
        self.unknown_name = unknown_name

    def process(self, path: Path, algorithm: Algorithm) -> Iterator[DigestResult]:
        """Yield results as each file is hashed.

        Args:
            path: Directory to scan
            algorithm: The single algorithm to apply

        Yields:
            DigestResult with the file's base name as subject

        Raises:
            InputReadError: If the directory or one of its files cannot be read
        """
        for entry in self._entries(path):
            try:
                if entry.is_dir():
                    log.debug("Skipping directory", name=entry.name)
                    continue
                data = Path(entry.path).read_bytes()
            except OSError as e:
                raise InputReadError(
                    "Error reading file",
                    path=entry.path,
                    kind=error_kind(e),
                    reason=e.strerror or str(e),
                ) from e

            yield DigestResult(
                algorithm=algorithm,
                subject=self.subject_for(entry.name),
                digest=digest(algorithm, data),
            )

    def subject_for(self, name: str) -> str:
        """Return the display name, or the placeholder if it is not valid UTF-8."""
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            return self.unknown_name
        return name

    def _entries(self, path: Path) -> list[os.DirEntry]:
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise InputReadError(
                "Error reading directory",
                path=str(path),
                kind=error_kind(e),
                reason=e.strerror or str(e),
            ) from e

        if self.sort_entries:
            entries.sort(key=lambda entry: entry.name)
        return entries
