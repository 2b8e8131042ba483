"""Input payload resolution for single-input runs."""

import sys
from typing import BinaryIO

import structlog

from shall.exceptions import InputReadError
from shall.models.source import FileSource, InputSource, LiteralSource, StdinSource

log = structlog.get_logger(__name__)


def error_kind(exc: OSError) -> str:
    """Classify an OSError for InputReadError context."""
    if isinstance(exc, FileNotFoundError):
        return "not_found"
    if isinstance(exc, PermissionError):
        return "permission"
    if isinstance(exc, IsADirectoryError):
        return "is_directory"
    return "other"


class InputResolver:
    """Reads the whole payload of a literal, file or stdin source.

    The stdin stream can be injected; it defaults to ``sys.stdin.buffer``
    at read time.
    """

    def __init__(self, stdin: BinaryIO | None = None) -> None:
        self._stdin = stdin

    def resolve(self, source: InputSource, verbose: bool = False) -> bytes:
        """Return the raw bytes for ``source``.

        Args:
            source: Literal, file or stdin source
            verbose: Log a notice before reading

        Returns:
            Entire payload in memory

        Raises:
            InputReadError: If the file or stream cannot be read
        """
        if isinstance(source, LiteralSource):
            # Undecodable argv bytes arrive as surrogate escapes; hash the original bytes.
            return source.text.encode("utf-8", "surrogateescape")

        if isinstance(source, FileSource):
            if verbose:
                log.info("Reading from file", path=str(source.path))
            try:
                return source.path.read_bytes()
            except OSError as e:
                raise InputReadError(
                    "Error reading file",
                    path=str(source.path),
                    kind=error_kind(e),
                    reason=e.strerror or str(e),
                ) from e

        if isinstance(source, StdinSource):
            if verbose:
                log.info("Reading from stdin")
            stream = self._stdin if self._stdin is not None else sys.stdin.buffer
            try:
                return stream.read()
            except OSError as e:
                raise InputReadError(
                    "Error reading from stdin",
                    path="<stdin>",
                    kind=error_kind(e),
                    reason=e.strerror or str(e),
                ) from e

        raise TypeError(f"Cannot resolve payload for {type(source).__name__}")
