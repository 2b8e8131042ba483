"""Result reporting.

Rows are written to stdout as each result is produced:

    SHA256   | - | ba7816bf...
    MD5      | notes.txt | 900150...
"""

import json
import sys
from typing import Literal, TextIO

from shall.models.result import DigestResult

OutputFormat = Literal["table", "json"]


def format_row(result: DigestResult, label_width: int = 8, placeholder: str = "-") -> str:
    """Render ``LABEL | SUBJECT | HEX`` with a fixed-width label."""
    subject = result.subject if result.subject is not None else placeholder
    return f"{result.label.ljust(label_width)} | {subject} | {result.hex_digest}"


class Reporter:
    """Line-buffered writer for digest results."""

    def __init__(
        self,
        stream: TextIO | None = None,
        fmt: OutputFormat = "table",
        label_width: int = 8,
        placeholder: str = "-",
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.fmt = fmt
        self.label_width = label_width
        self.placeholder = placeholder

    def render(self, result: DigestResult) -> str:
        if self.fmt == "json":
            return json.dumps(result.to_record())
        return format_row(result, self.label_width, self.placeholder)

    def emit(self, result: DigestResult) -> None:
        """Write one result and flush it immediately."""
        self.stream.write(self.render(result) + "\n")
        self.stream.flush()
