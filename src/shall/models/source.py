"""Input source models.

Exactly one source is active per invocation. The ``kind`` field
discriminates the union when sources are parsed from plain data.
"""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class LiteralSource(BaseModel):
    """A string given on the command line, hashed as UTF-8."""

    kind: Literal["literal"] = "literal"
    text: Annotated[str, Field(description="String to hash")]

    model_config = {"frozen": True}


class FileSource(BaseModel):
    """A single file read fully into memory."""

    kind: Literal["file"] = "file"
    path: Annotated[Path, Field(description="File to hash")]

    model_config = {"frozen": True}


class StdinSource(BaseModel):
    """Standard input, read until end of stream."""

    kind: Literal["stdin"] = "stdin"

    model_config = {"frozen": True}


class DirectorySource(BaseModel):
    """Every regular file directly inside a directory (non-recursive)."""

    kind: Literal["directory"] = "directory"
    path: Annotated[Path, Field(description="Directory to scan")]

    model_config = {"frozen": True}


InputSource = Annotated[
    LiteralSource | FileSource | StdinSource | DirectorySource,
    Field(discriminator="kind"),
]
