"""Pydantic models for Shall."""

from shall.models.algorithm import Algorithm
from shall.models.request import HashRequest
from shall.models.result import DigestResult
from shall.models.source import (
    DirectorySource,
    FileSource,
    InputSource,
    LiteralSource,
    StdinSource,
)

__all__ = [
    "Algorithm",
    "HashRequest",
    "DigestResult",
    "InputSource",
    "LiteralSource",
    "FileSource",
    "StdinSource",
    "DirectorySource",
]
