"""Digest selection, input resolution and dispatch."""

from shall.hashing.directory import DirectoryProcessor
from shall.hashing.engine import DigestEngine
from shall.hashing.primitives import digest
from shall.hashing.resolver import InputResolver
from shall.hashing.selector import select_algorithms

__all__ = [
    "digest",
    "select_algorithms",
    "InputResolver",
    "DirectoryProcessor",
    "DigestEngine",
]
