"""Shall: calculate various hashes of a string or file.

Computes MD5, SHA1, SHA256 and SHA512 digests of a literal string, a file,
standard input, or every file directly inside a directory.
"""

__version__ = "0.1.0"

from shall.exceptions import ShallError

__all__ = ["__version__", "ShallError"]
