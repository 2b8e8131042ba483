"""Supported digest algorithms.

Members are declared in the canonical output order, so iterating
over Algorithm yields SHA1, SHA256, SHA512, MD5.
"""

from enum import Enum


class Algorithm(str, Enum):
    """Digest algorithms Shall can compute."""

    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    MD5 = "md5"

    @property
    def label(self) -> str:
        """Display name used in report rows."""
        return self.name

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        return _DIGEST_SIZES[self]

    @property
    def hex_length(self) -> int:
        """Length of the lowercase hex encoding."""
        return self.digest_size * 2


_DIGEST_SIZES = {
    Algorithm.SHA1: 20,
    Algorithm.SHA256: 32,
    Algorithm.SHA512: 64,
    Algorithm.MD5: 16,
}
