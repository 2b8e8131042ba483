"""Digest primitives backed by hashlib."""

import hashlib

from shall.models.algorithm import Algorithm

_CONSTRUCTORS = {
    Algorithm.SHA1: hashlib.sha1,
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
    Algorithm.MD5: hashlib.md5,
}


def digest(algorithm: Algorithm, data: bytes) -> bytes:
    """Compute the raw digest of ``data``.

    Args:
        algorithm: Algorithm to apply
        data: Bytes to hash

    Returns:
        Digest bytes, ``algorithm.digest_size`` long
    """
    # MD5 and SHA1 are used as checksums here, not for security, so
    # FIPS-restricted builds must still allow them.
    hasher = _CONSTRUCTORS[algorithm](usedforsecurity=False)
    hasher.update(data)
    return hasher.digest()
