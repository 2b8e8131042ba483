"""Effective algorithm selection."""

from collections.abc import Iterable

from shall.exceptions import SelectionError
from shall.models.algorithm import Algorithm


def select_algorithms(
    flags: Iterable[Algorithm],
    directory_mode: bool = False,
) -> tuple[Algorithm, ...]:
    """Derive the algorithms to run from the flags the user set.

    With no flags, every algorithm runs, except in directory mode where
    exactly one flag is mandatory.

    Args:
        flags: Algorithms that were explicitly requested
        directory_mode: Whether a directory is being hashed

    Returns:
        Selected algorithms in canonical order (SHA1, SHA256, SHA512, MD5)

    Raises:
        SelectionError: If directory mode has zero or several flags
    """
    requested = frozenset(flags)

    if directory_mode:
        if len(requested) != 1:
            raise SelectionError(
                "exactly one hash type required",
                selected=sorted(a.label for a in requested),
            )
    elif not requested:
        return tuple(Algorithm)

    return tuple(a for a in Algorithm if a in requested)
