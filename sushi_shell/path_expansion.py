"""Pathname expansion of glob patterns against the file system."""

from __future__ import annotations

from . import directory

_GLOB_CHARS = "*?@+!["


def expand(globstr: str, extglob: bool) -> list[str]:
    """Return the sorted paths matching the pattern, or [] if it has no glob characters."""
    if not any(ch in globstr for ch in _GLOB_CHARS):
        return []

    candidates = [""]
    for element in globstr.split("/"):
        candidates = [
            path
            for candidate in candidates
            for path in directory.glob(candidate, element, extglob)
        ]

    return sorted(candidate[:-1] for candidate in candidates)