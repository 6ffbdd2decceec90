"""Directory listing and per-component glob matching."""

from __future__ import annotations

import os

from .glob import compare


def files(directory: str) -> list[str]:
    """Return the names of the entries in a directory, or [] if it cannot be read."""
    try:
        return os.listdir(directory or ".")
    except OSError:
        return []


def glob(directory: str, pattern: str, extglob: bool) -> list[str]:
    """Match one path component against the entries of a directory.

    Each result is the directory prefix, the matched name and a trailing slash.
    """
    if pattern in ("", ".", ".."):
        return [f"{directory}{pattern}/"]

    names = files(directory) + [".", ".."]
    show_hidden = pattern.startswith(".")
    return [
        f"{directory}{name}/"
        for name in names
        if (show_hidden or not name.startswith(".")) and compare(name, pattern, extglob)
    ]