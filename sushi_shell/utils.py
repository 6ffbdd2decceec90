"""Small helpers shared across the shell."""

from __future__ import annotations

import os

_RESERVED = frozenset(
    ["[[", "]]", "{", "}", "while", "for", "do", "done", "if", "then",
     "elif", "else", "fi", "case"]
)


def reserved(word: str) -> bool:
    """Return True if the word is a reserved word of the shell grammar."""
    return word in _RESERVED


def split_words(text: str) -> list[str]:
    """Split a command line on blanks, keeping quoted and escaped parts whole."""
    words: list[str] = []
    in_quote = False
    escaped = False
    quote = " "
    current = ""

    for c in text:
        if escaped or c == "\\":
            escaped = not escaped
            current += c
            continue

        if c in ("'", '"'):
            if c == quote:
                in_quote = not in_quote
                quote = " "
            elif quote == " ":
                in_quote = not in_quote
                quote = c
            current += c
            continue

        if in_quote:
            current += c
            continue

        if c in (" ", "\t"):
            if current:
                words.append(current)
                current = ""
        else:
            current += c

    if current:
        words.append(current)
    return words


def is_wsl() -> bool:
    """Return True when running under Windows Subsystem for Linux."""
    try:
        release = os.uname().release
    except (AttributeError, OSError):
        return False
    return "WSL" in release