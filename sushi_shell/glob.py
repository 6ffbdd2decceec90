"""Shell pattern matching with optional extended glob operators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .error_message import internal

_EXT_PREFIXES = "?*+@!"
_SPECIAL_CHARS = "@!+*?[\\"


@dataclass(frozen=True)
class _Normal:
    text: str


@dataclass(frozen=True)
class _Asterisk:
    pass


@dataclass(frozen=True)
class _Question:
    pass


@dataclass(frozen=True)
class _OneOf:
    chars: tuple[str, ...]
    inverse: bool = False


@dataclass(frozen=True)
class _ExtGlob:
    prefix: str
    patterns: tuple[str, ...]


_Wildcard = Union[_Normal, _Asterisk, _Question, _OneOf, _ExtGlob]


def compare(word: str, pattern: str, extglob: bool) -> bool:
    """Return True if the whole word matches the pattern."""
    candidates = [word]
    for wildcard in _parse(pattern, extglob):
        candidates = _apply(candidates, wildcard)
    return "" in candidates


def _apply(cands: list[str], w: _Wildcard) -> list[str]:
    if isinstance(w, _Normal):
        return [c[len(w.text):] for c in cands if c.startswith(w.text)]
    if isinstance(w, _Asterisk):
        return _asterisk(cands)
    if isinstance(w, _Question):
        return [c[1:] for c in cands if c]
    if isinstance(w, _OneOf):
        return _one_of(cands, w.chars, w.inverse)
    return _ext_paren(cands, w.prefix, w.patterns)


def _asterisk(cands: list[str]) -> list[str]:
    return [cand[i:] for cand in cands for i in range(len(cand), -1, -1)]


def _one_of(cands: list[str], chars: tuple[str, ...], inverse: bool) -> list[str]:
    return [cand[1:] for cand in cands if cand and ((cand[0] in chars) ^ inverse)]


def _ext_paren(cands: list[str], prefix: str, patterns: tuple[str, ...]) -> list[str]:
    if prefix == "?":
        return cands + _ext_once(cands, patterns)
    if prefix == "*":
        return _ext_zero_or_more(cands, patterns)
    if prefix == "+":
        return _ext_more_than_zero(cands, patterns)
    if prefix == "@":
        return _ext_once(cands, patterns)
    if prefix == "!":
        return _ext_not(cands, patterns)
    internal("unknown extglob prefix")


def _match_pattern(cands: list[str], pattern: str) -> list[str]:
    for wildcard in _parse(pattern, True):
        cands = _apply(cands, wildcard)
    return cands


def _ext_once(cands: list[str], patterns: tuple[str, ...]) -> list[str]:
    return [rest for p in patterns for rest in _match_pattern(list(cands), p)]


def _ext_zero_or_more(cands: list[str], patterns: tuple[str, ...]) -> list[str]:
    ans: list[str] = []
    pending = list(cands)
    while pending:
        ans.extend(pending)
        pending = [t for t in _ext_once(pending, patterns) if t not in ans]
    return ans


def _ext_more_than_zero(cands: list[str], patterns: tuple[str, ...]) -> list[str]:
    ans: list[str] = []
    pending = list(cands)
    while pending:
        pending = [t for t in _ext_once(pending, patterns) if t not in ans]
        ans.extend(pending)
    return ans


def _ext_not(cands: list[str], patterns: tuple[str, ...]) -> list[str]:
    ans = []
    for cand in cands:
        for end in range(len(cand), -1, -1):
            prefix = cand[:end]
            if "" not in _ext_once([prefix], patterns):
                ans.append(cand[end:])
    return ans


def _parse(pattern: str, extglob: bool) -> list[_Wildcard]:
    remaining = pattern
    ans: list[_Wildcard] = []

    while remaining:
        length = _scan_escaped_char(remaining)
        if length:
            ans.append(_Normal(remaining[1:length]))
            remaining = remaining[length:]
            continue

        if extglob:
            length, ext = _scan_ext_paren(remaining)
            if length and ext is not None:
                ans.append(ext)
                remaining = remaining[length:]
                continue

        length, bracket = _scan_bracket(remaining)
        if length and bracket is not None:
            ans.append(bracket)
            remaining = remaining[length:]
            continue

        if remaining.startswith("*"):
            ans.append(_Asterisk())
            remaining = remaining[1:]
            continue
        if remaining.startswith("?"):
            ans.append(_Question())
            remaining = remaining[1:]
            continue

        length = _scan_chars(remaining)
        if length == 0:
            length = 1
        ans.append(_Normal(remaining[:length]))
        remaining = remaining[length:]

    return ans


def _scan_escaped_char(remaining: str) -> int:
    if not remaining.startswith("\\"):
        return 0
    return 2 if len(remaining) > 1 else 1


def _scan_chars(remaining: str) -> int:
    for i, c in enumerate(remaining):
        if c in _SPECIAL_CHARS:
            return i
    return len(remaining)


def _scan_bracket(remaining: str) -> tuple[int, _OneOf | None]:
    if not remaining.startswith("["):
        return 0, None

    inverse = remaining.startswith(("[^", "[!"))
    length = 2 if inverse else 1
    chars: list[str] = []
    escaped = False

    for c in remaining[length:]:
        length += 1
        if escaped:
            chars.append(c)
            escaped = False
            continue
        if c == "\\":
            escaped = True
            continue
        if c == "]":
            return length, _OneOf(tuple(chars), inverse)
        chars.append(c)

    return 0, None


def _scan_ext_paren(remaining: str) -> tuple[int, _ExtGlob | None]:
    if len(remaining) < 2 or remaining[0] not in _EXT_PREFIXES or remaining[1] != "(":
        return 0, None

    prefix = remaining[0]
    chars: list[str] = []
    length = 2
    escaped = False
    nest = 0
    next_nest = False
    patterns: list[str] = []

    for c in remaining[2:]:
        length += 1
        if escaped:
            chars.append(c)
            escaped = False
            continue
        if c == "\\":
            escaped = True
            continue
        if c == "|" and nest == 0:
            patterns.append("".join(chars))
            chars.clear()
            continue

        if next_nest and c == "(":
            nest += 1
        next_nest = c in _EXT_PREFIXES

        if c == ")":
            if nest == 0:
                patterns.append("".join(chars))
                return length, _ExtGlob(prefix, tuple(patterns))
            nest -= 1

        chars.append(c)

    return 0, None