"""Brace expansion: {a,b,c}, {1..9} and {a..z..2}."""

from __future__ import annotations

import copy
import re
from itertools import pairwise
from typing import NamedTuple, Sequence

from .subwords import SimpleSubword, SingleQuoted, Subword

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

_HIGH_CHAR_TABLE = (
    "^?", "\\M-^@", "\\M-^A", "\\M-^B", "\\M-^C", "\\M-^D", "\\M-^E", "\\M-^F",
    "\\M-^G", "\\M-^H", "\\M-\t", "\\M-\n", "\\M-^K", "\\M-^L", "\\M-^M", "\\M-^N",
    "\\M-^O", "\\M-^P", "\\M-^Q", "\\M-^R", "\\M-^S", "\\M-^T", "\\M-^U", "\\M-^V",
    "\\M-^W", "\\M-^X", "\\M-^Y", "\\M-^Z", "\\M-^[", "\\M-^\\", "\\M-^]", "\\M-^^",
    "\\M-^_", " ", "¡",
)


class _Brace(NamedTuple):
    delimiters: list[int]
    operands: int | None  # None for a comma list, 2 or 3 for a range


def expand(subwords: Sequence[Subword]) -> list[list[Subword]]:
    """Expand the braces in a word given as subwords; return one list per word."""
    subwords = list(subwords)
    _invalidate_brace(subwords)
    _connect_minus(subwords)

    skip_until = 0
    brace_positions = [i for i, sw in enumerate(subwords) if sw.text == "{"]
    for i in brace_positions:
        if i < skip_until:
            continue

        brace = _find_brace(subwords[i:])
        if brace is None:
            continue
        delimiters = [d + i for d in brace.delimiters]

        if i > 0 and subwords[i - 1].text in ("$", "$$"):
            skip_until = delimiters[-1]
            continue

        if brace.operands is None:
            return _expand_comma(subwords, delimiters)
        return _expand_range(subwords, delimiters, brace.operands)

    return [subwords]


def _parse_i32(text: str) -> int | None:
    if not _INT_RE.fullmatch(text):
        return None
    n = int(text)
    return n if _I32_MIN <= n <= _I32_MAX else None


def _invalidate_brace(subwords: list[Subword]) -> None:
    if len(subwords) >= 2 and subwords[0].text == "{" and subwords[1].text == "}":
        head = copy.copy(subwords[0])
        head.set_text("{}")
        subwords[0:2] = [head]


def _connect_minus(subwords: list[Subword]) -> None:
    if len(subwords) < 2:
        return

    minus_positions = [i for i, sw in enumerate(subwords) if sw.text == "-"]
    for i in minus_positions:
        if i + 1 >= len(subwords):
            continue
        following = subwords[i + 1].text
        if not all("0" <= ch <= "9" for ch in following):
            continue
        subwords[i] = SimpleSubword("")
        subwords[i + 1] = SimpleSubword("-" + following)

    subwords[:] = [sw for sw in subwords if sw.text]


def _find_brace(subwords: Sequence[Subword]) -> _Brace | None:
    stack: list[str | None] = []
    for sw in subwords:
        stack.append(sw.text)
        if sw.text == "}":
            found = _get_delimiters(stack)
            if found is not None:
                return found
    return None


def _get_delimiters(stack: list[str | None]) -> _Brace | None:
    commas: list[int] = []
    periods: list[int] = []

    for i in range(len(stack) - 2, 0, -1):
        if stack[i] == ",":
            commas.append(i)
        elif stack[i] == ".":
            periods.append(i)
        elif stack[i] == "{":
            stack[i:] = [None] * (len(stack) - i)
            return None

    last = len(stack) - 1
    if commas:
        return _Brace([0, *reversed(commas), last], None)

    if len(periods) == 2 and periods[0] == periods[1] + 1:
        return _Brace([0, *reversed(periods), last], 2)

    if (len(periods) == 4
            and periods[0] == periods[1] + 1
            and periods[2] == periods[3] + 1):
        return _Brace([0, *reversed(periods), last], 3)

    return None


def _expand_comma(subwords: list[Subword], delimiters: list[int]) -> list[list[Subword]]:
    left = subwords[:delimiters[0]]
    right = subwords[delimiters[-1] + 1:]
    _invalidate_brace(right)

    series = [subwords[start + 1:end] for start, end in pairwise(delimiters)]
    return _combine(series, left, right)


def _expand_range(subwords: list[Subword], delimiters: list[int],
                  operands: int) -> list[list[Subword]]:
    start = subwords[delimiters[0] + 1].make_unquoted_string()
    end = subwords[delimiters[2] + 1].make_unquoted_string()
    if start is None or end is None:
        return [subwords]

    if operands == 2:
        skip = 1
    else:
        step = _parse_i32(subwords[delimiters[4] + 1].text)
        if step is None:
            return [subwords]
        skip = abs(step)
    skip = max(skip, 1)

    series = _gen_nums(start, end, skip) or _gen_chars(start, end, skip)
    if not series:
        return [subwords]

    left = subwords[:delimiters[0]]
    right = subwords[delimiters[-1] + 1:]
    _invalidate_brace(right)
    return _combine([[element] for element in series], left, right)


def _gen_nums(start: str, end: str, skip: int) -> list[Subword]:
    first, last = _parse_i32(start), _parse_i32(end)
    if first is None or last is None:
        return []

    nums = list(range(min(first, last), max(first, last) + 1))
    if first > last:
        nums.reverse()
    return [SingleQuoted(f"'{n}'") for n in nums[::skip]]


def _char_to_subword(code: int) -> Subword:
    if 127 <= code < 127 + len(_HIGH_CHAR_TABLE):
        text = _HIGH_CHAR_TABLE[code - 127]
    else:
        text = chr(code)
    return SingleQuoted(f"'{text}'")


def _gen_chars(start: str, end: str, skip: int) -> list[Subword]:
    if len(start) != 1 or len(end) != 1:
        return []

    first, last = ord(start), ord(end)
    codes = [c for c in range(min(first, last), max(first, last) + 1)
             if not 0xD800 <= c <= 0xDFFF]
    if first > last:
        codes.reverse()
    return [_char_to_subword(c) for c in codes[::skip]]


def _combine(series: list[list[Subword]], left: Sequence[Subword],
             right: Sequence[Subword]) -> list[list[Subword]]:
    words: list[list[Subword]] = []
    for middle in series:
        word = [copy.deepcopy(sw) for sw in (*left, *middle, *right)]
        words.extend(expand(word))
    return words