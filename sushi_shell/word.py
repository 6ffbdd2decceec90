"""Shell words: parsing them from input and expanding them into arguments."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from . import brace_expansion, path_expansion
from .subwords import (
    EscapedChar,
    Parameter,
    SimpleSubword,
    SingleQuoted,
    Subword,
    VarName,
)

try:
    import pwd
except ImportError:  # pragma: no cover - non-POSIX platforms
    pwd = None

if TYPE_CHECKING:
    from .feeder import Feeder
    from .state import ShellState


def _word_from(subwords: list[Subword]) -> Word:
    return Word("".join(sw.text for sw in subwords), subwords)


@dataclass
class Word:
    """A shell word: its source text and the subwords it is made of."""

    text: str = ""
    subwords: list[Subword] = field(default_factory=list)

    def eval(self, state: ShellState) -> list[str] | None:
        """Fully expand the word into arguments; None on an expansion error."""
        words: list[Word] = []
        for subwords in brace_expansion.expand(self.subwords):
            expanded = _word_from(subwords).tilde_and_dollar_expansion(state)
            if expanded is None:
                return None
            words.extend(expanded.split_and_path_expansion(state))
        return _make_args(words)

    def eval_as_value(self, state: ShellState) -> str | None:
        """Expand the word as the right side of an assignment."""
        expanded = self.tilde_and_dollar_expansion(state)
        if expanded is None:
            return None
        return " ".join(_make_args(expanded.split_and_path_expansion(state)))

    def eval_for_case_word(self, state: ShellState) -> str | None:
        expanded = self.tilde_and_dollar_expansion(state)
        if expanded is None:
            return None
        return expanded.make_unquoted_word()

    def eval_for_case_pattern(self, state: ShellState) -> str | None:
        expanded = self.tilde_and_dollar_expansion(state)
        if expanded is None:
            return None
        return expanded.make_glob_string()

    def tilde_and_dollar_expansion(self, state: ShellState) -> Word | None:
        """Return an expanded copy of the word, or None on an expansion error."""
        word = copy.deepcopy(self)
        tilde_expand(word, state)
        return word if substitute(word, state) else None

    def split_and_path_expansion(self, state: ShellState) -> list[Word]:
        extglob = "extglob" in state.shopts
        result: list[Word] = []
        for word in split_word(self, state):
            paths = path_expansion.expand(word.make_glob_string(), extglob)
            if paths:
                result.extend(Word(p, [SimpleSubword(p)]) for p in paths)
            else:
                result.append(word)
        return result

    def make_unquoted_word(self) -> str | None:
        """Join the unquoted subwords; None if every subword vanished."""
        parts = [s for s in (sw.make_unquoted_string() for sw in self.subwords)
                 if s is not None]
        if not parts:
            return None
        return "".join(parts)

    def make_glob_string(self) -> str:
        return "".join(sw.make_glob_string() for sw in self.subwords)

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState,
              as_operand: bool = False) -> Word | None:
        """Parse one word; with as_operand, stop before an arithmetic symbol."""
        if feeder.starts_with("#"):
            return None

        parsed: list[Subword] = []
        while (sw := parse_subword(feeder, state)) is not None:
            parsed.append(sw)
            if as_operand and feeder.scanner_math_symbol(state) != 0:
                break

        if not parsed:
            return None

        text = "".join(sw.text for sw in parsed)
        subwords: list[Subword] = []
        for sw in parsed:
            children = sw.child_subwords()
            if children is None:
                subwords.append(sw)
            else:
                subwords.extend(children)
        return cls(text, subwords)


def _make_args(words: list[Word]) -> list[str]:
    return [s for s in (w.make_unquoted_word() for w in words) if s is not None]


def _replace_history_expansion(feeder: Feeder, state: ShellState) -> bool:
    length = feeder.scanner_history_expansion(state)
    if length == 0:
        return False

    last_arg = ""
    for entry in state.history[1:]:
        last = entry.split(" ")[-1]
        if not last.startswith("!$"):
            last_arg = last
            break

    feeder.replace(length, last_arg)
    return True


def parse_subword(feeder: Feeder, state: ShellState) -> Subword | None:
    """Parse the next subword of any kind from the feeder."""
    from .braced_param import BracedParam
    from .quoted import DoubleQuoted, ExtGlob

    while _replace_history_expansion(feeder, state):
        pass

    parsers: tuple[Callable[[], Subword | None], ...] = (
        lambda: BracedParam.parse(feeder, state),
        lambda: SingleQuoted.parse(feeder, state),
        lambda: DoubleQuoted.parse(feeder, state),
        lambda: ExtGlob.parse(feeder, state),
        lambda: EscapedChar.parse(feeder, state),
        lambda: Parameter.parse(feeder, state),
        lambda: VarName.parse(feeder, state),
        lambda: SimpleSubword.parse(feeder),
    )
    for parser in parsers:
        subword = parser()
        if subword is not None:
            return subword
    return None


def _connect_names(subwords: list[Subword], start: int) -> None:
    text = "$"
    count = 1
    for sw in subwords[start + 1:]:
        if not sw.is_name():
            break
        text += sw.text
        count += 1

    if count > 1:
        subwords[start] = Parameter(text)
        for sw in subwords[start + 1:start + count]:
            sw.set_text("")


def substitute(word: Word, state: ShellState) -> bool:
    """Perform parameter substitution on the word in place."""
    dollars = [i for i, sw in enumerate(word.subwords) if sw.text == "$"]
    for i in dollars:
        _connect_names(word.subwords, i)

    for sw in word.subwords:
        if not sw.substitute(state):
            return False

    replaced: list[Subword] = []
    for sw in word.subwords:
        replacement = sw.substitute_replace()
        replaced.extend(replacement if replacement else [sw])
    word.subwords = replaced
    return True


def _home_dir(user: str) -> str:
    if pwd is None:
        return ""
    try:
        return pwd.getpwnam(user).pw_dir
    except (KeyError, ValueError):
        return ""


def tilde_expand(word: Word, state: ShellState) -> None:
    """Replace a leading tilde prefix of the word in place."""
    if not word.subwords or word.subwords[0].text != "~":
        return

    length = next((i for i, sw in enumerate(word.subwords) if sw.text == "/"),
                  len(word.subwords))
    text = "".join(sw.text for sw in word.subwords[1:length])

    keys = {"": "HOME", "+": "PWD", "-": "OLDPWD"}
    value = state.get_param(keys[text]) if text in keys else _home_dir(text)
    if not value:
        return

    word.subwords[0] = SimpleSubword(value)
    for sw in word.subwords[1:length]:
        sw.set_text("")


def split_word(word: Word, state: ShellState) -> list[Word]:
    """Split the word on blanks produced by expansion."""
    for pos, sw in enumerate(word.subwords):
        if sw.no_split():
            continue
        pieces = sw.split(state)
        if len(pieces) == 1:
            continue

        words = [_word_from(word.subwords[:pos] + [pieces[0]])]
        words.extend(_word_from([piece]) for piece in pieces[1:-1])
        last = _word_from([pieces[-1]] + word.subwords[pos + 1:])
        return words + split_word(last, state)

    return [word]