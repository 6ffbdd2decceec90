"""Braced parameter expansion: ${name}, ${name[i]} and ${name:-word} forms."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .subscript import Subscript
from .subwords import SimpleSubword, Subword
from .word import Word, parse_subword

if TYPE_CHECKING:
    from .feeder import Feeder
    from .state import ShellState

_SPECIAL_PARAMS = "$?*@#-!_0123456789"


class _Incomplete(Exception):
    """The input ended before the closing brace."""


def _is_name_char(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z" or "0" <= c <= "9" or c == "_"


def is_param(name: str) -> bool:
    """Return True if the name is a valid variable, special or positional parameter."""
    if not name:
        return False
    if len(name) == 1 and name in _SPECIAL_PARAMS:
        return True
    if "0" <= name[0] <= "9":
        return all("0" <= c <= "9" for c in name)
    return all(_is_name_char(c) for c in name)


@dataclass
class BracedParam(Subword):
    """A ${...} expansion."""

    name: str = ""
    unknown: str = ""
    subscript: Subscript | None = None
    default_symbol: str | None = None
    default_value: Word | None = None

    def set_text(self, text: str) -> None:
        self.text = text

    def substitute(self, state: ShellState) -> bool:
        if not is_param(self.name) or (
                self.unknown and not self.unknown.startswith(("-", ","))):
            print(f"sush: {self.text}: bad substitution", file=sys.stderr)
            return False

        if self.subscript is not None:
            index = self.subscript.eval()
            if index is not None:
                self.text = state.get_array(self.name, index)
        else:
            self.text = state.get_param(self.name)

        if self.default_symbol is None:
            return True
        if self.default_symbol == ":+" or self.text == "":
            return self._replace_to_default(state)
        self.default_value = None
        return True

    def substitute_replace(self) -> list[Subword]:
        if self.default_value is None:
            return []
        return list(self.default_value.subwords)

    def _replace_to_default(self, state: ShellState) -> bool:
        if self.default_value is None:
            return False
        word = self.default_value.tilde_and_dollar_expansion(state)
        if word is None:
            return False

        value = "".join(sw.text for sw in word.subwords)
        symbol = self.default_symbol
        if symbol == ":-":
            self.default_value = word
            return True
        if symbol == ":=":
            state.set_param(self.name, value)
            self.default_value = None
            self.text = value
            return True
        if symbol == ":?":
            print(f"sush: {self.name}: {value}", file=sys.stderr)
            return False
        if symbol == ":+":
            self.default_value = None if self.text == "" else word
            return True
        return False

    def _eat_param(self, feeder: Feeder, state: ShellState) -> bool:
        length = feeder.scanner_name(state) or feeder.scanner_special_and_positional_param()
        if length:
            self.name = feeder.consume(length)
            self.text += self.name
            return True
        return feeder.starts_with("}")

    def _eat_subscript(self, feeder: Feeder, state: ShellState) -> None:
        subscript = Subscript.parse(feeder, state)
        if subscript is not None:
            self.text += subscript.text
            self.subscript = subscript

    def _push_default(self, length: int, feeder: Feeder, word: Word) -> None:
        blank = feeder.consume(length)
        word.subwords.append(SimpleSubword(blank))
        self.text += blank

    def _eat_default_value(self, feeder: Feeder, state: ShellState) -> None:
        length = feeder.scanner_parameter_default_symbol()
        if length == 0:
            return
        symbol = feeder.consume(length)
        self.default_symbol = symbol
        self.text += symbol
        self.text += feeder.consume(feeder.scanner_blank(state))

        word = Word()
        while not feeder.starts_with("}"):
            progressed = False
            subword = parse_subword(feeder, state)
            if subword is not None:
                self.text += subword.text
                word.text += subword.text
                word.subwords.append(subword)
                progressed = True

            if feeder.starts_with("\n"):
                self._push_default(1, feeder, word)
                if not feeder.feed_additional_line(state):
                    raise _Incomplete
                progressed = True

            blank = feeder.scanner_blank(state)
            if blank:
                self._push_default(blank, feeder, word)
                progressed = True

            if not progressed:
                if len(feeder) > 0:
                    break
                if not feeder.feed_additional_line(state):
                    raise _Incomplete

        self.default_value = word

    def _eat_unknown(self, feeder: Feeder, state: ShellState) -> None:
        if len(feeder) == 0 and not feeder.feed_additional_line(state):
            raise _Incomplete
        unknown = feeder.consume(2 if feeder.starts_with("\\}") else 1)
        self.unknown += unknown
        self.text += unknown

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> BracedParam | None:
        if not feeder.starts_with("${"):
            return None

        ans = cls(feeder.consume(2))
        try:
            if ans._eat_param(feeder, state):
                ans._eat_subscript(feeder, state)
                ans._eat_default_value(feeder, state)
            while not feeder.starts_with("}"):
                ans._eat_unknown(feeder, state)
        except _Incomplete:
            return None

        ans.text += feeder.consume(1)
        return ans