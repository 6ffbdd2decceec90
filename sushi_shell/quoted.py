"""Double-quoted strings and extended glob groups inside words."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from .braced_param import BracedParam
from .error_message import internal
from .subwords import EscapedChar, Parameter, SimpleSubword, Subword, VarName
from .word import Word, substitute

if TYPE_CHECKING:
    from .feeder import Feeder
    from .state import ShellState


def _escape_glob(text: str) -> str:
    return (text.replace("\\", "\\\\")
                .replace("*", "\\*")
                .replace("?", "\\?")
                .replace("[", "\\[")
                .replace("]", "\\]"))


class _SubwordCollector:
    """Shared parsing steps for subwords that hold other subwords."""

    text: str
    subwords: list[Subword]

    def _push(self, subword: Subword) -> None:
        self.text += subword.text
        self.subwords.append(subword)

    def _push_simple(self, feeder: Feeder, length: int) -> bool:
        if length == 0:
            return False
        self._push(SimpleSubword(feeder.consume(length)))
        return True

    def _push_parsed(self, subword: Subword | None) -> bool:
        if subword is None:
            return False
        self._push(subword)
        return True

    def _eat_dollar(self, feeder: Feeder) -> bool:
        return feeder.starts_with("$") and self._push_simple(feeder, 1)

    def _eat_escaped_char(self, feeder: Feeder, state: ShellState) -> bool:
        if feeder.starts_with("\\$") or feeder.starts_with("\\\\"):
            self._push(EscapedChar(feeder.consume(2)))
            return True
        return self._push_simple(feeder, feeder.scanner_escaped_char(state))

    def _eat_name(self, feeder: Feeder, state: ShellState) -> bool:
        length = feeder.scanner_name(state)
        if length == 0:
            return False
        self._push(VarName(feeder.consume(length)))
        return True


@dataclass
class DoubleQuoted(_SubwordCollector, Subword):
    """Text in double quotes, in which parameters are still expanded."""

    subwords: list[Subword] = field(default_factory=list)
    split_points: list[int] = field(default_factory=list)

    def substitute(self, state: ShellState) -> bool:
        word = Word(subwords=self._replace_position_params(state))
        if not substitute(word, state):
            return False
        self.subwords = word.subwords
        self.text = "".join(sw.text for sw in self.subwords)
        return True

    def make_glob_string(self) -> str:
        return _escape_glob(self.text)

    def make_unquoted_string(self) -> str | None:
        return "".join(s for s in (sw.make_unquoted_string() for sw in self.subwords)
                       if s is not None)

    def split(self, state: ShellState) -> list[Subword]:
        points = list(self.split_points)
        points[-1] = len(self.split_points)

        pieces: list[Subword] = []
        last = 0
        for point in points:
            pieces.append(DoubleQuoted(subwords=list(self.subwords[last:point])))
            last = point
        return pieces

    def no_split(self) -> bool:
        return len(self.split_points) < 2

    def _replace_position_params(self, state: ShellState) -> list[Subword]:
        replaced: list[Subword] = []
        for sw in self.subwords:
            if sw.text == "$@":
                for param in state.get_position_params():
                    replaced.append(SimpleSubword(param))
                    self.split_points.append(len(replaced))
            else:
                replaced.append(copy.deepcopy(sw))
        return replaced

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> DoubleQuoted | None:
        if not feeder.starts_with('"'):
            return None

        ans = cls(feeder.consume(1))
        eaters: tuple[Callable[[], bool], ...] = (
            lambda: ans._push_parsed(BracedParam.parse(feeder, state)),
            lambda: ans._push_parsed(Parameter.parse(feeder, state)),
            lambda: ans._eat_dollar(feeder),
            lambda: ans._eat_escaped_char(feeder, state),
            lambda: ans._eat_name(feeder, state),
            lambda: ans._push_simple(feeder, feeder.scanner_double_quoted_subword(state)),
        )

        while True:
            while any(eat() for eat in eaters):
                pass

            if feeder.starts_with('"'):
                ans.text += feeder.consume(1)
                return ans
            if len(feeder) > 0:
                internal("unknown chars in double quoted word")
            if not feeder.feed_additional_line(state):
                return None


@dataclass
class ExtGlob(_SubwordCollector, Subword):
    """An extended glob group such as @(a|b); its parts join the enclosing word."""

    subwords: list[Subword] = field(default_factory=list)

    def child_subwords(self) -> list[Subword] | None:
        return self.subwords

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> ExtGlob | None:
        if "extglob" not in state.shopts or feeder.scanner_extglob_head() == 0:
            return None

        head = feeder.consume(2)
        ans = cls(head, [SimpleSubword(head)])
        eaters: tuple[Callable[[], bool], ...] = (
            lambda: ans._push_parsed(BracedParam.parse(feeder, state)),
            lambda: ans._push_parsed(cls.parse(feeder, state)),
            lambda: ans._push_parsed(Parameter.parse(feeder, state)),
            lambda: ans._eat_dollar(feeder),
            lambda: ans._eat_escaped_char(feeder, state),
            lambda: ans._eat_name(feeder, state),
            lambda: ans._push_simple(feeder, feeder.scanner_subword_symbol()),
            lambda: ans._push_simple(feeder, feeder.scanner_extglob_subword(state)),
        )

        while True:
            while any(eat() for eat in eaters):
                pass

            if feeder.starts_with(")"):
                ans.text += feeder.consume(1)
                ans.subwords.append(SimpleSubword(")"))
                return ans
            if feeder.starts_with("|"):
                ans.text += feeder.consume(1)
                ans.subwords.append(SimpleSubword("|"))
            elif len(feeder) > 0:
                internal("unknown chars in double quoted word")
            elif not feeder.feed_additional_line(state):
                return None