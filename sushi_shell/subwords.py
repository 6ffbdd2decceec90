"""The pieces a shell word is built from, and the simplest kinds of them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .error_message import internal

if TYPE_CHECKING:
    from .feeder import Feeder
    from .state import ShellState

_BLANKS = " \t\n"


def _escape_glob(text: str) -> str:
    return (text.replace("\\", "\\\\")
                .replace("*", "\\*")
                .replace("?", "\\?")
                .replace("[", "\\[")
                .replace("]", "\\]"))


def split_str(text: str) -> list[str]:
    """Split text on unescaped blanks; neighbouring blanks give empty parts."""
    parts: list[str] = []
    escaped = False
    start = 0
    for i, c in enumerate(text):
        if escaped or c == "\\":
            escaped = not escaped
            continue
        if c in _BLANKS:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


@dataclass
class Subword:
    """A piece of a word. Subclasses refine how it expands and unquotes."""

    text: str = ""

    def set_text(self, text: str) -> None:
        """Replace the text; kinds that keep their text ignore this."""

    def substitute(self, state: ShellState) -> bool:
        """Expand the subword in place; return False on an expansion error."""
        return True

    def substitute_replace(self) -> list[Subword]:
        """Subwords that should take this one's place after substitution."""
        return []

    def split(self, state: ShellState) -> list[Subword]:
        return [SimpleSubword(part) for part in split_str(self.text)]

    def make_glob_string(self) -> str:
        return self.text

    def make_unquoted_string(self) -> str | None:
        return self.text or None

    def is_name(self) -> bool:
        return False

    def no_split(self) -> bool:
        return False

    def child_subwords(self) -> list[Subword] | None:
        return None


@dataclass
class SimpleSubword(Subword):
    """Plain text or a single symbol."""

    def set_text(self, text: str) -> None:
        self.text = text

    @classmethod
    def parse(cls, feeder: Feeder) -> SimpleSubword | None:
        length = feeder.scanner_subword_symbol()
        if length > 0:
            return cls(feeder.consume(length))
        length = feeder.scanner_subword()
        if length > 0:
            return cls(feeder.consume(length))
        return None


@dataclass
class SingleQuoted(Subword):
    """Text in single quotes, kept literally."""

    def make_unquoted_string(self) -> str | None:
        return self.text[1:-1]

    def make_glob_string(self) -> str:
        return _escape_glob(self.text[1:-1])

    def no_split(self) -> bool:
        return True

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> SingleQuoted | None:
        length = feeder.scanner_single_quoted_subword(state)
        if length == 0:
            return None
        return cls(feeder.consume(length))


@dataclass
class EscapedChar(Subword):
    """A backslash and the character it escapes."""

    def make_unquoted_string(self) -> str | None:
        if not self.text:
            internal("unescaped escaped char")
        if len(self.text) == 1:
            return None
        return self.text[1:]

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> EscapedChar | None:
        length = feeder.scanner_escaped_char(state)
        if length == 0:
            return None
        return cls(feeder.consume(length))


@dataclass
class Parameter(Subword):
    """A special or positional parameter such as $1 or $?."""

    def substitute(self, state: ShellState) -> bool:
        self.text = state.get_param(self.text[1:])
        return True

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> Parameter | None:
        length = feeder.scanner_dollar_special_and_positional_param(state)
        if length == 0:
            return None
        return cls(feeder.consume(length))


@dataclass
class VarName(Subword):
    """A run of characters that can form a variable name."""

    def set_text(self, text: str) -> None:
        self.text = text

    def is_name(self) -> bool:
        return True

    @classmethod
    def parse(cls, feeder: Feeder, state: ShellState) -> VarName | None:
        length = feeder.scanner_name(state)
        if length == 0:
            return None
        return cls(feeder.consume(length))